"""platform-starter: bootstrap a project with shared lint/format tooling.

Core design goals:
- Idempotent, single-pass provisioning
- Never overwrite user files without asking
- Fail fast: any failed stage aborts the run
- Centralized logging
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
