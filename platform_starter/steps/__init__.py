from .step_10_install_requirements import InstallRequirementsStep
from .step_20_ensure_gitignore import EnsureGitignoreStep
from .step_30_deploy_config import DeployConfigStep
from .step_40_bootstrap_repo import BootstrapRepoStep
from .step_50_install_precommit_hook import InstallPrecommitHookStep

__all__ = [
    "InstallRequirementsStep",
    "EnsureGitignoreStep",
    "DeployConfigStep",
    "BootstrapRepoStep",
    "InstallPrecommitHookStep",
]
