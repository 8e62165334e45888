from __future__ import annotations

from .lib.assets import Anchor, FileSpec

CONFIG_FILES: tuple[FileSpec, ...] = (
    FileSpec(".csscomb.json", (".csscomb.json",), Anchor.WORKDIR),
    FileSpec(".eslintrc.js", (".eslintrc.js",), Anchor.WORKDIR),
    FileSpec(".editorconfig", (".editorconfig",), Anchor.ROOT),
)

GITIGNORE = FileSpec(".gitignore", (".gitignore",), Anchor.WORKDIR)

PRECOMMIT_HOOK = FileSpec("pre-commit", (".git", "hooks", "pre-commit"), Anchor.ROOT)
