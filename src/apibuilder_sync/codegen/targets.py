"""Resolve where a generated file is written.

A configured target is either a single file overwritten in place (e.g.
`api/conf/routes`) or a directory that receives one file per generated
name (e.g. `api/app/generated`). The kind can be set explicitly in the
config; otherwise it is inferred from the path and the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path

from apibuilder_sync.codegen.models import GeneratedFile, ResolvedTarget
from apibuilder_sync.errors import FileWriteError

logger = logging.getLogger(__name__)


def base_path(root: Path | str, file: GeneratedFile, create_directories: bool) -> Path:
    """Target root, extended by the file's own subdirectory when enabled."""
    if create_directories and file.dir:
        return Path(root) / file.dir
    return Path(root)


def is_directory_target(base: Path, file: GeneratedFile, kind: str | None = None) -> bool:
    """Decide whether `base` is a directory to populate or the file itself.

    Without an explicit kind, `base` is a directory unless it already ends
    with the file name or names an existing plain file.
    """
    if kind == "file":
        return False
    if kind == "directory":
        return True
    return not str(base).endswith(file.name) and not base.is_file()


def resolve_target(
    root: Path | str,
    file: GeneratedFile,
    create_directories: bool = False,
    kind: str | None = None,
) -> ResolvedTarget:
    """Resolve the on-disk path for a generated file.

    Directory targets are created (with intermediate directories) as part of
    resolution, so the answer cannot change between planning and writing.

    Raises:
        FileWriteError: If a directory target cannot be created.
    """
    base = base_path(root, file, create_directories)

    if not is_directory_target(base, file, kind):
        return ResolvedTarget(path=base, is_directory=False)

    if not base.is_dir():
        logger.debug(f"Creating directory {base}")
        try:
            base.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileWriteError(base, f"cannot create directory: {e}") from e

    return ResolvedTarget(path=base / file.name, is_directory=True)
