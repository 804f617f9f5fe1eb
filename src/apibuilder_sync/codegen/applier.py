"""Write planned updates to disk."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from apibuilder_sync.codegen.models import PendingUpdate
from apibuilder_sync.errors import FileWriteError
from apibuilder_sync.paths import display_path

logger = logging.getLogger(__name__)


@dataclass
class ApplyResult:
    """Result of applying a plan."""

    applied: list[Path] = field(default_factory=list)
    errors: list[FileWriteError] = field(default_factory=list)

    @property
    def applied_count(self) -> int:
        return len(self.applied)


def write_update(update: PendingUpdate) -> None:
    """Overwrite one target, creating its parent directory if needed.

    Raises:
        FileWriteError: On any local I/O failure.
    """
    path = update.target_path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(update.source, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(path, str(e)) from e


def apply_updates(
    updates: list[PendingUpdate],
    emit: Callable[[str], None] | None = None,
) -> ApplyResult:
    """Apply updates in order. A failed write does not stop the rest."""
    result = ApplyResult()

    for update in updates:
        if emit:
            emit(f"Updating {update.generator}: {display_path(update.target_path)}")
        try:
            write_update(update)
        except FileWriteError as e:
            logger.error(f"Failed to write {update.target_path}: {e.reason}")
            result.errors.append(e)
            continue
        result.applied.append(update.target_path)

    return result
