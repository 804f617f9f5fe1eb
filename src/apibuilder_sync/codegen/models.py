"""Records passed between the planner, the resolver and the applier."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GeneratedFile:
    """One file emitted by a generator. `dir` is relative and may be empty."""

    name: str
    dir: str = ""
    contents: str = ""


@dataclass(frozen=True)
class ResolvedTarget:
    """Where a generated file goes on disk."""

    path: Path
    is_directory: bool


@dataclass(frozen=True)
class PendingUpdate:
    """A file whose generated content differs from what is on disk."""

    source: str
    generator: str
    target_path: Path
