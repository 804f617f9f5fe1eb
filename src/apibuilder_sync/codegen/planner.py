"""Plan a sync: fetch, resolve, compare. Nothing is written here.

The only filesystem change made while planning is creating directory
targets, which is part of resolving where a file goes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from apibuilder_sync.codegen.detect import differs
from apibuilder_sync.codegen.models import GeneratedFile, PendingUpdate
from apibuilder_sync.codegen.targets import resolve_target
from apibuilder_sync.config.loader import ProjectConfig, SyncConfig, TargetConfig
from apibuilder_sync.errors import FileWriteError, NotFound
from apibuilder_sync.paths import display_path

logger = logging.getLogger(__name__)

Fetch = Callable[[str, str, str, str], list[GeneratedFile]]

CHANGED = "changed"
UNCHANGED = "unchanged"


@dataclass
class FileStatus:
    path: Path
    changed: bool
    error: str | None = None

    @property
    def status(self) -> str:
        if self.error:
            return f"error: {self.error}"
        return CHANGED if self.changed else UNCHANGED


@dataclass
class TargetReport:
    """What happened for one (project, generator, target)."""

    project: ProjectConfig
    generator: str
    target: TargetConfig
    found: bool = True
    files: list[FileStatus] = field(default_factory=list)

    def header(self) -> str:
        return f"{self.project.identity} {self.generator} -> {self.target.path}"

    def lines(self) -> list[str]:
        if not self.found:
            return [self.header(), "  not found"]
        return [self.header()] + [
            f"  {display_path(f.path)}: {f.status}" for f in self.files
        ]


@dataclass
class SyncPlan:
    """Per-target reports and the writes they call for, in discovery order."""

    reports: list[TargetReport] = field(default_factory=list)
    updates: list[PendingUpdate] = field(default_factory=list)

    def lines(self) -> list[str]:
        return [line for report in self.reports for line in report.lines()]

    @property
    def not_found(self) -> list[TargetReport]:
        return [r for r in self.reports if not r.found]

    @property
    def unchanged(self) -> list[Path]:
        return [f.path for r in self.reports for f in r.files if not f.changed and not f.error]

    @property
    def errors(self) -> list[FileStatus]:
        return [f for r in self.reports for f in r.files if f.error]


def read_existing(path: Path) -> str:
    """Current contents of a resolved target, or "" if no file is there.

    Bytes that are not valid UTF-8 are replaced, so such a file compares as
    changed and gets rewritten.

    Raises:
        FileWriteError: If the file exists but cannot be read.
    """
    if not path.is_file():
        return ""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileWriteError(path, f"cannot read: {e}") from e
    return data.decode("utf-8", errors="replace")


def plan_target(
    config: SyncConfig,
    project: ProjectConfig,
    generator: str,
    target: TargetConfig,
    files: list[GeneratedFile],
) -> tuple[TargetReport, list[PendingUpdate]]:
    """Compare fetched files for one target against disk.

    A local I/O failure is recorded on that file's status; the remaining
    files are still compared.
    """
    report = TargetReport(project=project, generator=generator, target=target)
    updates = []
    root = config.target_root(target)

    for file in files:
        try:
            resolved = resolve_target(
                root, file,
                create_directories=config.settings.create_directories,
                kind=target.kind,
            )
            existing = read_existing(resolved.path)
        except FileWriteError as e:
            logger.error(f"Skipping {file.name} for {target.path}: {e}")
            report.files.append(FileStatus(path=e.path, changed=False, error=e.reason))
            continue

        changed = differs(file.contents, existing)
        report.files.append(FileStatus(path=resolved.path, changed=changed))
        if changed:
            updates.append(PendingUpdate(
                source=file.contents,
                generator=generator,
                target_path=resolved.path,
            ))

    return report, updates


def plan_sync(
    config: SyncConfig,
    fetch: Fetch,
    apps: list[str] | None = None,
    emit: Callable[[str], None] | None = None,
) -> SyncPlan:
    """Walk projects -> generators -> targets in config order and build a plan.

    Args:
        config: Loaded project configuration.
        fetch: Returns generated files for (org, app, version, generator).
            Raises NotFound for a missing combination; anything else it
            raises aborts the plan.
        apps: Only plan these application names.
        emit: Called with each status line as soon as it is known.

    Returns:
        SyncPlan with one report per target and the pending updates.
    """
    plan = SyncPlan()

    for project in config.projects:
        if apps and project.name not in apps:
            continue

        for generator in project.generators:
            for target in generator.targets:
                logger.debug(f"Fetching {project.identity}/{generator.name} for {target.path}")
                try:
                    files = fetch(project.org, project.name, project.version, generator.name)
                except NotFound as e:
                    logger.info(f"{e}, skipping {target.path}")
                    report = TargetReport(
                        project=project, generator=generator.name,
                        target=target, found=False,
                    )
                    updates = []
                else:
                    report, updates = plan_target(
                        config, project, generator.name, target, files,
                    )

                plan.reports.append(report)
                plan.updates.extend(updates)
                if emit:
                    for line in report.lines():
                        emit(line)

    return plan
