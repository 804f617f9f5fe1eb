"""Load `.apibuilder/config` into typed records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from apibuilder_sync.config import CREATE_DIRECTORIES
from apibuilder_sync.errors import ConfigError
from apibuilder_sync.paths import config_path, project_root

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetConfig:
    """One output location for a generator.

    `kind` is "file", "directory" or None. None means the kind is inferred
    from the filesystem when the target is resolved.
    """

    path: str
    kind: str | None = None


@dataclass(frozen=True)
class GeneratorConfig:
    name: str
    targets: tuple[TargetConfig, ...] = ()


@dataclass(frozen=True)
class ProjectConfig:
    """One (org, application, version) and the generators to run for it."""

    org: str
    name: str
    version: str
    generators: tuple[GeneratorConfig, ...] = ()

    @property
    def identity(self) -> str:
        return f"{self.org}/{self.name}/{self.version}"


@dataclass(frozen=True)
class SyncSettings:
    create_directories: bool = False


@dataclass(frozen=True)
class SyncConfig:
    """Parsed configuration plus the directory targets are relative to."""

    root: Path
    settings: SyncSettings = field(default_factory=SyncSettings)
    projects: tuple[ProjectConfig, ...] = ()

    def target_root(self, target: TargetConfig) -> Path:
        return self.root / target.path


def read_config(path: Path | str) -> dict:
    """Read and parse the YAML config file.

    Raises:
        ConfigError: If the file is missing, unreadable or not a YAML mapping.
    """
    cfg_path = Path(path)
    if not cfg_path.is_file():
        raise ConfigError(f"Config file not found: {cfg_path}")

    try:
        with open(cfg_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {cfg_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {cfg_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config at {cfg_path} is not a YAML mapping")
    return data


def parse_targets(raw) -> tuple[TargetConfig, ...]:
    """Normalize the accepted target spellings into TargetConfig records.

    Accepts a single path, a list of paths, a `{path, type}` mapping, or a
    list mixing paths and mappings.
    """
    if raw is None:
        return ()
    items = raw if isinstance(raw, list) else [raw]

    targets = []
    for item in items:
        if isinstance(item, dict):
            targets.append(TargetConfig(path=str(item["path"]), kind=item.get("type")))
        else:
            targets.append(TargetConfig(path=str(item)))
    return tuple(targets)


def iter_generator_entries(raw) -> list[tuple[str, object]]:
    """Flatten both generator layouts into (name, raw targets) pairs.

    Mapping layout:  {scala_models: api/app/generated}
    List layout:     [{generator: scala_models, target: api/app/generated}]
    """
    if isinstance(raw, dict):
        return [(str(name), targets) for name, targets in raw.items()]

    entries = []
    for item in raw or []:
        name = str(item["generator"])
        if "targets" in item:
            entries.append((name, item["targets"]))
        elif "type" in item:
            entries.append((name, {"path": item["target"], "type": item["type"]}))
        else:
            entries.append((name, item.get("target")))
    return entries


def parse_config(data: dict, root: Path | str) -> SyncConfig:
    """Build a SyncConfig from an already validated config mapping."""
    settings_data = data.get("settings") or {}
    settings = SyncSettings(
        create_directories=bool(settings_data.get(CREATE_DIRECTORIES, False)),
    )

    projects = []
    for org, apps in (data.get("code") or {}).items():
        for app_name, app_data in (apps or {}).items():
            generators = tuple(
                GeneratorConfig(name=name, targets=parse_targets(targets))
                for name, targets in iter_generator_entries(app_data.get("generators"))
            )
            projects.append(ProjectConfig(
                org=str(org),
                name=str(app_name),
                version=str(app_data.get("version", "latest")),
                generators=generators,
            ))

    return SyncConfig(root=Path(root), settings=settings, projects=tuple(projects))


def load_config(path: Path | str | None = None) -> SyncConfig:
    """Read, validate and parse the project configuration.

    Args:
        path: Config file. Defaults to `paths.config_path()`.

    Raises:
        ConfigError: If the file cannot be read or fails validation.
    """
    from apibuilder_sync.config.validator import validate_config

    cfg_path = Path(path) if path else config_path()
    data = read_config(cfg_path)

    result = validate_config(data)
    for w in result.warnings:
        logger.warning(f"{cfg_path}: {w}")
    if not result.passed:
        raise ConfigError(f"Invalid config {cfg_path}\n{result.summary()}")

    config = parse_config(data, project_root(cfg_path))
    logger.debug(f"Loaded {len(config.projects)} project(s) from {cfg_path}")
    return config
