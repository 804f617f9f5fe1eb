"""Shared test fixtures for apibuilder-sync."""

from pathlib import Path

import pytest

from apibuilder_sync.codegen.models import GeneratedFile
from apibuilder_sync.config.loader import (
    GeneratorConfig,
    ProjectConfig,
    SyncConfig,
    SyncSettings,
    TargetConfig,
)
from apibuilder_sync.errors import NotFound

FIXTURES = Path(__file__).parent / "fixtures"


class FakeFetch:
    """Stands in for the API: maps (org, app, version, generator) to files.

    A missing key answers NotFound; an exception value is raised.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def __call__(self, org, app, version, generator):
        key = (org, app, version, generator)
        self.calls.append(key)
        if key not in self.responses:
            raise NotFound(org, app, version, generator)
        value = self.responses[key]
        if isinstance(value, Exception):
            raise value
        return list(value)


def _make_config(root, generators, create_directories=True, org="acme", app="api", version="1.0.0"):
    """Build a single-project SyncConfig.

    `generators` maps generator name -> list of target paths or TargetConfigs.
    """
    gens = tuple(
        GeneratorConfig(
            name=name,
            targets=tuple(t if isinstance(t, TargetConfig) else TargetConfig(t) for t in targets),
        )
        for name, targets in generators.items()
    )
    return SyncConfig(
        root=Path(root),
        settings=SyncSettings(create_directories=create_directories),
        projects=(ProjectConfig(org=org, name=app, version=version, generators=gens),),
    )


@pytest.fixture
def fixture_config_path():
    return FIXTURES / "apibuilder-config.yaml"


@pytest.fixture
def models_file():
    return GeneratedFile(name="Models.scala", dir="", contents="object Models")


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write_config(root: Path, text: str) -> Path:
    cfg_dir = root / ".apibuilder"
    cfg_dir.mkdir(exist_ok=True)
    path = cfg_dir / "config"
    path.write_text(text)
    return path


@pytest.fixture
def fake_fetch():
    """Factory for FakeFetch collaborators: fake_fetch({key: files})."""
    return FakeFetch


@pytest.fixture
def make_config():
    return _make_config


@pytest.fixture
def write_config():
    """Writes `.apibuilder/config` under a root and returns its path."""
    return _write_config
