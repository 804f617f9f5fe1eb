"""Default locations and path presentation.

Resolves where the project configuration lives and which API Builder
instance to talk to. Uses environment variables when available, falls back
to conventional defaults.

Environment variables:
    APIBUILDER_CONFIG — project config file (default: ./.apibuilder/config)
    APIBUILDER_API_URI — API base URL (default: https://api.apibuilder.io)
    APIBUILDER_TOKEN — optional bearer token passed to the API
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_DIR_NAME = ".apibuilder"
_DEFAULT_CONFIG_SUBPATH = f"{CONFIG_DIR_NAME}/config"
_DEFAULT_API_URI = "https://api.apibuilder.io"


def config_path() -> Path:
    """Return the path to the project configuration file."""
    env = os.environ.get("APIBUILDER_CONFIG")
    if env:
        return Path(env).expanduser()
    return Path.cwd() / _DEFAULT_CONFIG_SUBPATH


def api_uri() -> str:
    """Return the API base URL without a trailing slash."""
    return os.environ.get("APIBUILDER_API_URI", _DEFAULT_API_URI).rstrip("/")


def api_token() -> str | None:
    """Return the API token, if one is set."""
    return os.environ.get("APIBUILDER_TOKEN") or None


def project_root(config_file: Path | str) -> Path:
    """Return the directory that configured target paths are relative to.

    A config kept in `.apibuilder/config` is rooted at the directory that
    contains `.apibuilder`; anywhere else it is rooted at its own directory.
    """
    parent = Path(config_file).resolve().parent
    if parent.name == CONFIG_DIR_NAME:
        return parent.parent
    return parent


def display_path(path: Path | str, cwd: Path | str | None = None) -> str:
    """Format a path for status output, relative to the working directory when possible.

    Only used for printing. File I/O always uses the full path.
    """
    base = Path(cwd) if cwd else Path.cwd()
    p = Path(path)
    try:
        return str(p.resolve().relative_to(base.resolve()))
    except ValueError:
        return str(p)
