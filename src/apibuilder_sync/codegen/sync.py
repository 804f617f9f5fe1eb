"""Generated code sync — the `apibuilder update` workflow.

The sync process:
1. Load and validate the project config
2. Plan every generator/target, printing a status line per file
3. Print and apply the pending updates (skipped on a dry run)

A missing generator/version only skips its target, and a local I/O failure
only skips its file. Any other server error aborts the run; lines already
printed and directories already created stay.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from apibuilder_sync.codegen.applier import apply_updates
from apibuilder_sync.codegen.planner import Fetch, plan_sync
from apibuilder_sync.config.loader import load_config
from apibuilder_sync.paths import display_path


def sync_all(
    config_path: Path | str | None = None,
    fetch: Fetch | None = None,
    apps: list[str] | None = None,
    dry_run: bool = False,
    emit: Callable[[str], None] = print,
    api_uri: str | None = None,
) -> dict[str, Any]:
    """Bring every configured target up to date with the server.

    Args:
        config_path: Project config file. Defaults to `.apibuilder/config`.
        fetch: Fetch collaborator. Defaults to an ApibuilderClient.
        apps: Only sync these application names.
        dry_run: Plan and report without writing files.
        emit: Receives each line of status output.
        api_uri: API base URL for the default client.

    Raises:
        ConfigError: If the config cannot be loaded.
        ServerError: If a fetch fails with anything other than 404.
    """
    config = load_config(config_path)

    if fetch is None:
        from apibuilder_sync.client import ApibuilderClient

        with ApibuilderClient(base_url=api_uri) as client:
            plan = plan_sync(config, client.get_generated_code, apps=apps, emit=emit)
    else:
        plan = plan_sync(config, fetch, apps=apps, emit=emit)

    applied: list[str] = []
    errors: list[dict] = [
        {"path": str(s.path), "error": s.error} for s in plan.errors
    ]

    if plan.updates and dry_run:
        for update in plan.updates:
            emit(f"Would update {update.generator}: {display_path(update.target_path)}")
    elif plan.updates:
        result = apply_updates(plan.updates, emit=emit)
        applied = [str(p) for p in result.applied]
        errors += [{"path": str(e.path), "error": e.reason} for e in result.errors]

    return {
        "changed": [str(u.target_path) for u in plan.updates],
        "unchanged": [str(p) for p in plan.unchanged],
        "not_found": [r.header() for r in plan.not_found],
        "applied": applied,
        "errors": errors,
        "dry_run": dry_run,
    }
