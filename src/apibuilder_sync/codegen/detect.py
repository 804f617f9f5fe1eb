"""Decide whether a generated file needs to be rewritten."""

from __future__ import annotations

from apibuilder_sync.codegen.normalize import normalize


def differs(remote: str, local: str) -> bool:
    """True if remote generated code differs materially from the local copy.

    `local` is the empty string when the file does not exist yet. Differences
    confined to version-stamp lines do not count.
    """
    if remote.strip() == local.strip():
        return False
    if normalize(remote) == normalize(local):
        return False
    return True
