"""Update CLI command."""

import argparse
import sys

from apibuilder_sync.errors import ApibuilderError


def cmd_update(args: argparse.Namespace) -> int:
    from apibuilder_sync.codegen.sync import sync_all

    try:
        result = sync_all(
            config_path=args.path,
            apps=args.app,
            dry_run=args.dry_run,
            api_uri=args.api_uri,
        )
    except ApibuilderError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print()
    print("Code Sync Results")
    print("─" * 40)
    print(f"  Changed:   {len(result['changed'])}")
    print(f"  Unchanged: {len(result['unchanged'])}")
    if result["not_found"]:
        print(f"  Not found: {len(result['not_found'])}")
    if result["errors"]:
        print(f"  Errors:    {len(result['errors'])}")
        for e in result["errors"]:
            print(f"    - {e['path']}: {e['error']}")

    if result["dry_run"]:
        print("\n[DRY RUN] No files were modified.")

    return 1 if result["errors"] else 0
