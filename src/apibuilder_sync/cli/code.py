"""Code CLI command."""

import argparse
import sys

from apibuilder_sync.errors import ApibuilderError


def cmd_code(args: argparse.Namespace) -> int:
    from apibuilder_sync.client import ApibuilderClient

    try:
        with ApibuilderClient(base_url=args.api_uri) as client:
            files = client.get_generated_code(args.org, args.app, args.version, args.generator)
    except ApibuilderError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for i, f in enumerate(files):
        if i:
            print()
        name = f"{f.dir}/{f.name}" if f.dir else f.name
        print(f"# {name}")
        print(f.contents.rstrip("\n"))
    return 0
