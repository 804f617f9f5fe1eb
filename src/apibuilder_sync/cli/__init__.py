"""Command-line client for keeping API Builder generated code in sync.

Usage:
    apibuilder update [--path <config>] [--app <name> ...] [--dry-run]
    apibuilder code <org> <app> <version> <generator>
    apibuilder config validate [--path <config>]
    apibuilder config show [--path <config>]
"""

import argparse
import logging
import sys

from apibuilder_sync import __version__
from apibuilder_sync.cli.code import cmd_code
from apibuilder_sync.cli.config import cmd_config_show, cmd_config_validate
from apibuilder_sync.cli.update import cmd_update


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apibuilder",
        description="Fetch API Builder generated code and update changed files",
    )
    parser.add_argument(
        "--api-uri", default=None,
        help="API base URL (default: $APIBUILDER_API_URI or https://api.apibuilder.io)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log fetches and file operations",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command")

    # update
    upd = sub.add_parser(
        "update", help="Sync generated code for every configured target",
    )
    upd.add_argument(
        "--path", default=None,
        help="Path to config file (default: .apibuilder/config)",
    )
    upd.add_argument(
        "--app", action="append", default=None,
        help="Only update this application (repeatable)",
    )
    upd.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    # code
    code = sub.add_parser(
        "code", help="Print the files a generator produces",
    )
    code.add_argument("org", help="Organization key")
    code.add_argument("app", help="Application key")
    code.add_argument("version", help="Version, or 'latest'")
    code.add_argument("generator", help="Generator key")

    # config
    cfg = sub.add_parser("config", help="Project config operations")
    cfg.add_argument(
        "--path", default=None,
        help="Path to config file (default: .apibuilder/config)",
    )
    cfg_sub = cfg.add_subparsers(dest="subcommand")
    cfg_sub.add_parser("validate", help="Validate the config file")
    cfg_sub.add_parser("show", help="List configured targets")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    dispatch = {
        ("update", ""): cmd_update,
        ("code", ""): cmd_code,
        ("config", "validate"): cmd_config_validate,
        ("config", "show"): cmd_config_show,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
