"""Config CLI commands."""

import argparse
import sys

from apibuilder_sync.errors import ConfigError
from apibuilder_sync.paths import config_path, display_path


def cmd_config_validate(args: argparse.Namespace) -> int:
    from apibuilder_sync.config.loader import read_config
    from apibuilder_sync.config.validator import validate_config

    path = args.path or config_path()
    try:
        data = read_config(path)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    result = validate_config(data)
    print(result.summary())
    return 0 if result.passed else 1


def cmd_config_show(args: argparse.Namespace) -> int:
    from apibuilder_sync.config.loader import load_config

    try:
        config = load_config(args.path)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"Root: {config.root}")
    print(f"Create directories: {'yes' if config.settings.create_directories else 'no'}")
    for project in config.projects:
        print(f"\n{project.identity}")
        for generator in project.generators:
            for target in generator.targets:
                kind = f" ({target.kind})" if target.kind else ""
                print(f"  {generator.name:<30} {display_path(config.target_root(target))}{kind}")
    return 0
