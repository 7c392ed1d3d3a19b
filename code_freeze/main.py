"""code-freeze entry point.

Release-cycle automation commands. Usage:
code-freeze [--config PATH] version-bump [-o OWNER] [-n NAME].
"""

import argparse
import logging
import sys
from pathlib import Path

from code_freeze.commands import COMMANDS
from code_freeze.config import ConfigError, load_config
from code_freeze.logging import CodeFreezeLogging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="code-freeze",
        description="Code freeze utilities for the release workflow",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file (default: config.yaml)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    for command in COMMANDS:
        command.add_parser(subparsers)
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config, set up logging, dispatch to the subcommand."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (ConfigError, ValueError, OSError) as e:
        logging.basicConfig(level=logging.INFO)
        logging.getLogger("code_freeze").error("Invalid config %s: %s", args.config, e)
        return 1
    CodeFreezeLogging(config.logging).setup()
    log = logging.getLogger("code_freeze")

    if args.check:
        print("Config OK:", config.version_bump.branch, "<-", config.version_bump.base)
        return 0

    if args.command is None:
        parser.print_help()
        return 2

    try:
        return args.handler(args, config)
    except KeyboardInterrupt:
        return 130
    except ConfigError as e:
        log.error("%s", e)
        return 1
    except Exception as e:
        log.exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
