"""CLI subcommands."""

from code_freeze.commands import version_bump

COMMANDS = [version_bump]

__all__ = ["COMMANDS", "version_bump"]
