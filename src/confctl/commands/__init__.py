"""Subcommand modules for confctl.

Provides register_commands() which uses deferred imports to keep
``confctl --help`` fast as the codebase grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from confctl.commands.dependency import dependency
    from confctl.commands.item import item
    from confctl.commands.itemmodule import itemmodule
    from confctl.commands.module import module

    cli.add_command(item)
    cli.add_command(module)
    cli.add_command(itemmodule)
    cli.add_command(dependency)

    # --- Standalone commands ---
    from confctl.commands.init_cmd import init_cmd
    from confctl.commands.insfile import insfile

    cli.add_command(init_cmd)
    cli.add_command(insfile)
