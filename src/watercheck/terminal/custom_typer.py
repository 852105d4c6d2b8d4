# SPDX-License-Identifier: MIT

from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Command group whose command names are comma-separated aliases.

    A command registered as "remove, rm" answers to both "remove" and "rm".
    Commands are listed in command_order first, then in registration order.
    """

    command_order: list[str] = []

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.__resolve_alias(cmd_name))

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.command_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]

    def __resolve_alias(self, cmd_name: str) -> str:
        for name in self.commands:
            if cmd_name in (alias.strip() for alias in name.split(",")):
                return name
        return cmd_name


class HydrationTyperGroup(AliasedTyperGroup):
    # Day-to-day commands first
    command_order = [
        "add, a",
        "remove, rm",
        "today, t",
        "goal, g",
        "history, h",
        "stats, s",
        "export, ex",
        "recommend, r",
        "reset",
        "config, c",
    ]
