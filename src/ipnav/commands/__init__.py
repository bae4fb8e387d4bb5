"""
CLI command groups.

Each submodule exposes ``register(group)`` which adds its commands,
with their short aliases, to the top-level ``ipnav`` group.
"""

from typing import Iterable

import click


class AliasedGroup(click.Group):
    """Click group whose commands can also be invoked by short aliases."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.aliases: dict[str, str] = {}

    def add_command(
        self, cmd: click.Command, name: str | None = None, aliases: Iterable[str] = ()
    ) -> None:
        super().add_command(cmd, name)
        for alias in aliases:
            self.aliases[alias] = name or cmd.name

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: list[str]):
        # Report the canonical name in usage and error messages
        _, cmd, args = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, args

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_commands(ctx, formatter)
        if self.aliases:
            with formatter.section("Aliases"):
                formatter.write_dl(sorted(self.aliases.items()))
