"""Click classes shared by every confctl command and group.

``examples=`` text stays out of ``--help``. An eager ``--examples``
flag prints it and exits before arguments are validated or an
``insfile`` request is read from stdin; ``--help`` ends with a pointer
to it. Groups list their subcommands in registration order, so help
reads item, module, itemmodule, dependency, then the standalone
commands.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(ctx.command.examples)  # type: ignore[attr-defined]
    ctx.exit(0)


class _ExamplesMixin:
    """Adds the ``examples`` keyword and the ``--examples`` flag."""

    examples: str | None = None

    def _attach_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(  # type: ignore[attr-defined]
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_print_examples,
                help="Show usage examples and exit.",
            )
        )

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(f"Run '{ctx.command_path} --examples' for usage examples.")


class ConfCommand(_ExamplesMixin, click.Command):
    """A command that accepts ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


class ConfGroup(_ExamplesMixin, click.Group):
    """A group that accepts ``examples=`` and keeps registration order.

    Subcommands declared with ``@group.command`` are :class:`ConfCommand`
    without an explicit ``cls=``.
    """

    command_class = ConfCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)
