"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Catalog initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from confctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from confctl.config.settings import ConfSettings
    from confctl.infrastructure.catalog import Catalog
    from confctl.output.wire import WireResponse
    from confctl.services.result import ServiceResult

# Exit codes for wire responses: client errors vs. server errors.
_EXIT_CLIENT_ERROR = 1
_EXIT_SERVER_ERROR = 2


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The catalog is lazily initialized on first use so ``--help`` and
    ``--version`` never trigger database access.
    """

    def __init__(self, settings: ConfSettings) -> None:
        self.settings = settings
        self._catalog: Catalog | None = None

        from confctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            sql_echo=settings.database.echo,
        )

        if settings.verbose:
            from confctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def catalog(self) -> Catalog:
        """The catalog instance (created lazily on first access)."""
        if self._catalog is None:
            from confctl.infrastructure.catalog import Catalog

            self._catalog = Catalog(self.settings)
        return self._catalog

    def close(self) -> None:
        """Release the catalog connection pool, if one was opened."""
        if self._catalog is not None:
            self._catalog.close()
            self._catalog = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_wire(self, response: WireResponse) -> None:
        """Write a wire body verbatim; failures go to stderr with a nonzero exit."""
        if response.ok:
            click.echo(response.body, nl=False)
            return
        click.echo(response.body, nl=False, err=True)
        raise SystemExit(_EXIT_CLIENT_ERROR if response.status < 500 else _EXIT_SERVER_ERROR)
