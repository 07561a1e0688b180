"""AppContext: per-invocation state and result emission.

Owns logging setup and the stdout/stderr routing and exit-code wiring
for a ServiceResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from epochctl.config.logging import configure_logging
from epochctl.output.formatters import OutputSettings, format_detail, format_result
from epochctl.services.convert import ConvertService

if TYPE_CHECKING:
    from epochctl.config.settings import EpochSettings
    from epochctl.services.result import ServiceResult


class AppContext:
    """Context for a single ``epoch`` invocation."""

    def __init__(self, settings: EpochSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ConvertService:
        return ConvertService(self.settings.conversion_options())

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): one line to stdout, returns normally.
          In verbose mode a detail line goes to stderr.
        * Failure: error line to stderr, nothing on stdout, exits with code 1.
        """
        settings = OutputSettings(verbose=self.settings.verbose)
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if settings.verbose:
                click.echo(format_detail(result, settings=settings), err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
