"""Command-line entry point: ``epoch VALUE``."""

from __future__ import annotations

import click

from epochctl import __version__
from epochctl.commands._base import EpochCommand
from epochctl.commands._context import AppContext
from epochctl.config.settings import EpochSettings
from epochctl.domain.classify import NUMERIC_PATTERN
from epochctl.domain.types import OutputFormat, TimeUnit, TimeZoneChoice

_TZ_CHOICES = click.Choice([tz.value for tz in TimeZoneChoice], case_sensitive=False)


def _resolve_format(output_format: str | None, unix: bool, json_output: bool) -> OutputFormat:
    """Merge ``--format`` with the ``--unix``/``--json`` shortcuts."""
    requested = {OutputFormat(output_format)} if output_format else set()
    if unix:
        requested.add(OutputFormat.UNIX)
    if json_output:
        requested.add(OutputFormat.JSON)
    if len(requested) > 1:
        choices = ", ".join(sorted(requested))
        msg = f"Conflicting output formats requested: {choices}"
        raise click.UsageError(msg)
    return requested.pop() if requested else OutputFormat.RFC3339


def _reject_unknown_option(ctx: click.Context, _param: click.Parameter, value: str) -> str:
    """Unknown flags reach VALUE through ignore_unknown_options; only signed integers may."""
    if value.startswith("-") and not NUMERIC_PATTERN.match(value):
        raise click.NoSuchOption(value, ctx=ctx)
    return value


@click.command(
    cls=EpochCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  epoch 1700000000
  epoch 1700000000000 --unix
  epoch "2024/02/29 12:00:00" --json
  epoch "2024/02/29 12:00:00" --input-tz local
  epoch 1700000000 --ts millis
  epoch 1700000000 --output-tz local
  epoch 1700000000 --strftime "%Y/%m/%d %H:%M:%S"
  epoch -86400 --unix""",
)
@click.version_option(version=__version__, prog_name="epoch")
@click.argument("value", callback=_reject_unknown_option)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
    default=None,
    help="Output representation (default: rfc3339).",
)
@click.option("--unix", is_flag=True, help="Shortcut for --format unix.")
@click.option("--json", "json_output", is_flag=True, help="Shortcut for --format json.")
@click.option(
    "--ts",
    "unit",
    type=click.Choice([unit.value for unit in TimeUnit], case_sensitive=False),
    default=None,
    help="Force numeric input to seconds or millis instead of auto-detecting.",
)
@click.option(
    "--input-tz",
    type=_TZ_CHOICES,
    default=TimeZoneChoice.UTC.value,
    show_default=True,
    help="Zone used to read YYYY/MM/DD HH:MM:SS input.",
)
@click.option(
    "--output-tz",
    type=_TZ_CHOICES,
    default=TimeZoneChoice.UTC.value,
    show_default=True,
    help="Zone used for RFC3339 output.",
)
@click.option("--strftime", default=None, help="Custom strftime pattern for rfc3339 output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and parse details on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(
    value: str,
    output_format: str | None,
    unix: bool,
    json_output: bool,
    unit: str | None,
    input_tz: str,
    output_tz: str,
    strftime: str | None,
    verbose: bool,
    log_json: bool,
) -> None:
    """Convert a unix timestamp (seconds or millis) or a YYYY/MM/DD HH:MM:SS datetime.

    Numeric VALUEs with a magnitude of at least 10^12 are read as
    milliseconds, smaller ones as seconds.
    """
    settings = EpochSettings.from_cli(
        output_format=_resolve_format(output_format, unix, json_output),
        unit=unit,
        input_tz=input_tz.lower(),
        output_tz=output_tz.lower(),
        strftime=strftime,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    app.emit(app.service.convert(value))
