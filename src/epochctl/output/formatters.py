"""ServiceResult formatting for the CLI.

Success output is the rendered conversion, exactly one line for stdout.
Failures and ``--verbose`` details are styled through Rich for stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel
from rich.text import Text

from epochctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from epochctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Display flags relevant to result formatting."""

    model_config = {"frozen": True}

    verbose: bool = False
    no_color: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Returns the rendered output on success, or an ``Error: ...`` line
    carrying the error message verbatim on failure.
    """
    settings = settings or OutputSettings()
    if result.ok:
        return str(result.data.get("output", ""))
    message = result.error.message if result.error else "Unknown error"
    line = Text.assemble(("Error:", "epoch.error"), " ", message)
    return _render(line, settings)


def format_detail(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """One-line summary of how the input was interpreted (verbose mode)."""
    settings = settings or OutputSettings()
    data = result.data
    line = Text.assemble(
        ("parsed as ", "epoch.key"),
        (str(data.get("parsed_as", "")), "epoch.kind"),
        ("  unix=", "epoch.key"),
        (str(data.get("unix", "")), "epoch.value"),
        ("  input_tz=", "epoch.key"),
        str(data.get("input_tz", "")),
        ("  output_tz=", "epoch.key"),
        str(data.get("output_tz", "")),
    )
    return _render(line, settings)


def _render(text: Text, settings: OutputSettings) -> str:
    console = create_console(no_color=settings.no_color)
    console.print(text)
    return get_output(console).rstrip("\n")
