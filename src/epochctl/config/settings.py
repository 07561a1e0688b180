"""Unified settings for one ``epoch`` invocation.

Built from CLI flags only.  Environment variables and config files are
deliberately not sources, so the only inputs are the command line.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from epochctl.domain.types import OutputFormat, TimeUnit, TimeZoneChoice
from epochctl.services.convert import ConversionOptions


class EpochSettings(BaseSettings):
    """Frozen view of every CLI flag.  Stored on :class:`AppContext`."""

    model_config = {"frozen": True}

    # --- Conversion ---
    output_format: OutputFormat = OutputFormat.RFC3339
    unit: TimeUnit | None = None
    input_tz: TimeZoneChoice = TimeZoneChoice.UTC
    output_tz: TimeZoneChoice = TimeZoneChoice.UTC
    strftime: str | None = None

    # --- Diagnostics ---
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """CLI kwargs are the sole source."""
        return (init_settings,)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> EpochSettings:
        """Construct settings from Click parameters, dropping unset (None) flags."""
        return cls(**{key: value for key, value in cli_flags.items() if value is not None})

    def conversion_options(self) -> ConversionOptions:
        return ConversionOptions(
            output_format=self.output_format,
            unit=self.unit,
            input_tz=self.input_tz,
            output_tz=self.output_tz,
            pattern=self.strftime,
        )
