"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PKGEXPRESS_*`` prefix
  3. Code defaults — baked into the models

No file source is read.  Shipping limits are not settings; they are
fixed in :class:`~pkgexpress.domain.measurements.QuoteLimits`.
"""

from __future__ import annotations

from typing import Any

import click
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class PkgExpressSettings(BaseSettings):
    """Settings for a single pkgexpress invocation.

    Frozen after construction and stored on the click context via
    :class:`~pkgexpress.commands._context.AppContext`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PKGEXPRESS_",
    }

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False
    no_color: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs over env vars; dotenv and secret files are ignored."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> PkgExpressSettings:
        """Construct settings from a CLI invocation.

        Flags left at ``False`` are dropped so an env var can still
        switch them on.  Invalid env values become a ClickException.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        try:
            return cls(**overrides)
        except ValidationError as exc:
            msg = f"Invalid pkgexpress settings: {exc}"
            raise click.ClickException(msg) from exc
