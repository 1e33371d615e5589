"""Runtime settings for the option registry, read from ``RAPTOR_OPTIONS_*`` env vars."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OptionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RAPTOR_OPTIONS_")

    log_level: str = Field(default="WARNING", description="Logging level for the CLI")
    strict_state_copy: bool = Field(
        default=False,
        description="Reject option state copies between objects of different areas",
    )


@lru_cache(maxsize=1)
def get_settings() -> OptionSettings:
    return OptionSettings()
