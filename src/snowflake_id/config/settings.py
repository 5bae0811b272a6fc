"""Configuration settings using Pydantic Settings.

Usage:
    from snowflake_id.config import SnowflakeSettings

    # Load from environment variables (SNOWFLAKE_*)
    settings = SnowflakeSettings()

    # Or override with explicit values
    strict = SnowflakeSettings(accept_native_integers=False)
    deserialize("42", settings=strict)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install snowflake-id[config]"
    ) from e


class SnowflakeSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for snowflake decoding.

    Attributes:
        accept_native_integers: Accept integer tokens on input. Strings are
            always accepted; output is always a string.

    Environment Variables:
        SNOWFLAKE_ACCEPT_NATIVE_INTEGERS
    """

    model_config = SettingsConfigDict(
        env_prefix="SNOWFLAKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    accept_native_integers: bool = True


def load_settings() -> SnowflakeSettings:
    """Load settings from environment and .env file."""
    return SnowflakeSettings()
