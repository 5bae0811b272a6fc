"""Configuration module using Pydantic Settings.

Usage:
    from snowflake_id.config import SnowflakeSettings

    settings = SnowflakeSettings(accept_native_integers=False)
"""

from snowflake_id.config.settings import SnowflakeSettings, load_settings

__all__ = [
    "SnowflakeSettings",
    "load_settings",
]
