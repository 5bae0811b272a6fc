"""Snowflake identity: the u64 identifier value type."""

from snowflake_id.core.identity.models import U64_MAX, Snowflake

__all__ = [
    "Snowflake",
    "U64_MAX",
]
