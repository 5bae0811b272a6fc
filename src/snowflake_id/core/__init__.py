"""Core primitives: the Snowflake value type and its errors.

Architecture Note:
    core/ is pure and stateless. Wire formats and pydantic hooks live in
    serialization/, typed settings in config/.
"""

from snowflake_id.core.errors import (
    EXPECTING,
    SnowflakeDeserializeError,
    SnowflakeError,
    SnowflakeParseError,
)
from snowflake_id.core.identity import U64_MAX, Snowflake

__all__ = [
    # Identity
    "Snowflake",
    "U64_MAX",
    # Errors
    "EXPECTING",
    "SnowflakeError",
    "SnowflakeParseError",
    "SnowflakeDeserializeError",
]
