"""snowflake-id: unsigned 64-bit identifiers that survive JSON.

Usage:
    from snowflake_id import Snowflake, deserialize, dumps

    sf = deserialize(42)                 # also accepts "42"
    dumps({"id": sf})                    # '{"id": "42"}'
    sf.into_option()                     # None only for Snowflake(0)

Logging is disabled by default; enable with logger.enable("snowflake_id").
"""

from loguru import logger

__version__ = "0.1.0"

# Core primitives
from snowflake_id.core import (
    EXPECTING,
    U64_MAX,
    Snowflake,
    SnowflakeDeserializeError,
    SnowflakeError,
    SnowflakeParseError,
)

# Serialization
from snowflake_id.serialization import (
    SNOWFLAKE_ADAPTER,
    SnowflakeField,
    SnowflakeInt,
    SnowflakeJSONEncoder,
    deserialize,
    dumps,
    loads,
    serialize,
)

logger.disable("snowflake_id")

__all__ = [
    # Version
    "__version__",
    # Core
    "Snowflake",
    "U64_MAX",
    "EXPECTING",
    "SnowflakeError",
    "SnowflakeParseError",
    "SnowflakeDeserializeError",
    # Serialization
    "serialize",
    "deserialize",
    "dumps",
    "loads",
    "SnowflakeJSONEncoder",
    "SnowflakeInt",
    "SnowflakeField",
    "SNOWFLAKE_ADAPTER",
]
