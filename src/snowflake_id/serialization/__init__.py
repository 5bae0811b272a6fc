"""Serialization: string-on-write, string-or-integer-on-read wire codec.

Usage:
    from snowflake_id.serialization import deserialize, dumps, serialize

    serialize(Snowflake(42))                   # "42"
    deserialize(42) == deserialize("42")       # True
"""

from snowflake_id.serialization.codec import (
    SnowflakeJSONEncoder,
    deserialize,
    dumps,
    loads,
    serialize,
)
from snowflake_id.serialization.schema import (
    SNOWFLAKE_ADAPTER,
    SnowflakeField,
    SnowflakeInt,
    snowflake_core_schema,
    snowflake_json_schema,
)

__all__ = [
    # Codec
    "serialize",
    "deserialize",
    "dumps",
    "loads",
    "SnowflakeJSONEncoder",
    # Pydantic
    "SnowflakeInt",
    "SnowflakeField",
    "SNOWFLAKE_ADAPTER",
    "snowflake_core_schema",
    "snowflake_json_schema",
]
