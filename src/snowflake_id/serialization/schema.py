"""Pydantic integration for snowflake identifiers.

Usage:
    class Message(BaseModel):
        id: Snowflake                  # Snowflake instances
        channel_id: SnowflakeInt       # plain int, same wire form

    msg = Message.model_validate_json('{"id": 42, "channel_id": "7"}')
    msg.model_dump_json()              # '{"id":"42","channel_id":"7"}'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, TypeAdapter
from pydantic.json_schema import JsonSchemaMode, JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from snowflake_id.core.identity import U64_MAX, Snowflake
from snowflake_id.serialization.codec import deserialize, serialize

if TYPE_CHECKING:
    from snowflake_id.config import SnowflakeSettings


def _validator(
    into: Callable[[int], Any], settings: SnowflakeSettings | None = None
) -> Callable[[Any], Any]:
    def validate(value: Any) -> Any:
        if isinstance(value, Snowflake):
            value = value.value
        return deserialize(value, into, settings=settings)

    return validate


def _serializer(value: Any, info: core_schema.SerializationInfo) -> Any:
    if info.mode_is_json():
        return serialize(value)
    return value


def snowflake_core_schema(
    into: Callable[[int], Any], settings: SnowflakeSettings | None = None
) -> CoreSchema:
    """Build a core schema reading ints or decimal strings and writing strings to JSON.

    Args:
        into: Callable building the field value from the decoded u64.
        settings: Optional settings forwarded to deserialize().

    Returns:
        Plain-validator core schema. JSON output is the decimal string,
        python output is the value unchanged.
    """
    return core_schema.no_info_plain_validator_function(
        _validator(into, settings),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _serializer,
            info_arg=True,
            when_used="always",
        ),
    )


def snowflake_json_schema(
    mode: JsonSchemaMode, string_format: str = "snowflake"
) -> JsonSchemaValue:
    """JSON schema for a snowflake field.

    Output is always a string; input may also be a native integer.
    """
    string_schema: JsonSchemaValue = {
        "type": "string",
        "pattern": "^[0-9]+$",
        "format": string_format,
    }
    if mode == "serialization":
        return string_schema
    return {
        "anyOf": [
            string_schema,
            {"type": "integer", "minimum": 0, "maximum": U64_MAX},
        ]
    }


@dataclass(frozen=True, slots=True, eq=False)
class SnowflakeField:
    """Annotated marker giving a plain int field the snowflake wire form.

    Attributes:
        settings: Optional settings, e.g. to refuse native integer input.
        string_format: JSON schema "format" value for the string form.
    """

    settings: SnowflakeSettings | None = None
    string_format: str = "snowflake"

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return snowflake_core_schema(int, self.settings)

    def __get_pydantic_json_schema__(
        self, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return snowflake_json_schema(handler.mode, self.string_format)


SnowflakeInt = Annotated[int, SnowflakeField()]
"""Plain int field read from a u64 or a decimal string, written to JSON as a string."""

SNOWFLAKE_ADAPTER: TypeAdapter[Snowflake] = TypeAdapter(Snowflake)
