"""Snowflake identifier model.

Usage:
    sf = Snowflake.from_u64(175928847299117063)
    same = Snowflake.parse("175928847299117063")
    if sf.into_option() is None:
        ...  # sentinel zero, no identifier
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from snowflake_id.core.errors import SnowflakeParseError

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

U64_MAX = 2**64 - 1
_U64_MAX_DIGITS = len(str(U64_MAX))

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True, order=True)
class Snowflake:
    """Unsigned 64-bit entity identifier.

    Behaves like the integer it wraps for equality, ordering and hashing.
    Zero is the "no identifier" sentinel and is also the default value.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Snowflake value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"Snowflake value {self.value} is outside the u64 range")

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    @classmethod
    def from_u64(cls, value: int) -> Snowflake:
        """Wrap an unsigned 64-bit integer."""
        return cls(value)

    def to_u64(self) -> int:
        """Return the wrapped integer."""
        return self.value

    def to_string(self) -> str:
        """Return the canonical decimal form (no sign, no leading zeros)."""
        return str(self.value)

    @classmethod
    def parse(cls, text: str) -> Snowflake:
        """Parse base-10 text into a Snowflake.

        Only ASCII digits are accepted. Signs, whitespace, separators and values
        above U64_MAX are rejected.

        Args:
            text: Decimal representation of the identifier.

        Returns:
            The parsed Snowflake.

        Raises:
            SnowflakeParseError: If text is not a valid u64 in base 10.
        """
        if not isinstance(text, str) or _DIGITS.fullmatch(text) is None:
            raise SnowflakeParseError(text)
        digits = text.lstrip("0") or "0"
        if len(digits) > _U64_MAX_DIGITS:
            raise SnowflakeParseError(text)
        value = int(digits)
        if value > U64_MAX:
            raise SnowflakeParseError(text)
        return cls(value)

    def into_option(self) -> Snowflake | None:
        """Map the sentinel zero to None, any other value to itself."""
        if self.value == 0:
            return None
        return self

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from snowflake_id.serialization.schema import snowflake_core_schema

        return snowflake_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        from snowflake_id.serialization.schema import snowflake_json_schema

        return snowflake_json_schema(handler.mode)
