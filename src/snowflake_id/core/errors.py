"""Errors raised when text or wire tokens cannot become a Snowflake."""

from __future__ import annotations

EXPECTING = "a snowflake (either as a string containing a u64, or a u64)"


class SnowflakeError(ValueError):
    """Base class for snowflake conversion failures."""

    pass


class SnowflakeParseError(SnowflakeError):
    """Raised when free text is not a valid unsigned 64-bit decimal integer.

    Carries no reason: the text is either a u64 or it is not. The rejected
    input is kept on ``text`` but never placed in the message.
    """

    def __init__(self, text: object) -> None:
        super().__init__("invalid snowflake")
        self.text = text


class SnowflakeDeserializeError(SnowflakeError):
    """Raised when a wire token is neither a native u64 nor a u64 decimal string."""

    def __init__(self, unexpected: str) -> None:
        super().__init__(f"{unexpected}, expected {EXPECTING}")
        self.unexpected = unexpected
