"""Wire codec: always write snowflakes as strings, read strings or integers.

Usage:
    token = serialize(Snowflake(42))           # "42"
    sf = deserialize("42")                     # Snowflake(value=42)
    sf = deserialize(42)                       # Snowflake(value=42)
    raw = deserialize("42", into=int)          # 42, for plain-int fields

    text = dumps({"id": Snowflake(42)})        # '{"id": "42"}'
    doc = loads(text, snowflake_keys=["id"])   # {"id": Snowflake(value=42)}
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar, overload

from loguru import logger

from snowflake_id.core.errors import SnowflakeDeserializeError, SnowflakeParseError
from snowflake_id.core.identity import U64_MAX, Snowflake

if TYPE_CHECKING:
    from snowflake_id.config import SnowflakeSettings

T = TypeVar("T")


def serialize(value: Snowflake | int) -> str:
    """Encode an identifier as its canonical decimal string."""
    return str(value)


def _describe(token: Any) -> str:
    """Describe a rejected token the way serde reports unexpected input."""
    if token is None:
        return "invalid type: null"
    if isinstance(token, bool):
        return f"invalid type: boolean `{str(token).lower()}`"
    if isinstance(token, int):
        return f"invalid value: integer `{token}`"
    if isinstance(token, float):
        return f"invalid type: floating point `{token}`"
    if isinstance(token, str):
        return f"invalid value: string {json.dumps(token)}"
    if isinstance(token, dict):
        return "invalid type: map"
    if isinstance(token, (list, tuple)):
        return "invalid type: sequence"
    return f"invalid type: {type(token).__name__}"


def _reject(token: Any) -> SnowflakeDeserializeError:
    error = SnowflakeDeserializeError(_describe(token))
    logger.debug(f"Rejected snowflake token {token!r}: {error}")
    return error


@overload
def deserialize(token: Any, *, settings: SnowflakeSettings | None = None) -> Snowflake: ...


@overload
def deserialize(
    token: Any, into: Callable[[int], T], *, settings: SnowflakeSettings | None = None
) -> T: ...


def deserialize(
    token: Any,
    into: Callable[[int], Any] = Snowflake,
    *,
    settings: SnowflakeSettings | None = None,
) -> Any:
    """Decode a wire token into a snowflake.

    Tries the native integer shape first, then the decimal string shape.

    Args:
        token: Decoded JSON value (int, str, or anything else to reject).
        into: Callable building the result from the u64. Defaults to Snowflake.
        settings: Optional settings; accept_native_integers=False rejects ints.

    Returns:
        into(value) for the decoded u64.

    Raises:
        SnowflakeDeserializeError: If the token has any other shape, or is out of range.
    """
    accept_int = settings is None or settings.accept_native_integers

    if isinstance(token, int) and not isinstance(token, bool):
        if accept_int and 0 <= token <= U64_MAX:
            return into(token)
        raise _reject(token)

    if isinstance(token, str):
        try:
            value = Snowflake.parse(token).value
        except SnowflakeParseError:
            raise _reject(token) from None
        return into(value)

    raise _reject(token)


class SnowflakeJSONEncoder(json.JSONEncoder):
    """JSON encoder emitting Snowflake values as decimal strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Snowflake):
            return serialize(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """json.dumps with Snowflake values written as strings."""
    kwargs.setdefault("cls", SnowflakeJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(
    text: str | bytes,
    *,
    snowflake_keys: Iterable[str] = (),
    settings: SnowflakeSettings | None = None,
    **kwargs: Any,
) -> Any:
    """json.loads that decodes the named object keys as snowflakes.

    Args:
        text: JSON document.
        snowflake_keys: Object keys holding snowflake tokens, matched at any depth.
        settings: Passed through to deserialize().
        **kwargs: Forwarded to json.loads. A caller's object_hook runs after
            the named keys are decoded.

    Raises:
        SnowflakeDeserializeError: If a named key holds an invalid token.
        TypeError: If snowflake_keys is combined with object_pairs_hook.
    """
    keys = frozenset(snowflake_keys)
    if keys:
        if kwargs.get("object_pairs_hook") is not None:
            raise TypeError("snowflake_keys cannot be combined with object_pairs_hook")
        user_hook: Callable[[dict[str, Any]], Any] | None = kwargs.get("object_hook")

        def decode_keys(obj: dict[str, Any]) -> Any:
            decoded = {
                key: deserialize(value, settings=settings) if key in keys else value
                for key, value in obj.items()
            }
            if user_hook is not None:
                return user_hook(decoded)
            return decoded

        kwargs["object_hook"] = decode_keys
    return json.loads(text, **kwargs)
