"""
Secret payload shape disambiguation.

A KV version 2 engine wraps the secret under `data` next to a `metadata`
key; version 1 returns the secret directly. The response carries no engine
version, so the shape is guessed from the keys.
"""

from enum import Enum
from typing import Any, Iterator, Mapping, Tuple

from rupaul.config.exceptions import InvalidSecretTypeError

VERSIONED_KEYS = frozenset(("metadata", "data"))


class ValueKind(Enum):
    """What a payload value holds."""
    STRING = "string"
    MAPPING = "mapping"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.OTHER


def is_versioned_payload(payload: Mapping[str, Any]) -> bool:
    """True if the payload is exactly {"metadata": {...}, "data": {...}}.

    A genuine secret with exactly those two keys and mapping values is
    indistinguishable and will be unwrapped too.
    """
    if len(payload) != 2 or set(payload) != VERSIONED_KEYS:
        return False
    return all(kind_of(payload[key]) is ValueKind.MAPPING for key in VERSIONED_KEYS)


def effective_payload(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the key/value structure that is written to disk."""
    if is_versioned_payload(payload):
        return payload["data"]
    return payload


def normalize(payload: Mapping[str, Any]) -> Iterator[Tuple[str, str]]:
    """Yield (key, value) pairs, failing on the first non-string value.

    Raises:
        InvalidSecretTypeError: When a value is not a string
    """
    for key, value in payload.items():
        if kind_of(value) is not ValueKind.STRING:
            raise InvalidSecretTypeError(key=key, value_type=type(value).__name__)
        yield key, value
