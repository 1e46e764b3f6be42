"""Compact printable encodings of 64-bit values."""

from __future__ import annotations

import random

from idkit.alphabets import BASE64_VALID_CHARS, ID_VALID_NONSTART_CHARS, ID_VALID_START_CHARS
from idkit.errors import InvalidArgument
from idkit.random_source import fast_source

INT64_MIN = -(1 << 63)
# Stand-in for INT64_MIN, whose negation does not fit in 64 bits
INT64_MIN_SURROGATE = (1 << 63) - 1000

# 11 symbols of 6 bits cover all 64 bits of a value
MAX_BASE64_LENGTH = 11
RANDOM_CHUNK_LENGTH = 10


def to_int64(value: int) -> int:
    """Wrap an arbitrary int to the signed 64-bit range (two's complement)."""
    return ((value - INT64_MIN) & 0xFFFFFFFFFFFFFFFF) + INT64_MIN


def make_id_from_hash(value: int) -> str:
    """Short id for a hash code, always starting with a letter.

    Not padded: smaller magnitudes give shorter ids. ``v`` and ``-v`` give
    the same id.
    """
    n = to_int64(value)
    if n == INT64_MIN:
        n = INT64_MIN_SURROGATE
    elif n < 0:
        n = -n

    start_radix = len(ID_VALID_START_CHARS)
    nonstart_radix = len(ID_VALID_NONSTART_CHARS)
    result = [ID_VALID_START_CHARS[n % start_radix]]
    n //= start_radix
    while n:
        result.append(ID_VALID_NONSTART_CHARS[n % nonstart_radix])
        n //= nonstart_radix
    return "".join(result)


def append_base64_id_from_value(value: int, length: int, parts: list[str]) -> None:
    """Append ``length`` base64 symbols of ``value``, low bits first, to ``parts``."""
    if length > MAX_BASE64_LENGTH:
        raise InvalidArgument(
            f"Can't get a base64 string longer than {MAX_BASE64_LENGTH} chars from a 64-bit value"
        )
    if length < 0:
        raise InvalidArgument(f"length must be non-negative, got {length}")
    idx = to_int64(value)
    for _ in range(length):
        parts.append(BASE64_VALID_CHARS[idx & 63])
        idx >>= 6


def get_base64_id_from_value(value: int, length: int = RANDOM_CHUNK_LENGTH) -> str:
    parts: list[str] = []
    append_base64_id_from_value(value, length, parts)
    return "".join(parts)


def make_random_base64_id(length: int, rng: random.Random | None = None) -> str:
    """Random base64 token, ten symbols per 64-bit draw from the fast source."""
    if length < 0:
        raise InvalidArgument(f"length must be non-negative, got {length}")
    if rng is None:
        rng = fast_source()
    parts: list[str] = []
    while length > 0:
        append_base64_id_from_value(rng.getrandbits(64), min(RANDOM_CHUNK_LENGTH, length), parts)
        length -= RANDOM_CHUNK_LENGTH
    return "".join(parts)
