"""Random identifiers drawn from a start alphabet and a continuation alphabet.

Ids start with a letter by default, so they are usable as identifiers in most
languages and in JavaScript/HTML ids, unlike base64 tokens.

Collisions between independent ids of length L follow the birthday bound
over ``N**L`` values. With the default 62-symbol continuation set:

======= ======== ===============================
length  n        p_collision
======= ======== ===============================
4       2000     ~15%
8       1M       ~1%
8       16M      ~50%
======= ======== ===============================

Prefer a counter where one is available and cache ids per object; these are
cheap but not free.
"""

from __future__ import annotations

import logging
import random

from idkit.alphabets import (
    ID_VALID_NONSTART_CHARS,
    ID_VALID_START_CHARS,
    IDENTIFIER_NONSTART_CHARS,
    IDENTIFIER_START_CHARS,
    LOWERCASE_ID_NONSTART_CHARS,
    LOWERCASE_ID_START_CHARS,
)
from idkit.errors import InvalidArgument
from idkit.random_source import fast_source

logger = logging.getLogger("idkit.identifiers")

# Batched draws must fit a signed 64-bit value. With S <= N this caps the
# continuation alphabet at 55108 symbols (floor of 2**63 ** 0.25).
MAX_BATCH_BOUND = 1 << 63


def can_batch(start_chars: str, nonstart_chars: str) -> bool:
    """Whether both packed draw bounds, ``S*N**3`` and ``N**4``, fit the draw width."""
    s = len(start_chars)
    n = len(nonstart_chars)
    return s * n**3 <= MAX_BATCH_BOUND and n**4 <= MAX_BATCH_BOUND


def make_random_id(
    length: int,
    start_chars: str = ID_VALID_START_CHARS,
    nonstart_chars: str = ID_VALID_NONSTART_CHARS,
    rng: random.Random | None = None,
) -> str:
    """Make a random id of exactly ``length`` characters.

    One random draw resolves the first character plus the next three, and one
    more draw follows every four characters, so roughly one call into the
    source per five characters. Alphabets too large for a packed draw fall
    back to one draw per character.

    Raises:
        InvalidArgument: negative length, or an empty alphabet with length > 0.
    """
    if length < 0:
        raise InvalidArgument(f"length must be non-negative, got {length}")
    if length == 0:
        return ""
    if not start_chars or not nonstart_chars:
        raise InvalidArgument("start and continuation alphabets must not be empty")
    if rng is None:
        rng = fast_source()

    if not can_batch(start_chars, nonstart_chars):
        logger.debug(
            "Alphabets of size %d/%d exceed batched draw bound, drawing per character",
            len(start_chars),
            len(nonstart_chars),
        )
        return _make_random_id_per_char(length, start_chars, nonstart_chars, rng)

    s = len(start_chars)
    n = len(nonstart_chars)
    d = rng.randrange(s * n * n * n)
    chars = [start_chars[d % s]]
    d //= s
    i = 1
    while i < length:
        chars.append(nonstart_chars[d % n])
        i += 1
        if i >= length:
            break
        if i % 4 == 0:
            d = rng.randrange(n * n * n * n)
        else:
            d //= n
    return "".join(chars)


def _make_random_id_per_char(length: int, start_chars: str, nonstart_chars: str, rng: random.Random) -> str:
    chars = [start_chars[rng.randrange(len(start_chars))]]
    chars.extend(nonstart_chars[rng.randrange(len(nonstart_chars))] for _ in range(length - 1))
    return "".join(chars)


def make_random_lowercase_id(length: int) -> str:
    return make_random_id(length, LOWERCASE_ID_START_CHARS, LOWERCASE_ID_NONSTART_CHARS)


def make_random_identifier(length: int) -> str:
    """Random id that is always a valid identifier (letter first, then alphanumerics)."""
    return make_random_id(length, IDENTIFIER_START_CHARS, IDENTIFIER_NONSTART_CHARS)


def is_valid_token(token: str | None, start_chars: str, nonstart_chars: str) -> bool:
    if not token:
        return False
    if token[0] not in start_chars:
        return False
    return all(c in nonstart_chars for c in token[1:])
