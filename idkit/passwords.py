"""Random passwords with guaranteed character-class coverage."""

from __future__ import annotations

import random

from idkit.alphabets import LOWER_CASE_ALPHA, NON_ALPHA_NUMERIC, NUMERIC, UPPER_CASE_ALPHA
from idkit.errors import InvalidArgument
from idkit.random_source import secure_source

DEFAULT_POOLS = (UPPER_CASE_ALPHA, LOWER_CASE_ALPHA, NUMERIC, NON_ALPHA_NUMERIC)


def merge_character_sets(*character_sets: str) -> str:
    """Union of the given sets, first occurrence order, duplicates dropped."""
    return "".join(dict.fromkeys("".join(character_sets)))


def make_random_password(length: int, *pools: str, rng: random.Random | None = None) -> str:
    """Make a password containing at least one character from every pool.

    One character is drawn from each pool in turn, the rest from the union of
    all pools, and the result is shuffled so the pool-anchored characters do
    not sit at predictable positions. Every draw uses the secure source.

    Without pools, uses upper case, lower case, digits and punctuation, so
    the length must then be at least 4.

    Raises:
        InvalidArgument: if ``length`` is smaller than the number of pools,
            or a pool is empty.
    """
    if not pools:
        pools = DEFAULT_POOLS
    if length < len(pools):
        raise InvalidArgument(
            f"Password length {length} is smaller than the number of required character pools ({len(pools)})"
        )
    if not all(pools):
        raise InvalidArgument("Character pools must not be empty")
    if rng is None:
        rng = secure_source()

    password = [rng.choice(pool) for pool in pools]
    remaining_chars = merge_character_sets(*pools)
    password.extend(rng.choice(remaining_chars) for _ in range(length - len(pools)))
    rng.shuffle(password)
    return "".join(password)
