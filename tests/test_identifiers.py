"""Tests for random id generation and token validation."""

from __future__ import annotations

import pytest

from idkit.alphabets import (
    ID_VALID_NONSTART_CHARS,
    ID_VALID_START_CHARS,
    LOWER_CASE_ALPHA,
    NUMERIC,
)
from idkit.errors import InvalidArgument
from idkit.identifiers import (
    can_batch,
    is_valid_token,
    make_random_id,
    make_random_identifier,
    make_random_lowercase_id,
)

# Enough distinct symbols to push N**4 past 2**63
HUGE_ALPHABET = "".join(chr(c) for c in range(0x10000, 0x10000 + 60000))


def test_length_and_alphabets(seeded_sources):
    """Every id has the requested length, letter first, alphanumerics after."""
    for length in range(1, 51):
        token = make_random_id(length)
        assert len(token) == length
        assert token[0] in ID_VALID_START_CHARS
        assert all(c in ID_VALID_NONSTART_CHARS for c in token[1:])
        assert is_valid_token(token, ID_VALID_START_CHARS, ID_VALID_NONSTART_CHARS)


def test_custom_alphabets(seeded_sources):
    for length in (1, 2, 3, 4, 5, 8, 13, 40):
        token = make_random_id(length, "xy", "0123")
        assert len(token) == length
        assert token[0] in "xy"
        assert set(token[1:]) <= set("0123")


def test_zero_length_consumes_no_randomness(counting_rng):
    assert make_random_id(0, rng=counting_rng) == ""
    assert make_random_id(0, "", "", rng=counting_rng) == ""
    assert counting_rng.calls == 0


def test_negative_length_rejected():
    with pytest.raises(InvalidArgument, match="non-negative"):
        make_random_id(-1)


def test_empty_alphabet_rejected():
    with pytest.raises(InvalidArgument, match="must not be empty"):
        make_random_id(3, "", "abc")
    with pytest.raises(InvalidArgument, match="must not be empty"):
        make_random_id(3, "abc", "")


def test_single_char_alphabet_is_deterministic():
    assert make_random_id(6, "a", "b") == "abbbbb"


@pytest.mark.parametrize(
    "length,draws",
    [(1, 1), (4, 1), (5, 2), (8, 2), (9, 3), (12, 3), (13, 4)],
)
def test_batched_draws(counting_rng, length, draws):
    """One draw covers the first four characters, then one per four more."""
    make_random_id(length, rng=counting_rng)
    assert counting_rng.calls == draws


def test_oversized_alphabet_draws_per_character(counting_rng):
    assert not can_batch("ab", HUGE_ALPHABET)
    token = make_random_id(7, "ab", HUGE_ALPHABET, rng=counting_rng)
    assert len(token) == 7
    assert token[0] in "ab"
    assert all(c in HUGE_ALPHABET for c in token[1:])
    assert counting_rng.calls == 7


def test_can_batch_ceiling():
    assert can_batch(ID_VALID_START_CHARS, ID_VALID_NONSTART_CHARS)
    assert can_batch("a" * 55108, "b" * 55108)
    assert not can_batch("a", "b" * 55109)


def test_first_character_uniform(seeded_sources):
    """Over 100k single-character ids, 'A' shows up about half the time."""
    n = 100_000
    count = sum(1 for _ in range(n) if make_random_id(1, "AB", "AB") == "A")
    # about 6 standard deviations either side
    assert 0.49 < count / n < 0.51


def test_continuation_characters_uniform(seeded_sources):
    n = 20_000
    counts = {c: 0 for c in "0123"}
    for _ in range(n):
        for c in make_random_id(9, "x", "0123")[1:]:
            counts[c] += 1
    total = sum(counts.values())
    for c, count in counts.items():
        assert 0.24 < count / total < 0.26, c


def test_presets(seeded_sources):
    token = make_random_lowercase_id(10)
    assert len(token) == 10
    assert token[0] in LOWER_CASE_ALPHA
    assert set(token) <= set(LOWER_CASE_ALPHA + NUMERIC)

    ident = make_random_identifier(10)
    assert ident.isidentifier()


def test_ids_differ(seeded_sources):
    ids = {make_random_id(12) for _ in range(1000)}
    assert len(ids) == 1000


def test_validate_token():
    assert is_valid_token("a1", "abc", "abc123") is True
    assert is_valid_token("1a", "abc", "abc123") is False
    assert is_valid_token("a", "abc", "") is True
    assert is_valid_token("ax", "abc", "abc123") is False
    assert is_valid_token("", "abc", "abc123") is False
    assert is_valid_token(None, "abc", "abc123") is False
