"""Shared fixtures: seeded random sources and call-counting generators."""

from __future__ import annotations

import random

import pytest

from idkit.random_source import override_sources


class CountingRandom(random.Random):
    """Seeded source that counts calls to ``randrange``."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.calls = 0

    def randrange(self, *args, **kwargs):
        self.calls += 1
        return super().randrange(*args, **kwargs)


@pytest.fixture
def seeded_sources():
    """Replace both shared sources with seeded ones for the duration of a test."""
    fast = random.Random(1234)
    secure = random.Random(5678)
    with override_sources(fast=fast, secure=secure):
        yield fast, secure


@pytest.fixture
def counting_rng():
    return CountingRandom(42)
