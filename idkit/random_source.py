"""Process-wide random sources.

Two lifetimes:

* the fast source, one shared ``random.Random`` for non-sensitive tokens
  (resource names, base64 ids). Seeded from ``IDKIT_FAST_SEED`` when set.
* the secure source, a ``random.SystemRandom`` built on first use and kept
  for the rest of the process. Used wherever output is treated as a secret.

Both are reached through accessors so tests can swap in seeded instances
with :func:`override_sources`.
"""

from __future__ import annotations

import contextlib
import logging
import random
import threading
from collections.abc import Iterator

from idkit.config import settings
from idkit.errors import InvalidArgument

logger = logging.getLogger("idkit.random_source")

_lock = threading.Lock()
_fast: random.Random | None = None
_secure: random.Random | None = None


def fast_source() -> random.Random:
    global _fast
    if _fast is None:
        with _lock:
            if _fast is None:
                _fast = random.Random(settings.fast_seed)
    return _fast


def secure_source() -> random.Random:
    """Return the process-wide cryptographically strong source.

    Constructed at most once; concurrent first callers all get the same
    instance. The lock is only taken while the instance does not exist yet.
    """
    global _secure
    if _secure is None:
        with _lock:
            if _secure is None:
                _secure = random.SystemRandom()
                logger.debug("Created secure random source")
    return _secure


@contextlib.contextmanager
def override_sources(
    fast: random.Random | None = None,
    secure: random.Random | None = None,
) -> Iterator[None]:
    """Temporarily replace the shared sources, e.g. with seeded ones in tests."""
    global _fast, _secure
    with _lock:
        previous_fast, previous_secure = _fast, _secure
        if fast is not None:
            _fast = fast
        if secure is not None:
            _secure = secure
    logger.debug("Random sources overridden (fast=%s, secure=%s)", fast is not None, secure is not None)
    try:
        yield
    finally:
        with _lock:
            # Slots not overridden keep whatever was built inside the block
            if fast is not None:
                _fast = previous_fast
            if secure is not None:
                _secure = previous_secure


def random_double() -> float:
    return fast_source().random()


def random_long() -> int:
    """Uniform signed 64-bit integer."""
    return fast_source().getrandbits(64) - (1 << 63)


def random_boolean() -> bool:
    return bool(fast_source().getrandbits(1))


def random_int(upbound: int | None = None) -> int:
    """Uniform signed 32-bit integer, or uniform in ``[0, upbound)`` when given."""
    if upbound is None:
        return fast_source().getrandbits(32) - (1 << 31)
    if upbound <= 0:
        raise InvalidArgument(f"upbound must be positive, got {upbound}")
    return fast_source().randrange(upbound)


def random_bytes(length: int) -> bytes:
    if length < 0:
        raise InvalidArgument(f"length must be non-negative, got {length}")
    return fast_source().randbytes(length)
