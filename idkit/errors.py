"""Exceptions raised by idkit."""

from __future__ import annotations


class IdkitError(Exception):
    """Base exception for all idkit errors."""


class InvalidArgument(IdkitError, ValueError):
    """A length or alphabet argument cannot produce a well-defined result."""
