"""Helpers for working uniformly with real and complex scalars."""

from __future__ import annotations

from typing import Any


def is_complex(value: Any) -> bool:
    """Return whether ``value`` is a complex scalar."""
    return isinstance(value, complex)


def real_part(value: Any) -> Any:
    """Return the real part of a complex scalar, or a real scalar unchanged."""
    if isinstance(value, complex):
        return value.real
    return value


def conj(value: Any) -> Any:
    """Return the complex conjugate, or a real scalar unchanged."""
    if isinstance(value, complex):
        return value.conjugate()
    return value