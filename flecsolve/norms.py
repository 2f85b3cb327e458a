"""Norm selection and component-wise application over vectors."""

from __future__ import annotations

import enum
from typing import Any, Callable


class NormType(enum.Enum):
    INF = "inf"
    L2 = "l2"
    L1 = "l1"


def parse_norm_type(token: str) -> NormType:
    """Parse a norm name (``inf``, ``l1`` or ``l2``), ignoring case."""
    key = token.strip().lower()
    try:
        return NormType(key)
    except ValueError:
        raise ValueError(f"unknown norm type: {token!r}") from None


def apply(f: Callable[..., Any], *args: Any) -> Any:
    """Call ``f`` on the vectors, or on each group of matching components.

    Vectors with one component are passed to ``f`` as they are.  For
    multi-component vectors ``f`` is called once per component index and
    the results are returned as a tuple.  All vectors must have the same
    number of components.
    """
    if not args:
        raise ValueError("apply needs at least one vector")
    counts = {getattr(v, "num_components", 1) for v in args}
    if len(counts) != 1:
        raise ValueError("vectors have different numbers of components")
    (count,) = counts
    if count == 1:
        return f(*args)
    return tuple(f(*parts) for parts in zip(*args))