"""Handles that either own an operator or refer to one owned elsewhere."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flecsolve.operators.core import Operator, is_operator


@dataclass(frozen=True)
class Handle:
    """A reference to an operator; ``owned`` marks handles that keep it alive."""

    target: Any
    owned: bool = False

    def get(self) -> Any:
        return self.target

    def __call__(self, x: Any, y: Any) -> Any:
        return self.get()(x, y)

    def apply(self, x: Any, y: Any) -> Any:
        return self.get().apply(x, y)


def ref(op: Any) -> Handle:
    """A handle referring to ``op`` without owning it."""
    return Handle(op, owned=False)


def make_shared(policy_or_operator: Any) -> Handle:
    """An owning handle to an operator, wrapping a policy when needed."""
    if is_operator(policy_or_operator):
        return Handle(policy_or_operator, owned=True)
    return Handle(Operator(policy_or_operator), owned=True)