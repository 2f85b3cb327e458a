"""Operators defined by a plain callable."""

from __future__ import annotations

from typing import Any, Callable

from flecsolve.operators.core import Base, Operator
from flecsolve.operators.handle import Handle, make_shared
from flecsolve.variable import ANONYMOUS


class Shell(Base):
    """A policy whose action is ``f(x, y)``."""

    def __init__(
        self,
        f: Callable[[Any, Any], Any],
        input_var: Any = ANONYMOUS,
        output_var: Any = ANONYMOUS,
    ) -> None:
        super().__init__(None, input_var, output_var)
        self.f = f

    def apply(self, x: Any, y: Any) -> Any:
        return self.f(x, y)


def make_shell(
    f: Callable[[Any, Any], Any],
    input_var: Any = ANONYMOUS,
    output_var: Any = ANONYMOUS,
) -> Operator:
    """An operator that calls ``f`` on the selected parts of its vectors."""
    return Operator(Shell(f, input_var, output_var))


def make_shared_shell(
    f: Callable[[Any, Any], Any],
    input_var: Any = ANONYMOUS,
    output_var: Any = ANONYMOUS,
) -> Handle:
    """An owning handle to a shell operator."""
    return make_shared(Shell(f, input_var, output_var))


def _copy(x: Any, y: Any) -> None:
    y.copy(x)


def make_identity(input_var: Any = ANONYMOUS, output_var: Any = ANONYMOUS) -> Handle:
    """An owning handle to the operator that copies input into output."""
    return make_shared_shell(_copy, input_var, output_var)


I = make_shared_shell(_copy)