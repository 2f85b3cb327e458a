"""Variable tags that identify the components of a vector."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterator


class AnonVar(enum.IntEnum):
    """Tag used by vectors and operators that carry no named variable."""

    ANONYMOUS = 2**64 - 1


@dataclass(frozen=True)
class Variable:
    """A single variable tag; two tags are equal when their values are."""

    value: Any
    name: str = field(default="", compare=False)


@dataclass(frozen=True)
class MultiVariable:
    """An ordered group of variable values."""

    values: tuple = ()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @property
    def variables(self) -> tuple[Variable, ...]:
        """The members as single variable tags."""
        return tuple(Variable(v) for v in self.values)


ANONYMOUS = Variable(AnonVar.ANONYMOUS)


def variable(value: Any) -> Variable:
    """Return the variable tag for ``value``."""
    return Variable(value)


def multivariable(*args: Any) -> MultiVariable:
    """Group values (or variable tags) into a multivariable tag."""
    return MultiVariable(
        tuple(a.value if isinstance(a, Variable) else a for a in args)
    )