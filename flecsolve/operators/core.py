"""Operators: a policy that acts on vectors, wrapped to select variables."""

from __future__ import annotations

import enum
from typing import Any

from flecsolve.variable import ANONYMOUS, MultiVariable, Variable
from flecsolve.vectors.core import is_vector


class Label(enum.Enum):
    """Kinds of parameters an operator can be asked for."""

    JACOBIAN = "jacobian"


def _as_tag(var: Any) -> Variable | MultiVariable:
    if isinstance(var, (Variable, MultiVariable)):
        return var
    return Variable(var)


def _require_vectors(*objs: Any) -> None:
    for obj in objs:
        if not is_vector(obj):
            raise TypeError(f"expected a vector, got {type(obj).__name__}")


class Base:
    """Common ground for operator policies: parameters and variable tags."""

    def __init__(
        self,
        params: Any = None,
        input_var: Any = ANONYMOUS,
        output_var: Any = ANONYMOUS,
    ) -> None:
        self.params = params
        self.input_var = _as_tag(input_var)
        self.output_var = _as_tag(output_var)

    def get_parameters(self, tag: Label, state: Any) -> Any:
        """Parameters of the given kind at ``state``; a plain policy has none."""
        return None

    def reset(self, state: Any) -> None:
        """Update the policy for a new state; a plain policy keeps nothing."""
        return None

    def get_operator(self) -> "Base":
        return self


class Operator:
    """Applies a policy to the parts of vectors that match its variables.

    Attributes not defined here are looked up on the policy.
    """

    def __init__(self, policy: Any) -> None:
        self.policy = policy
        self.input_var = _as_tag(getattr(policy, "input_var", ANONYMOUS))
        self.output_var = _as_tag(getattr(policy, "output_var", ANONYMOUS))

    def apply(self, x: Any, y: Any) -> Any:
        """Apply the policy to ``x``, writing into ``y``."""
        _require_vectors(x, y)
        ys = y.subset(self.output_var)
        xs = x.subset(self.input_var)
        return self.policy.apply(xs, ys)

    def __call__(self, x: Any, y: Any) -> Any:
        return self.apply(x, y)

    def residual(self, b: Any, x: Any, r: Any) -> None:
        """Set ``r`` to ``b - A x`` on the output variable."""
        _require_vectors(b, x, r)
        self.apply(x, r)
        bs = b.subset(self.output_var)
        rs = r.subset(self.output_var)
        rs.subtract(bs, rs)

    def get_operator(self) -> Any:
        getter = getattr(self.policy, "get_operator", None)
        if getter is None:
            return self
        result = getter()
        return self if result is self.policy else result

    def __getattr__(self, name: str) -> Any:
        policy = self.__dict__.get("policy")
        if policy is None:
            raise AttributeError(name)
        return getattr(policy, name)

    def __repr__(self) -> str:
        return f"Operator({self.policy!r})"


def make(policy: Any) -> Operator:
    """Wrap a policy as an operator."""
    return Operator(policy)


def is_operator(obj: Any) -> bool:
    """Return whether ``obj`` is an operator."""
    return isinstance(obj, Operator)