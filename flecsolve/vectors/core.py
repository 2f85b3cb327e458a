"""The generic vector: a data store paired with the operations that act on it."""

from __future__ import annotations

import random
from typing import Any, Callable

from flecsolve.variable import ANONYMOUS, MultiVariable, Variable


def is_vector(obj: Any) -> bool:
    """Return whether ``obj`` is a vector."""
    return isinstance(obj, Vector)


def _require_vectors(*objs: Any) -> None:
    for obj in objs:
        if not isinstance(obj, Vector):
            raise TypeError(f"expected a vector, got {type(obj).__name__}")


class Vector:
    """A vector whose storage is ``data`` and whose kernels live in ``ops``.

    Every operation that writes stores its result in this vector; every
    reduction returns a future whose ``get`` yields the value.
    """

    num_components = 1

    def __init__(self, data: Any, ops: Any, var: Any = ANONYMOUS) -> None:
        self.data = data
        self.ops = ops
        self.var = var if isinstance(var, Variable) else Variable(var)

    def copy(self, src: "Vector") -> None:
        """Set this vector equal to ``src``."""
        _require_vectors(src)
        self.ops.copy(src.data, self.data)

    def zero(self) -> None:
        """Set every component to zero."""
        self.ops.zero(self.data)

    def set_scalar(self, value: Any) -> None:
        """Set every component to ``value``."""
        self.ops.set_to_scalar(value, self.data)

    def scale(self, alpha: Any, x: "Vector | None" = None) -> None:
        """Set this to ``alpha * x``, or scale this in place when ``x`` is omitted."""
        if x is None:
            self.ops.scale(alpha, self.data)
        else:
            _require_vectors(x)
            self.ops.scale(alpha, x.data, self.data)

    def add(self, x: "Vector", y: "Vector") -> None:
        """Set this to ``x + y``."""
        _require_vectors(x, y)
        self.ops.add(x.data, y.data, self.data)

    def subtract(self, x: "Vector", y: "Vector") -> None:
        """Set this to ``x - y``."""
        _require_vectors(x, y)
        self.ops.subtract(x.data, y.data, self.data)

    def multiply(self, x: "Vector", y: "Vector") -> None:
        """Set this to the component-wise product of ``x`` and ``y``."""
        _require_vectors(x, y)
        self.ops.multiply(x.data, y.data, self.data)

    def divide(self, x: "Vector", y: "Vector") -> None:
        """Set this to the component-wise quotient ``x / y``."""
        _require_vectors(x, y)
        self.ops.divide(x.data, y.data, self.data)

    def reciprocal(self, x: "Vector") -> None:
        """Set this to ``1 / x`` component-wise."""
        _require_vectors(x)
        self.ops.reciprocal(x.data, self.data)

    def linear_sum(self, alpha: Any, x: "Vector", beta: Any, y: "Vector") -> None:
        """Set this to ``alpha * x + beta * y``."""
        _require_vectors(x, y)
        self.ops.linear_sum(alpha, x.data, beta, y.data, self.data)

    def axpy(self, alpha: Any, x: "Vector", y: "Vector") -> None:
        """Set this to ``alpha * x + y``."""
        _require_vectors(x, y)
        self.ops.axpy(alpha, x.data, y.data, self.data)

    def axpby(self, alpha: Any, beta: Any, x: "Vector") -> None:
        """Set this to ``alpha * x + beta * this``."""
        _require_vectors(x)
        self.ops.axpby(alpha, beta, x.data, self.data)

    def abs(self, x: "Vector") -> None:
        """Set this to the component-wise absolute value of ``x``."""
        _require_vectors(x)
        self.ops.abs(x.data, self.data)

    def add_scalar(self, x: "Vector", alpha: Any) -> None:
        """Set this to ``x + alpha`` component-wise."""
        _require_vectors(x)
        self.ops.add_scalar(x.data, alpha, self.data)

    def min(self) -> Any:
        """Future holding the smallest (real part of a) component."""
        return self.ops.min(self.data)

    def max(self) -> Any:
        """Future holding the largest (real part of a) component."""
        return self.ops.max(self.data)

    def l1norm(self) -> Any:
        """Future holding the L1 norm."""
        return self.ops.lp_norm(1, self.data)

    def l2norm(self) -> Any:
        """Future holding the L2 norm."""
        return self.ops.lp_norm(2, self.data)

    def lp_norm(self, p: int) -> Any:
        """Future holding the Lp norm."""
        return self.ops.lp_norm(p, self.data)

    def inf_norm(self) -> Any:
        """Future holding the infinity norm."""
        return self.ops.inf_norm(self.data)

    def dot(self, x: "Vector") -> Any:
        """Future holding the inner product, conjugating ``x`` for complex data."""
        _require_vectors(x)
        return self.ops.dot(self.data, x.data)

    def global_size(self) -> Any:
        """Future holding the global number of components."""
        return self.ops.global_size(self.data)

    def local_size(self) -> int:
        """Number of components stored locally."""
        return self.ops.local_size(self.data)

    def set_random(self, seed: int | None = None) -> None:
        """Fill with uniform values in [0, 1), seeded from the system when no seed is given."""
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        self.ops.set_random(self.data, seed)

    def dump(self, prefix: str) -> None:
        """Write the components to a file named after ``prefix``."""
        self.ops.dump(prefix, self.data)

    def subset(self, var: Any) -> "Vector":
        """Return the part of this vector for ``var``; only this vector's own variable exists."""
        if isinstance(var, MultiVariable):
            values = tuple(var)
        elif isinstance(var, Variable):
            values = (var.value,)
        else:
            values = (var,)
        if values != (self.var.value,):
            raise ValueError(f"vector has no variable {values!r}")
        return self

    def apply(self, f: Callable[..., Any]) -> Any:
        """Call ``f`` with this vector, or with its components when it has several."""
        if self.num_components == 1:
            return f(self)
        return f(*self.data)

    def __getitem__(self, index: Any) -> Any:
        return self.data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self.data[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(var={self.var.value!r}, data={self.data!r})"