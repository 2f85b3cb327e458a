"""Vectors made of several component vectors acted on together."""

from __future__ import annotations

import math
from typing import Any, Callable, Iterator, Sequence

from flecsolve.future import FutureTransform, FutureVector
from flecsolve.variable import ANONYMOUS, MultiVariable, Variable
from flecsolve.vectors.core import Vector, is_vector


def _each(f: Callable[..., Any], *groups: Sequence[Any]) -> list[Any]:
    sizes = {len(g) for g in groups}
    if len(sizes) != 1:
        raise ValueError(f"multivectors have different numbers of components: {sorted(sizes)}")
    return [f(*parts) for parts in zip(*groups)]


class MultiOps:
    """Kernels over tuples of component vectors, applied component by component."""

    def copy(self, x: Sequence[Vector], z: Sequence[Vector]) -> None:
        _each(lambda zc, xc: zc.copy(xc), z, x)

    def zero(self, x: Sequence[Vector]) -> None:
        _each(lambda c: c.zero(), x)

    def set_to_scalar(self, alpha: Any, x: Sequence[Vector]) -> None:
        _each(lambda c: c.set_scalar(alpha), x)

    def scale(
        self, alpha: Any, x: Sequence[Vector], y: Sequence[Vector] | None = None
    ) -> None:
        """Set ``y`` to ``alpha * x``; scale ``x`` in place when ``y`` is omitted."""
        if y is None:
            _each(lambda c: c.scale(alpha), x)
        else:
            _each(lambda yc, xc: yc.scale(alpha, xc), y, x)

    def add(self, x: Sequence[Vector], y: Sequence[Vector], z: Sequence[Vector]) -> None:
        _each(lambda zc, xc, yc: zc.add(xc, yc), z, x, y)

    def subtract(self, x: Sequence[Vector], y: Sequence[Vector], z: Sequence[Vector]) -> None:
        _each(lambda zc, xc, yc: zc.subtract(xc, yc), z, x, y)

    def multiply(self, x: Sequence[Vector], y: Sequence[Vector], z: Sequence[Vector]) -> None:
        _each(lambda zc, xc, yc: zc.multiply(xc, yc), z, x, y)

    def divide(self, x: Sequence[Vector], y: Sequence[Vector], z: Sequence[Vector]) -> None:
        _each(lambda zc, xc, yc: zc.divide(xc, yc), z, x, y)

    def reciprocal(self, x: Sequence[Vector], y: Sequence[Vector]) -> None:
        _each(lambda yc, xc: yc.reciprocal(xc), y, x)

    def linear_sum(
        self,
        alpha: Any,
        x: Sequence[Vector],
        beta: Any,
        y: Sequence[Vector],
        z: Sequence[Vector],
    ) -> None:
        _each(lambda zc, xc, yc: zc.linear_sum(alpha, xc, beta, yc), z, x, y)

    def axpy(
        self, alpha: Any, x: Sequence[Vector], y: Sequence[Vector], z: Sequence[Vector]
    ) -> None:
        _each(lambda zc, xc, yc: zc.axpy(alpha, xc, yc), z, x, y)

    def axpby(self, alpha: Any, beta: Any, x: Sequence[Vector], z: Sequence[Vector]) -> None:
        _each(lambda zc, xc: zc.axpby(alpha, beta, xc), z, x)

    def abs(self, x: Sequence[Vector], y: Sequence[Vector]) -> None:
        _each(lambda yc, xc: yc.abs(xc), y, x)

    def add_scalar(self, x: Sequence[Vector], alpha: Any, y: Sequence[Vector]) -> None:
        _each(lambda yc, xc: yc.add_scalar(xc, alpha), y, x)

    def set_random(self, x: Sequence[Vector], seed: int) -> None:
        _each(lambda c: c.set_random(seed), x)

    def min(self, x: Sequence[Vector]) -> FutureTransform:
        return FutureTransform(FutureVector(c.min() for c in x), min)

    def max(self, x: Sequence[Vector]) -> FutureTransform:
        return FutureTransform(FutureVector(c.max() for c in x), max)

    def lp_norm(self, p: int, x: Sequence[Vector]) -> FutureTransform:
        if p < 1:
            raise ValueError(f"norm order must be positive, got {p}")
        if p == 1:
            return FutureTransform(FutureVector(c.lp_norm(1) for c in x), sum)
        # Each component's norm is raised back to the p-th power, summed, then rooted.
        locals_ = FutureVector(
            FutureTransform(c.lp_norm(p), lambda v: v**p) for c in x
        )
        if p == 2:
            return FutureTransform(locals_, lambda vs: math.sqrt(sum(vs)))
        return FutureTransform(locals_, lambda vs: sum(vs) ** (1.0 / p))

    def inf_norm(self, x: Sequence[Vector]) -> FutureTransform:
        return FutureTransform(FutureVector(c.inf_norm() for c in x), max)

    def dot(self, x: Sequence[Vector], y: Sequence[Vector]) -> FutureTransform:
        futures = _each(lambda xc, yc: xc.dot(yc), x, y)
        return FutureTransform(FutureVector(futures), sum)

    def local_size(self, x: Sequence[Vector]) -> int:
        return sum(c.local_size() for c in x)

    def global_size(self, x: Sequence[Vector]) -> FutureTransform:
        return FutureTransform(FutureVector(c.global_size() for c in x), sum)

    def dump(self, prefix: str, x: Sequence[Vector]) -> None:
        for index, c in enumerate(x):
            c.dump(f"{prefix}-{index}")


def _var_values(vec: Vector) -> tuple:
    if isinstance(vec.var, MultiVariable):
        return tuple(vec.var)
    return (vec.var.value,)


def _var_type(vec: Vector) -> type:
    if isinstance(vec, MultiVector):
        return vec.var_type
    return type(vec.var.value)


class MultiVector(Vector):
    """A vector whose components are other vectors, each tagged by a variable."""

    def __init__(self, *args: Vector) -> None:
        if not args:
            raise ValueError("a multivector needs at least one component")
        for c in args:
            if not is_vector(c):
                raise TypeError(f"expected a vector, got {type(c).__name__}")
        types = {_var_type(c) for c in args}
        if len(types) != 1:
            raise TypeError("components must use variables of the same type")
        super().__init__(tuple(args), MultiOps(), ANONYMOUS)
        self.var_type = _var_type(args[0])
        self.var = MultiVariable(tuple(v for c in args for v in _var_values(c)))

    @property
    def components(self) -> tuple[Vector, ...]:
        return self.data

    @property
    def num_components(self) -> int:  # type: ignore[override]
        return len(self.data)

    def get(self, index: int) -> Vector:
        """Return the component at ``index``."""
        return self.data[index]

    def getvar(self, var: Any) -> Vector:
        """Return the first component tagged with ``var``."""
        value = var.value if isinstance(var, Variable) else var
        for c in self.data:
            if isinstance(c.var, Variable) and c.var.value == value:
                return c
        raise ValueError(f"multivector has no variable {value!r}")

    def subset(self, var: Any) -> Vector:
        """Return the component, or a multivector of components, for ``var``."""
        if isinstance(var, MultiVariable):
            if len(var) == 1:
                return self.getvar(next(iter(var)))
            return MultiVector(*(self.getvar(v) for v in var))
        return self.getvar(var)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)


def make(*args: Vector) -> MultiVector:
    """Group vectors into a multivector."""
    return MultiVector(*args)