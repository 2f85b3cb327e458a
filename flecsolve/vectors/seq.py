"""Sequential vectors stored in Python sequences."""

from __future__ import annotations

import itertools
import math
import random
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, MutableSequence, Sequence

from flecsolve.future import Ready
from flecsolve.numeric import conj, real_part
from flecsolve.variable import ANONYMOUS
from flecsolve.vectors.core import Vector


def _check_sizes(*arrays: Sequence[Any]) -> int:
    sizes = {len(a) for a in arrays}
    if len(sizes) != 1:
        raise ValueError(f"vector sizes differ: {sorted(sizes)}")
    (size,) = sizes
    return size


def _format(value: Any) -> str:
    if isinstance(value, complex):
        return f"({value.real:g},{value.imag:g})"
    return f"{value:g}"


def _infer_scalar(values: Iterable[Any]) -> type:
    return complex if any(isinstance(v, complex) for v in values) else float


@dataclass(frozen=True)
class SeqOps:
    """Kernels over indexable sequences holding ``scalar`` values."""

    scalar: type = float
    process: int = 0

    def _store(self, dest: MutableSequence[Any], values: Iterable[Any]) -> None:
        for i, v in enumerate(list(values)):
            dest[i] = self.scalar(v)

    def copy(self, src: Sequence[Any], dest: MutableSequence[Any]) -> None:
        _check_sizes(src, dest)
        self._store(dest, src)

    def zero(self, x: MutableSequence[Any]) -> None:
        self._store(x, itertools.repeat(0.0, len(x)))

    def set_random(self, x: MutableSequence[Any], seed: int) -> None:
        rng = random.Random(seed)
        if self.scalar is complex:
            values = [complex(rng.random(), rng.random()) for _ in range(len(x))]
        else:
            values = [rng.random() for _ in range(len(x))]
        self._store(x, values)

    def set_to_scalar(self, alpha: Any, x: MutableSequence[Any]) -> None:
        self._store(x, itertools.repeat(alpha, len(x)))

    def scale(
        self, alpha: Any, x: MutableSequence[Any], y: MutableSequence[Any] | None = None
    ) -> None:
        """Set ``y`` to ``alpha * x``; scale ``x`` in place when ``y`` is omitted."""
        if y is None:
            y = x
        _check_sizes(x, y)
        self._store(y, (alpha * v for v in x))

    def add(self, x: Sequence[Any], y: Sequence[Any], z: MutableSequence[Any]) -> None:
        _check_sizes(x, y, z)
        self._store(z, (a + b for a, b in zip(x, y)))

    def subtract(self, x: Sequence[Any], y: Sequence[Any], z: MutableSequence[Any]) -> None:
        _check_sizes(x, y, z)
        self._store(z, (a - b for a, b in zip(x, y)))

    def multiply(self, x: Sequence[Any], y: Sequence[Any], z: MutableSequence[Any]) -> None:
        _check_sizes(x, y, z)
        self._store(z, (a * b for a, b in zip(x, y)))

    def divide(self, x: Sequence[Any], y: Sequence[Any], z: MutableSequence[Any]) -> None:
        _check_sizes(x, y, z)
        self._store(z, (a / b for a, b in zip(x, y)))

    def reciprocal(self, x: Sequence[Any], y: MutableSequence[Any]) -> None:
        _check_sizes(x, y)
        self._store(y, (1.0 / v for v in x))

    def dump(self, prefix: str, x: Sequence[Any]) -> None:
        with open(f"{prefix}-{self.process}", "w", encoding="utf-8") as fh:
            fh.writelines(f"{_format(v)}\n" for v in x)

    def linear_sum(
        self,
        alpha: Any,
        x: Sequence[Any],
        beta: Any,
        y: Sequence[Any],
        z: MutableSequence[Any],
    ) -> None:
        _check_sizes(x, y, z)
        self._store(z, (alpha * a + beta * b for a, b in zip(x, y)))

    def axpy(
        self, alpha: Any, x: Sequence[Any], y: Sequence[Any], z: MutableSequence[Any]
    ) -> None:
        _check_sizes(x, y, z)
        self._store(z, (alpha * a + b for a, b in zip(x, y)))

    def axpby(self, alpha: Any, beta: Any, x: Sequence[Any], z: MutableSequence[Any]) -> None:
        _check_sizes(x, z)
        self._store(z, (alpha * a + beta * c for a, c in zip(x, z)))

    def abs(self, x: Sequence[Any], y: MutableSequence[Any]) -> None:
        _check_sizes(x, y)
        self._store(y, (abs(v) for v in x))

    def add_scalar(self, x: Sequence[Any], alpha: Any, y: MutableSequence[Any]) -> None:
        _check_sizes(x, y)
        self._store(y, (v + alpha for v in x))

    def min(self, x: Sequence[Any]) -> Ready:
        return Ready(min(itertools.chain((real_part(v) for v in x), (sys.float_info.max,))))

    def max(self, x: Sequence[Any]) -> Ready:
        return Ready(max(itertools.chain((real_part(v) for v in x), (-sys.float_info.max,))))

    def lp_norm(self, p: int, x: Sequence[Any]) -> Ready:
        if p < 1:
            raise ValueError(f"norm order must be positive, got {p}")
        if p == 2:
            return Ready(math.sqrt(real_part(self._scalar_prod(x, x))))
        # Orders other than 2 accumulate absolute values before taking the root.
        total = math.fsum(abs(v) for v in x) if len(x) else 0.0
        if p == 1:
            return Ready(total)
        return Ready(total ** (1.0 / p))

    def inf_norm(self, x: Sequence[Any]) -> Ready:
        return Ready(max(itertools.chain((abs(v) for v in x), (sys.float_info.min,))))

    def dot(self, x: Sequence[Any], y: Sequence[Any]) -> Ready:
        return Ready(self._scalar_prod(x, y))

    def local_size(self, x: Sequence[Any]) -> int:
        return len(x)

    def global_size(self, x: Sequence[Any]) -> Ready:
        return Ready(self.local_size(x))

    def _scalar_prod(self, x: Sequence[Any], y: Sequence[Any]) -> Any:
        _check_sizes(x, y)
        return sum((conj(b) * a for a, b in zip(x, y)), 0.0)


class SeqVector(Vector):
    """A sequential vector that owns its storage.

    The scalar type is complex when any of ``values`` is complex, else float.
    """

    def __init__(
        self,
        size: int = 0,
        var: Any = ANONYMOUS,
        values: Iterable[Any] | None = None,
    ) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if values is None:
            scalar: type = float
            data = [scalar(0)] * size
        else:
            items = list(values)
            if size and size != len(items):
                raise ValueError(f"size {size} does not match {len(items)} values")
            scalar = _infer_scalar(items)
            data = [scalar(v) for v in items]
        super().__init__(data, SeqOps(scalar), var)

    @classmethod
    def _empty(cls, scalar: type, var: Any) -> "SeqVector":
        vec = cls.__new__(cls)
        Vector.__init__(vec, [], SeqOps(scalar), var)
        return vec

    def resize(self, size: int) -> None:
        """Grow with zeros or truncate to ``size`` components."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        current = len(self.data)
        if size < current:
            del self.data[size:]
        else:
            self.data.extend([self.ops.scalar(0)] * (size - current))


class SeqView(Vector):
    """A sequential vector over storage owned by someone else."""

    def __init__(self, buffer: MutableSequence[Any], var: Any = ANONYMOUS) -> None:
        super().__init__(buffer, SeqOps(_infer_scalar(buffer)), var)


class SeqWork:
    """A fixed number of work vectors sized like a given vector on first use."""

    def __init__(self, vec: Vector, nwork: int) -> None:
        if nwork < 0:
            raise ValueError(f"number of work vectors must not be negative, got {nwork}")
        self._size = vec.local_size()
        self._vecs = [SeqVector._empty(vec.ops.scalar, vec.var) for _ in range(nwork)]

    def get(self, index: int) -> SeqVector:
        if not 0 <= index < len(self._vecs):
            raise IndexError(f"work vector {index} out of range")
        vec = self._vecs[index]
        if vec.local_size() != self._size:
            vec.resize(self._size)
        return vec

    def __len__(self) -> int:
        return len(self._vecs)

    def __iter__(self) -> Iterator[SeqVector]:
        return (self.get(i) for i in range(len(self._vecs)))