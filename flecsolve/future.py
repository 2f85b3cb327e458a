"""Composable futures for deferred reductions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Protocol, TypeVar

T = TypeVar("T")


class Waitable(Protocol):
    def get(self) -> Any: ...

    def wait(self) -> Any: ...


@dataclass
class Ready(Generic[T]):
    """A future whose value is already known."""

    value: T

    def get(self) -> T:
        return self.value

    def wait(self) -> T:
        """Return at once with the value, which is already available."""
        return self.value


class FutureVector:
    """A group of futures resolved together into a tuple."""

    def __init__(self, futures: Iterable[Waitable]) -> None:
        self.futures = tuple(futures)

    def get(self) -> tuple:
        return tuple(f.get() for f in self.futures)

    def wait(self) -> None:
        for f in self.futures:
            f.wait()

    def __enter__(self) -> "FutureVector":
        return self

    def __exit__(self, *exc: object) -> None:
        self.wait()


@dataclass
class FutureTransform:
    """A future whose value is a function applied to another future's value."""

    future: Waitable
    f: Callable[[Any], Any]

    def get(self) -> Any:
        return self.f(self.future.get())

    def wait(self) -> None:
        self.future.wait()

    def __enter__(self) -> "FutureTransform":
        return self

    def __exit__(self, *exc: object) -> None:
        self.wait()