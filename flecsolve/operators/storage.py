"""Uniform access to an operator held directly or through a handle."""

from __future__ import annotations

from typing import Any

from flecsolve.operators.handle import Handle, ref as _ref


class Storage:
    """Holds an operator, or a handle to one, and hands out the operator."""

    def __init__(self, op: Any) -> None:
        if isinstance(op, Storage):
            op = op.op
        self.op = op

    def get(self) -> Any:
        """The operator itself, unwrapping a handle."""
        if isinstance(self.op, Handle):
            return self.op.get()
        return self.op

    def ref(self) -> Handle:
        """A non-owning handle to the stored operator."""
        return _ref(self.get())