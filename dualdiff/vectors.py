"""Vectors and element-wise arrays of dual numbers.

``DualVector`` behaves like a column vector. It supports addition,
subtraction, negation and in-place scaling by a scalar, and it compares
equal as a whole. ``DualArray`` adds element-wise multiplication and
division, and arithmetic with scalars on either side. Its equality also
accepts plain numeric sequences such as numpy arrays.
"""

from __future__ import annotations

from numbers import Integral, Real
from typing import Iterable, Iterator

import numpy as np

from .dual import Dual, val

__all__ = ["DualVector", "DualArray"]


def _is_scalar(x) -> bool:
    return isinstance(x, (Dual, Real))


def _check_item(value):
    if not _is_scalar(value):
        raise TypeError(f"expected a dual or real number, got {type(value).__name__}")
    return value if isinstance(value, Dual) else float(value)


def _format(x) -> str:
    return f"{val(x):g}"


class DualVector:
    """A fixed-length column vector of dual or real numbers."""

    __hash__ = None

    def __init__(self, items: Iterable | int = ()):
        if isinstance(items, Integral):
            if items < 0:
                raise ValueError("vector size must be non-negative")
            self._items = [0.0] * int(items)
        else:
            self._items = [_check_item(item) for item in items]

    @classmethod
    def _from_list(cls, items: list):
        obj = cls.__new__(cls)
        obj._items = items
        return obj

    def _index(self, index) -> int:
        if not isinstance(index, Integral):
            raise TypeError("vector indices must be integers")
        if not 0 <= index < len(self._items):
            raise IndexError("vector index out of range")
        return int(index)

    def _same_kind(self, other) -> bool:
        return isinstance(other, DualVector) and type(other) is type(self)

    def _check_length(self, other) -> None:
        if len(other) != len(self):
            raise ValueError(
                f"vectors differ in length: {len(self)} and {len(other)}"
            )

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[self._index(index)]

    def __setitem__(self, index, value) -> None:
        self._items[self._index(index)] = _check_item(value)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __str__(self) -> str:
        texts = [_format(item) for item in self._items]
        width = max((len(t) for t in texts), default=0)
        return "\n".join(t.rjust(width) for t in texts)

    def __repr__(self) -> str:
        body = ", ".join(_format(item) for item in self._items)
        return f"{type(self).__name__}([{body}])"

    def __neg__(self):
        return self._from_list([-item for item in self._items])

    def __add__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        self._check_length(other)
        return self._from_list([a + b for a, b in zip(self._items, other._items)])

    def __sub__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        self._check_length(other)
        return self._from_list([a - b for a, b in zip(self._items, other._items)])

    def __iadd__(self, other):
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self._items = result._items
        return self

    def __isub__(self, other):
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self._items = result._items
        return self

    def __imul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        self._items = [item * other for item in self._items]
        return self

    def __itruediv__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        self._items = [item / other for item in self._items]
        return self

    def __eq__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        if len(other) != len(self):
            return False
        return all(val(a) == val(b) for a, b in zip(self._items, other._items))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def asarray(self) -> np.ndarray:
        """Return the innermost values as a numpy array of floats."""
        return np.array([val(item) for item in self._items], dtype=float)


class DualArray(DualVector):
    """A vector of dual numbers with element-wise arithmetic."""

    __hash__ = None

    def _binary(self, other, op):
        if self._same_kind(other):
            self._check_length(other)
            return self._from_list([op(a, b) for a, b in zip(self._items, other._items)])
        if _is_scalar(other):
            return self._from_list([op(a, other) for a in self._items])
        return NotImplemented

    def _reflected(self, other, op):
        if not _is_scalar(other):
            return NotImplemented
        return self._from_list([op(other, a) for a in self._items])

    def _inplace(self, other, op):
        result = self._binary(other, op)
        if result is NotImplemented:
            return NotImplemented
        self._items = result._items
        return self

    def __add__(self, other):
        return self._binary(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._binary(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._binary(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._binary(other, lambda a, b: a / b)

    def __radd__(self, other):
        return self._reflected(other, lambda a, b: a + b)

    def __rsub__(self, other):
        return self._reflected(other, lambda a, b: a - b)

    def __rmul__(self, other):
        return self._reflected(other, lambda a, b: a * b)

    def __rtruediv__(self, other):
        return self._reflected(other, lambda a, b: a / b)

    def __iadd__(self, other):
        return self._inplace(other, lambda a, b: a + b)

    def __isub__(self, other):
        return self._inplace(other, lambda a, b: a - b)

    def __imul__(self, other):
        return self._inplace(other, lambda a, b: a * b)

    def __itruediv__(self, other):
        return self._inplace(other, lambda a, b: a / b)

    def _values_of(self, other):
        if self._same_kind(other):
            return [val(b) for b in other._items]
        if isinstance(other, (np.ndarray, list, tuple)):
            return [float(b) for b in np.asarray(other, dtype=float).ravel()]
        return None

    def __eq__(self, other):
        values = self._values_of(other)
        if values is None:
            return NotImplemented
        if len(values) != len(self):
            return False
        return all(val(a) == b for a, b in zip(self._items, values))

    def __ne__(self, other):
        values = self._values_of(other)
        if values is None:
            return NotImplemented
        if len(values) != len(self):
            return True
        return any(val(a) != b for a, b in zip(self._items, values))