"""Dual numbers of arbitrary order for forward-mode automatic differentiation.

A first-order dual number carries a value and a directional derivative.
Higher orders are built by nesting: the value and the derivative of an
order-n number are themselves numbers of order n - 1.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Union

__all__ = [
    "Dual",
    "dual",
    "val",
    "order_of",
    "seed_component",
    "component",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "sinh",
    "cosh",
    "tanh",
    "exp",
    "log",
    "log10",
    "sqrt",
    "power",
    "absolute",
    "erf",
    "atan2",
    "hypot",
    "minimum",
    "maximum",
]

Scalar = Union[float, "Dual"]

_LN10 = math.log(10.0)
_TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)


def _is_operand(z) -> bool:
    return isinstance(z, (Dual, Real))


def _split(z):
    """Return the value and derivative parts of a dual or plain number."""
    if isinstance(z, Dual):
        return z.val, z.grad
    return z, 0.0


class Dual:
    """A dual number whose value and derivative may themselves be dual numbers."""

    __slots__ = ("val", "grad")

    def __init__(self, val=0.0, grad=0.0):
        self.val = val if isinstance(val, Dual) else float(val)
        self.grad = grad if isinstance(grad, Dual) else float(grad)

    def order(self) -> int:
        """Return the differentiation order carried by this number."""
        return 1 + order_of(self.val)

    # arithmetic -----------------------------------------------------------

    def __pos__(self) -> Dual:
        return Dual(self.val, self.grad)

    def __neg__(self) -> Dual:
        return Dual(-self.val, -self.grad)

    def __abs__(self) -> Dual:
        return absolute(self)

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        ov, og = _split(other)
        return Dual(self.val + ov, self.grad + og)

    def __radd__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return Dual(other + self.val, self.grad)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        ov, og = _split(other)
        return Dual(self.val - ov, self.grad - og)

    def __rsub__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return Dual(other - self.val, -self.grad)

    def __mul__(self, other):
        if isinstance(other, Dual):
            return Dual(self.val * other.val, self.grad * other.val + self.val * other.grad)
        if isinstance(other, Real):
            return Dual(self.val * other, self.grad * other)
        return NotImplemented

    def __rmul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return Dual(other * self.val, other * self.grad)

    def __truediv__(self, other):
        if isinstance(other, Dual):
            q = self.val / other.val
            return Dual(q, (self.grad - q * other.grad) / other.val)
        if isinstance(other, Real):
            return Dual(self.val / other, self.grad / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        q = other / self.val
        return Dual(q, -q * self.grad / self.val)

    def __pow__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return power(self, other)

    def __rpow__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return power(other, self)

    # comparisons act on the innermost value -------------------------------

    def __eq__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return val(self) == val(other)

    def __ne__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return val(self) != val(other)

    def __lt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return val(self) < val(other)

    def __le__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return val(self) <= val(other)

    def __gt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return val(self) > val(other)

    def __ge__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return val(self) >= val(other)

    __hash__ = None

    def __float__(self) -> float:
        return val(self)

    def __repr__(self) -> str:
        return f"Dual({self.val!r}, {self.grad!r})"

    def __str__(self) -> str:
        return str(val(self))

    # method forms of the elementary functions -----------------------------

    def sin(self) -> Dual:
        return sin(self)

    def cos(self) -> Dual:
        return cos(self)

    def tan(self) -> Dual:
        return tan(self)

    def exp(self) -> Dual:
        return exp(self)

    def log(self) -> Dual:
        return log(self)

    def sqrt(self) -> Dual:
        return sqrt(self)


def dual(value=0.0, order=1):
    """Create a dual number of the given order holding ``value`` with zero derivatives."""
    if order < 0:
        raise ValueError("order must be non-negative")
    if order == 0:
        return float(value)
    return Dual(dual(value, order - 1), dual(0.0, order - 1))


def val(x) -> float:
    """Return the innermost floating-point value of a dual or plain number."""
    while isinstance(x, Dual):
        x = x.val
    return float(x)


def order_of(x) -> int:
    """Return the order of a dual number, or 0 for a plain number."""
    return x.order() if isinstance(x, Dual) else 0


def _shaped(value, like):
    if isinstance(value, Dual):
        return value
    return dual(value, order_of(like))


def seed_component(x: Dual, index: int, value) -> None:
    """Set the seed of the given order in ``x`` in place.

    Index 0 sets the value, index 1 the outer derivative, and higher
    indices descend into the value part.
    """
    if not isinstance(x, Dual):
        raise TypeError("only dual numbers can be seeded")
    n = x.order()
    if not 0 <= index <= n:
        raise ValueError(f"seed index {index} out of range for a number of order {n}")
    if index == 0:
        x.val = _shaped(value, x.val)
    elif index == 1:
        x.grad = _shaped(value, x.grad)
    else:
        seed_component(x.val, index - 1, value)


def _component(x, index: int) -> float:
    if index == 0:
        return val(x)
    if not isinstance(x, Dual):
        return 0.0
    return _component(x.grad, index - 1)


def component(x, index: int) -> float:
    """Return the derivative of the given order stored in ``x``."""
    n = order_of(x)
    if not 0 <= index <= n:
        raise ValueError(f"derivative index {index} out of range for a number of order {n}")
    return _component(x, index)


# elementary functions -------------------------------------------------------


def sin(x):
    if isinstance(x, Dual):
        return Dual(sin(x.val), cos(x.val) * x.grad)
    return math.sin(x)


def cos(x):
    if isinstance(x, Dual):
        return Dual(cos(x.val), -sin(x.val) * x.grad)
    return math.cos(x)


def tan(x):
    if isinstance(x, Dual):
        sec = 1.0 / cos(x.val)
        return Dual(tan(x.val), sec * sec * x.grad)
    return math.tan(x)


def asin(x):
    if isinstance(x, Dual):
        return Dual(asin(x.val), x.grad / sqrt(1.0 - x.val * x.val))
    return math.asin(x)


def acos(x):
    if isinstance(x, Dual):
        return Dual(acos(x.val), -x.grad / sqrt(1.0 - x.val * x.val))
    return math.acos(x)


def atan(x):
    if isinstance(x, Dual):
        return Dual(atan(x.val), x.grad / (1.0 + x.val * x.val))
    return math.atan(x)


def sinh(x):
    if isinstance(x, Dual):
        return Dual(sinh(x.val), cosh(x.val) * x.grad)
    return math.sinh(x)


def cosh(x):
    if isinstance(x, Dual):
        return Dual(cosh(x.val), sinh(x.val) * x.grad)
    return math.cosh(x)


def tanh(x):
    if isinstance(x, Dual):
        sech = 1.0 / cosh(x.val)
        return Dual(tanh(x.val), sech * sech * x.grad)
    return math.tanh(x)


def exp(x):
    if isinstance(x, Dual):
        e = exp(x.val)
        return Dual(e, e * x.grad)
    return math.exp(x)


def log(x):
    if isinstance(x, Dual):
        return Dual(log(x.val), x.grad / x.val)
    return math.log(x)


def log10(x):
    if isinstance(x, Dual):
        return Dual(log10(x.val), x.grad / (_LN10 * x.val))
    return math.log10(x)


def sqrt(x):
    if isinstance(x, Dual):
        s = sqrt(x.val)
        return Dual(s, 0.5 * x.grad / s)
    return math.sqrt(x)


def power(x, y):
    """Raise ``x`` to the power ``y``; either or both may be dual numbers."""
    xd, yd = isinstance(x, Dual), isinstance(y, Dual)
    if not (xd or yd):
        return math.pow(x, y)
    if xd and not yd:
        return Dual(power(x.val, y), y * power(x.val, y - 1) * x.grad)
    if yd and not xd:
        p = power(x, y.val)
        return Dual(p, p * math.log(x) * y.grad)
    p = power(x.val, y.val)
    return Dual(p, p * (y.grad * log(x.val) + y.val * x.grad / x.val))


def _sign(v: float) -> float:
    return (v > 0) - (v < 0)


def absolute(x):
    if isinstance(x, Dual):
        return Dual(absolute(x.val), _sign(val(x)) * x.grad)
    return abs(float(x))


def erf(x):
    if isinstance(x, Dual):
        return Dual(erf(x.val), _TWO_OVER_SQRT_PI * exp(-(x.val * x.val)) * x.grad)
    return math.erf(x)


def atan2(y, x):
    """Return the angle of the point (x, y), differentiable in both arguments."""
    if not (isinstance(y, Dual) or isinstance(x, Dual)):
        return math.atan2(y, x)
    yv, yg = _split(y)
    xv, xg = _split(x)
    return Dual(atan2(yv, xv), (xv * yg - yv * xg) / (xv * xv + yv * yv))


def hypot(*args):
    """Return the Euclidean norm of the arguments."""
    if not any(isinstance(a, Dual) for a in args):
        return math.hypot(*(float(a) for a in args))
    parts = [_split(a) for a in args]
    h = hypot(*(v for v, _ in parts))
    return Dual(h, sum(v * g for v, g in parts) / h)


def minimum(x, y):
    """Return whichever argument has the smaller value, the first on ties."""
    return x if val(x) <= val(y) else y


def maximum(x, y):
    """Return whichever argument has the larger value, the first on ties."""
    return x if val(x) >= val(y) else y