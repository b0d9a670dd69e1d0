"""Seeding dual numbers and extracting the derivatives they carry.

The helpers ``wrt``, ``at`` and ``along`` name the variables of a
derivative computation. ``evaluate`` seeds the variables, calls the
function and unseeds them again. ``derivative`` and ``derivatives`` read
the results out as floats.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable

import numpy as np

from .dual import Dual, component, order_of, seed_component

__all__ = [
    "Wrt",
    "At",
    "Along",
    "wrt",
    "at",
    "along",
    "seed",
    "unseed",
    "seed_along",
    "unseed_at",
    "evaluate",
    "derivative",
    "derivatives",
]


@dataclass(frozen=True)
class Wrt:
    """The variables *with respect to* which derivatives are computed."""

    args: tuple


@dataclass(frozen=True)
class At:
    """The arguments *at* which a function is evaluated."""

    args: tuple


@dataclass(frozen=True)
class Along:
    """The direction vectors *along* which derivatives are computed."""

    args: tuple


def wrt(*args) -> Wrt:
    """Name the variables with respect to which derivatives are computed."""
    return Wrt(args)


def at(*args) -> At:
    """Name the arguments at which a function is evaluated."""
    return At(args)


def along(*args) -> Along:
    """Name the directions along which derivatives are computed."""
    return Along(args)


def _is_vector(x) -> bool:
    if isinstance(x, (Dual, Real, str, bytes)):
        return False
    return hasattr(x, "__len__") and hasattr(x, "__getitem__")


def _as_wrt(spec) -> Wrt:
    return Wrt((spec,)) if isinstance(spec, Dual) else spec


def seed(wrt: Wrt, value=1.0) -> None:
    """Seed each variable of ``wrt`` at the derivative order of its position.

    The first variable gets its 1st-order seed, the second its 2nd-order
    seed, and so on. When the numbers have a higher order than the list is
    long, the last variable takes the remaining orders, so ``wrt(x, y)`` on
    third-order numbers behaves as ``wrt(x, y, y)``.
    """
    spec = _as_wrt(wrt)
    variables = spec.args
    if not variables:
        raise ValueError("a wrt list needs at least one variable")
    first = variables[0]
    if not isinstance(first, Dual):
        raise TypeError("only dual numbers can be seeded")
    n = first.order()
    if len(variables) > n:
        raise ValueError(
            f"cannot seed {len(variables)} variables in numbers of order {n}; "
            "higher-order derivatives need higher-order numbers"
        )
    for index in range(n):
        var = variables[min(index, len(variables) - 1)]
        seed_component(var, index + 1, value)


def unseed(wrt: Wrt) -> None:
    """Reset the seeds placed by :func:`seed` to zero."""
    seed(wrt, 0.0)


def seed_along(at: At, along: Along) -> None:
    """Set the 1st-order seed of every argument to its direction component."""
    if len(at.args) != len(along.args):
        raise ValueError("at(...) and along(...) must have the same number of items")
    for arg, direction in zip(at.args, along.args):
        if _is_vector(arg):
            if not _is_vector(direction):
                raise TypeError("a vector argument needs a vector direction")
            if len(arg) != len(direction):
                raise ValueError("argument and direction vectors differ in length")
            for item, d in zip(arg, direction):
                seed_component(item, 1, d)
        else:
            seed_component(arg, 1, direction)


def unseed_at(at: At) -> None:
    """Reset the 1st-order seed of every argument to zero."""
    for arg in at.args:
        if _is_vector(arg):
            for item in arg:
                seed_component(item, 1, 0.0)
        else:
            seed_component(arg, 1, 0.0)


def evaluate(f: Callable[..., Any], at: At, spec):
    """Call ``f`` on the arguments of ``at`` with ``spec`` seeded, then unseed."""
    if isinstance(spec, Along):
        seed_along(at, spec)
        try:
            return f(*at.args)
        finally:
            unseed_at(at)
    spec = _as_wrt(spec)
    if not isinstance(spec, Wrt):
        raise TypeError("expected a wrt(...) or along(...) specification")
    seed(spec)
    try:
        return f(*at.args)
    finally:
        unseed(spec)


def _evaluate_call(target, args):
    if len(args) != 2:
        raise TypeError("expected a function followed by wrt(...)/along(...) and at(...)")
    spec, point = args
    if not isinstance(point, At):
        raise TypeError("the last argument must be at(...)")
    return evaluate(target, point, spec)


def derivative(target, *args, order=1):
    """Return the derivative of the given order.

    ``target`` is a dual number, a sequence of them, or a function; for a
    function, pass ``wrt(...)`` and ``at(...)`` after it. A sequence gives a
    numpy array with one entry per item.
    """
    if callable(target):
        return derivative(_evaluate_call(target, args), order=order)
    if args:
        raise TypeError("extra arguments are only accepted with a function")
    if _is_vector(target):
        return np.array([component(item, order) for item in target], dtype=float)
    return component(target, order)


def derivatives(target, *args):
    """Return every derivative, from order 0 up to the order of the numbers.

    ``target`` is a dual number, a sequence of them, or a function followed
    by ``wrt(...)`` or ``along(...)`` and then ``at(...)``. For a sequence,
    each entry of the returned list is a numpy array over the items.
    """
    if callable(target):
        return derivatives(_evaluate_call(target, args))
    if args:
        raise TypeError("extra arguments are only accepted with a function")
    if _is_vector(target):
        items = list(target)
        n = order_of(items[0]) if items else 0
        return [
            np.array([component(item, k) for item in items], dtype=float)
            for k in range(n + 1)
        ]
    return [component(target, k) for k in range(order_of(target) + 1)]