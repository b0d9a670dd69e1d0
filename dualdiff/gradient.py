"""Gradients, Jacobians and Hessians computed by repeated forward sweeps.

Each function seeds one variable (or pair of variables) of a ``wrt(...)``
list at a time, calls the function at the ``at(...)`` arguments and reads
the derivatives out of the result before the seeds are removed again.
"""

from __future__ import annotations

from contextlib import contextmanager
from numbers import Real
from typing import Any, Callable, Iterator

import numpy as np

from .derivative import At, Wrt, seed, unseed
from .derivative import wrt as make_wrt
from .dual import Dual, component

__all__ = [
    "wrt_total_length",
    "iter_wrt_vars",
    "gradient",
    "jacobian",
    "hessian",
]


def _is_vector(x) -> bool:
    if isinstance(x, (Dual, Real, str, bytes)):
        return False
    return hasattr(x, "__len__") and hasattr(x, "__getitem__")


def _items(wrt) -> tuple:
    if isinstance(wrt, Dual):
        return (wrt,)
    if isinstance(wrt, Wrt):
        return wrt.args
    raise TypeError("expected a wrt(...) specification")


def _flatten(wrt) -> Iterator[Dual]:
    for item in _items(wrt):
        if _is_vector(item):
            for var in item:
                if not isinstance(var, Dual):
                    raise TypeError("vectors in a wrt list must hold dual numbers")
                yield var
        elif isinstance(item, Dual):
            yield item
        else:
            raise TypeError(
                "expecting a wrt list with either vectors or individual dual numbers"
            )


def wrt_total_length(wrt) -> int:
    """Return the number of variables in a wrt list, counting vector items by length."""
    return sum(len(item) if _is_vector(item) else 1 for item in _items(wrt))


def iter_wrt_vars(wrt) -> Iterator[tuple[int, Dual]]:
    """Yield ``(index, variable)`` for every variable of a wrt list, vectors flattened."""
    yield from enumerate(_flatten(wrt))


def _check(wrt, at) -> None:
    if not _items(wrt):
        raise ValueError("a wrt list needs at least one variable")
    if not isinstance(at, At):
        raise TypeError("expected an at(...) specification")
    if not at.args:
        raise ValueError("an at list needs at least one argument")


@contextmanager
def _seeded(*variables: Dual):
    spec = make_wrt(*variables)
    seed(spec)
    try:
        yield
    finally:
        unseed(spec)


def _deriv(u, order: int) -> float:
    """Read a derivative from a result that may not depend on the variables."""
    if isinstance(u, Dual):
        return component(u, order)
    if isinstance(u, Real):
        return 0.0
    raise TypeError("the function must return a dual number")


def gradient(f: Callable[..., Any], wrt, at: At) -> np.ndarray:
    """Return the gradient of scalar function ``f`` with respect to the wrt variables."""
    _check(wrt, at)
    g = np.zeros(wrt_total_length(wrt))
    for i, xi in iter_wrt_vars(wrt):
        with _seeded(xi):
            g[i] = _deriv(f(*at.args), 1)
    return g


def jacobian(f: Callable[..., Any], wrt, at: At) -> np.ndarray:
    """Return the Jacobian matrix of vector function ``f`` with respect to the wrt variables."""
    _check(wrt, at)
    n = wrt_total_length(wrt)
    jac = None
    for i, xi in iter_wrt_vars(wrt):
        with _seeded(xi):
            values = f(*at.args)
            if not _is_vector(values):
                raise TypeError("the function must return a vector of dual numbers")
            if jac is None:
                jac = np.zeros((len(values), n))
            jac[:, i] = [_deriv(v, 1) for v in values]
    return jac if jac is not None else np.zeros((0, n))


def hessian(f: Callable[..., Any], wrt, at: At) -> np.ndarray:
    """Return the Hessian matrix of scalar function ``f`` with respect to the wrt variables.

    The numbers need order two or more; the matrix is filled symmetrically.
    """
    _check(wrt, at)
    variables = list(_flatten(wrt))
    n = len(variables)
    h = np.zeros((n, n))
    for i, xi in enumerate(variables):
        for j in range(i, n):
            with _seeded(xi, variables[j]):
                h[i, j] = h[j, i] = _deriv(f(*at.args), 2)
    return h