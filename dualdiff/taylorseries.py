"""Taylor series of scalar or vector functions along a direction."""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .derivative import Along, At, derivatives, seed_along, unseed_at

__all__ = ["TaylorSeries", "taylorseries"]


class TaylorSeries:
    """A truncated Taylor series built from directional derivatives.

    Each derivative is either a float or a numpy array, for scalar and
    vector functions respectively.
    """

    def __init__(self, derivatives):
        items = list(derivatives)
        if not items:
            raise ValueError("a Taylor series needs at least the value term")
        self._derivatives = [
            item if np.isscalar(item) else np.array(item, dtype=float) for item in items
        ]

    def __call__(self, t):
        """Evaluate the series at step ``t`` along the direction."""
        terms = self._derivatives
        result = terms[0] if np.isscalar(terms[0]) else terms[0].copy()
        factor = t
        for i, term in enumerate(terms[1:], start=1):
            result = result + factor * term
            factor *= t / (i + 1)
        return result

    def derivatives(self) -> list:
        """Return the directional derivatives, from order 0 upwards."""
        return [d if np.isscalar(d) else d.copy() for d in self._derivatives]

    def __repr__(self) -> str:
        return f"TaylorSeries({self._derivatives!r})"


def taylorseries(f: Callable[..., Any], along: Along, at: At) -> TaylorSeries:
    """Return the Taylor series of ``f`` along the direction of ``along`` at ``at``."""
    if not isinstance(along, Along) or not isinstance(at, At):
        raise TypeError("expected along(...) and at(...) specifications")
    seed_along(at, along)
    try:
        data = derivatives(f(*at.args))
    finally:
        unseed_at(at)
    return TaylorSeries(data)