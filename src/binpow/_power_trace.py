"""Iteration trace of binary exponentiation."""

import math
from dataclasses import dataclass
from typing import List

from ._coercion import _as_float64, _as_int32


@dataclass(frozen=True)
class PowerStep:
    """State after one iteration of the squaring loop.

    Attributes
    ----------
    exponent : int
        Remaining exponent bits at the start of the iteration.
    bit : int
        Least significant bit of ``exponent``.
    accumulator : float
        Partial product after the optional multiply by the base.
    base : float
        Base after squaring.
    """

    exponent: int
    bit: int
    accumulator: float
    base: float


def power_trace(x: float, y: int) -> List[PowerStep]:
    r"""
    Record the iterations :func:`binpow.power` performs for ``(x, y)``.

    Inputs resolved before the loop (NaN base, zero exponent, zero base with
    a negative exponent) produce an empty trace. Otherwise the trace has
    ``abs(y).bit_length()`` steps and the last accumulator is
    ``power(x, y)``.

    Parameters
    ----------
    x : float
        Base.
    y : int
        Exponent. Must be in ``[-2**31, 2**31 - 1]``.

    Returns
    -------
    list of PowerStep
        One entry per loop iteration.

    Examples
    --------
    >>> [(s.bit, s.accumulator) for s in power_trace(5.0, 5)]
    [(1, 5.0), (0, 5.0), (1, 3125.0)]
    """
    x = _as_float64(x)
    y = _as_int32(y)

    if math.isnan(x):
        return []

    if y < 0:
        y = -y
        if x == 0.0:
            return []
        x = 1.0 / x
    elif y == 0:
        return []

    steps = []
    v = 1.0
    while y != 0:
        bit = y & 1
        if bit:
            v *= x
        x *= x
        steps.append(PowerStep(exponent=y, bit=bit, accumulator=v, base=x))
        y >>= 1
    return steps


__all__ = ["PowerStep", "power_trace"]
