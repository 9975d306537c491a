import math

from ._coercion import _as_float64, _as_int32


def power(x: float, y: int) -> float:
    r"""
    Integer power of a double-precision base.

    Computes :math:`x^y` for a float64 base and a 32-bit signed integer
    exponent using right-to-left binary exponentiation.

    Method
    ------
    For a positive exponent,

    .. math::

       x^y = \begin{cases}
             x (x^2)^{(y-1)/2}, & y \text{ odd} \\
             (x^2)^{y/2}, & y \text{ even}
       \end{cases}

    so only the powers :math:`x^{2^k}` selected by the set bits of
    :math:`y` are needed. Starting from :math:`v = 1`, each iteration
    multiplies :math:`v` by :math:`x` when the least significant bit of
    :math:`y` is set, squares :math:`x`, and shifts that bit off. For
    :math:`5^5` (:math:`y = 101_2`) the accumulator picks up :math:`5` and
    :math:`5^4 = 625`, giving :math:`3125` after three iterations.

    The loop performs :math:`\lfloor \log_2 y \rfloor + 1` iterations, at
    most 32 for an int32 exponent.

    Special Values
    --------------
    - power(nan, y) = nan for all y, including y = 0
    - power(x, 0) = 1 for all other x, including 0 and inf
    - power(+0, y) = +inf for y < 0
    - power(-0, y) = -inf for odd y < 0, +inf for even y < 0
    - power(x, y) = power(1 / x, -y) for y < 0, including y = -2**31

    Accuracy
    --------
    Repeated squaring accumulates rounding error, so results for large
    exponents can differ from the correctly rounded value in the last one or
    two bits:

    >>> power(10.0, 308)
    1.0000000000000006e+308

    Intermediate squares may overflow to infinity.

    Parameters
    ----------
    x : float
        Base. Any float64 value, including signed zeros, infinities and NaN.
    y : int
        Exponent. Must be in ``[-2**31, 2**31 - 1]``.

    Returns
    -------
    float
        The value of :math:`x^y`.

    Raises
    ------
    TypeError
        If ``x`` is not a real number or ``y`` is not an integer.
    ValueError
        If ``x`` is not representable as a float64 or ``y`` does not fit in
        32 signed bits.

    Examples
    --------
    >>> power(2.0, 3)
    8.0
    >>> power(2.0, -2)
    0.25
    >>> power(0.0, 0)
    1.0
    >>> power(-0.0, -3)
    -inf
    """
    x = _as_float64(x)
    y = _as_int32(y)

    if math.isnan(x):
        return math.nan

    if y < 0:
        # Python ints do not wrap, so -(-2**31) is exactly 2**31
        y = -y
        if x == 0.0:
            # 1 / +-0 = +-inf
            x = math.copysign(math.inf, x)
            if y & 1:
                return x
            return math.inf
        x = 1.0 / x
    elif y == 0:
        return 1.0

    v = 1.0
    while y != 0:
        if y & 1:
            v *= x
        x *= x  # may overflow
        y >>= 1
    return v


__all__ = ["power"]
