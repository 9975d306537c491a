import numbers
import operator

import numpy
from torch import Tensor

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _as_float64(x) -> float:
    """Normalize a real scalar base to a Python float.

    Parameters
    ----------
    x : float, int, bool, numpy real or bool scalar, or single-element Tensor
        Base value. Must be representable as a float64.

    Returns
    -------
    float
        ``x`` as an IEEE-754 double.
    """
    if isinstance(x, Tensor):
        if x.numel() != 1:
            raise ValueError(
                f"x must be a scalar, got a tensor with shape {tuple(x.shape)}"
            )
        if x.is_complex():
            raise TypeError("x must be a real number")
        return float(x.item())

    if isinstance(x, numpy.bool_):
        x = bool(x)

    if isinstance(x, numbers.Real):
        try:
            return float(x)
        except OverflowError:
            raise ValueError(
                f"x must be representable as a float64, got {x!r}"
            ) from None

    if isinstance(x, numbers.Complex):
        raise TypeError("x must be a real number")

    raise TypeError(f"x must be a real number, got {type(x).__name__}")


def _as_int32(y) -> int:
    """Normalize an integer exponent, checking it fits in 32 signed bits.

    Parameters
    ----------
    y : int, bool, numpy integer or bool scalar, or single-element integer Tensor
        Exponent value.

    Returns
    -------
    int
        ``y`` as a Python int in ``[INT32_MIN, INT32_MAX]``.
    """
    if isinstance(y, Tensor):
        if y.numel() != 1:
            raise ValueError(
                f"y must be a scalar, got a tensor with shape {tuple(y.shape)}"
            )
        if y.is_floating_point() or y.is_complex():
            raise TypeError(f"y must be an integer, got dtype {y.dtype}")
        y = y.item()

    if isinstance(y, numpy.bool_):
        y = bool(y)

    try:
        y = operator.index(y)
    except TypeError:
        raise TypeError(
            f"y must be an integer, got {type(y).__name__}"
        ) from None

    if not INT32_MIN <= y <= INT32_MAX:
        raise ValueError(
            f"y must be in [{INT32_MIN}, {INT32_MAX}], got {y}"
        )

    return y
