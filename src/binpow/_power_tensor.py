import math
import warnings
from typing import Optional

import torch
from torch import Tensor

from ._power import power


def power_tensor(
    x: float | Tensor,
    y: int | Tensor,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""
    Integer power as a scalar tensor.

    Evaluates :func:`binpow.power` in float64 and stores the result in a
    0-d tensor.

    Parameters
    ----------
    x : float or Tensor
        Base. A tensor must hold exactly one real element.
    y : int or Tensor
        Exponent. Must be in ``[-2**31, 2**31 - 1]``.
    dtype : torch.dtype, optional
        Real floating-point dtype of the returned tensor. Default is
        torch.float64.
    device : torch.device, optional
        Device of the returned tensor. Defaults to the device of ``x`` when
        ``x`` is a tensor.

    Returns
    -------
    Tensor
        Scalar tensor containing :math:`x^y`.

    Warns
    -----
    RuntimeWarning
        If a finite result overflows ``dtype``.

    Examples
    --------
    >>> power_tensor(2.0, 10)
    tensor(1024., dtype=torch.float64)

    >>> power_tensor(2.0, -1, dtype=torch.float32)
    tensor(0.5000)
    """
    if dtype is None:
        dtype = torch.float64

    if not dtype.is_floating_point:
        raise TypeError(
            f"dtype must be a real floating-point dtype, got {dtype}"
        )

    if device is None and isinstance(x, Tensor):
        device = x.device

    value = power(x, y)

    result = torch.tensor(value, dtype=torch.float64, device=device).to(dtype)

    if math.isfinite(value) and torch.isinf(result).item():
        warnings.warn(
            f"Result {value!r} overflows {dtype}; returning infinity.",
            RuntimeWarning,
            stacklevel=2,
        )

    return result


__all__ = ["power_tensor"]
