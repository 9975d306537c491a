"""Hypothesis strategies for scalar operator testing."""

from ._available_devices import available_devices
from ._int32_exponents import int32_exponents
from ._positive_real_numbers import positive_real_numbers
from ._real_number_dtypes import real_number_dtypes
from ._real_numbers import real_numbers
from ._special_floats import SPECIAL_FLOATS, special_floats

__all__ = [
    # Numeric strategies
    "positive_real_numbers",
    "real_numbers",
    "special_floats",
    "SPECIAL_FLOATS",
    # Exponent strategies
    "int32_exponents",
    # Dtype strategies
    "real_number_dtypes",
    # Device strategies
    "available_devices",
]
