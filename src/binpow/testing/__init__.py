"""Scalar operator testing framework.

This module provides a reusable framework for testing scalar numeric
operators, and their scalar-tensor variants, against special values,
functional identities and high-precision references.

Example usage:

    from binpow.testing import (
        ScalarOpTestCase,
        OperatorDescriptor,
        InputSpec,
        SpecialValue,
    )

    class TestMyOperator(ScalarOpTestCase):
        @property
        def descriptor(self):
            return OperatorDescriptor(
                name="my_operator",
                func=my_operator,
                arity=2,
                sympy_func=lambda x, y: x**y,
                input_specs=[
                    InputSpec(name="x", position=0, default_range=(0.5, 2.0)),
                    InputSpec(
                        name="y",
                        position=1,
                        default_range=(-8, 8),
                        is_integer=True,
                    ),
                ],
            )
"""

from .base import ScalarOpTestCase
from .descriptors import (
    IdentitySpec,
    InputSpec,
    OperatorDescriptor,
    SpecialValue,
    ToleranceConfig,
)
from .strategies import (
    SPECIAL_FLOATS,
    # Device strategies
    available_devices,
    # Exponent strategies
    int32_exponents,
    # Numeric strategies
    positive_real_numbers,
    # Dtype strategies
    real_number_dtypes,
    real_numbers,
    special_floats,
)
from .sympy_utils import SymPyReference

__all__ = [
    # Base classes
    "ScalarOpTestCase",
    # Descriptors
    "OperatorDescriptor",
    "InputSpec",
    "ToleranceConfig",
    "IdentitySpec",
    "SpecialValue",
    # Strategies - numeric
    "positive_real_numbers",
    "real_numbers",
    "special_floats",
    "SPECIAL_FLOATS",
    # Strategies - exponent
    "int32_exponents",
    # Strategies - dtype
    "real_number_dtypes",
    # Strategies - device
    "available_devices",
    # SymPy utilities
    "SymPyReference",
]
