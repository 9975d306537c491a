"""Test mixins for scalar operators."""

from ._device_mixin import DeviceMixin
from ._dtype_mixin import DtypeMixin
from ._identity_mixin import IdentityMixin
from ._nan_inf_mixin import NanInfMixin
from ._special_value_mixin import SpecialValueMixin
from ._sympy_reference_mixin import SymPyReferenceMixin

__all__ = [
    "DeviceMixin",
    "DtypeMixin",
    "IdentityMixin",
    "NanInfMixin",
    "SpecialValueMixin",
    "SymPyReferenceMixin",
]
