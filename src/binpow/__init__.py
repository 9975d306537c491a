"""binpow: integer powers of floating-point numbers by binary exponentiation."""

from ._coercion import INT32_MAX, INT32_MIN
from ._power import power
from ._power_tensor import power_tensor
from ._power_trace import PowerStep, power_trace

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "PowerStep",
    "power",
    "power_tensor",
    "power_trace",
]

__version__ = "0.1.0"
