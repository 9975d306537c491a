import hypothesis.strategies

from binpow import INT32_MAX, INT32_MIN


def int32_exponents(
    min_value: int = INT32_MIN,
    max_value: int = INT32_MAX,
) -> hypothesis.strategies.SearchStrategy[int]:
    """Strategy for exponents representable as 32-bit signed integers."""
    return hypothesis.strategies.integers(
        min_value=max(min_value, INT32_MIN),
        max_value=min(max_value, INT32_MAX),
    )
