"""Benchmarks for binary exponentiation.

This module benchmarks binpow.power against naive repeated multiplication and
math.pow, and reports how far each result is from a 50-digit reference.
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable

import mpmath
import numpy as np

from binpow import power, power_trace


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 1000,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 1000.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    # Warmup
    for _ in range(warmup):
        func(*args, **kwargs)

    # Timed runs
    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    times: dict[str, dict[str, float]],
) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    # Find fastest method
    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, ts_time in times.items():
        slowdown = ts_time["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}{suffix}"
        )


def naive_power(x: float, y: int) -> float:
    """x^y by |y| - 1 multiplications."""
    if y < 0:
        x, y = 1.0 / x, -y
    v = 1.0
    for _ in range(y):
        v *= x
    return v


def ulp_error(value: float, x: float, y: int) -> float:
    """Distance from the 50-digit reference in units in the last place."""
    with mpmath.workdps(50):
        expected = float(mpmath.mpf(x) ** y)
    return abs(value - expected) / math.ulp(expected)


class BenchPower:
    """Benchmarks for binpow.power."""

    def __init__(self, warmup: int = 3, iterations: int = 1000):
        """Initialize benchmark runner.

        Parameters
        ----------
        warmup : int, optional
            Number of warmup iterations. Default is 3.
        iterations : int, optional
            Number of timed iterations. Default is 1000.
        """
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        """Run benchmark with configured settings."""
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_compare(self, x: float = 1.0001, y: int = 1000) -> None:
        """Compare binary, naive and libm exponentiation."""
        times = {
            "binpow.power": self._bench(power, x, y),
            "naive": self._bench(naive_power, x, y),
            "math.pow": self._bench(math.pow, x, y),
        }
        print_comparison(f"x={x}, y={y}", times)

    def bench_accuracy(self, x: float = 10.0, y: int = 308) -> None:
        """Report ulp error of each method against mpmath."""
        name = f"Accuracy x={x}, y={y}"
        print(f"\n{name}")
        print("-" * len(name))
        steps = len(power_trace(x, y))
        for method_name, value in (
            ("binpow.power", power(x, y)),
            ("naive", naive_power(x, y)),
            ("math.pow", math.pow(x, y)),
        ):
            print(
                f"  {method_name}: {value!r} ({ulp_error(value, x, y):.1f} ulp)"
            )
        print(f"  binpow.power iterations: {steps}")

    def run_all(self) -> None:
        """Run all benchmarks."""
        print("=" * 60)
        print("BINARY EXPONENTIATION BENCHMARKS")
        print("=" * 60)

        self.bench_compare()
        self.bench_accuracy()
        self.bench_accuracy(x=1.0000001, y=1_000_000)

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying exponents."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        for y in [10, 100, 1000, 10000]:
            self.bench_compare(y=y)


if __name__ == "__main__":
    bench = BenchPower(warmup=3, iterations=1000)
    bench.run_all()
    print("\n")
    bench.run_scaling()
