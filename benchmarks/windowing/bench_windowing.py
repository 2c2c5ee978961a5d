"""Benchmarks for in-place window application.

This module compares torchwindow windows (Gaussian, Tukey, precomputed
Values) against multiplying by scipy window arrays.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy.signal import windows as scipy_windows

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

from torchwindow.windowing import Gaussian, Tukey, Values

_UNITS = ((1e-6, 1e9, "ns"), (1e-3, 1e6, "us"), (1.0, 1e3, "ms"))


class BenchWindowing:
    """Benchmarks for window application.

    Each ``bench_*`` method times a torchwindow call and, when scipy is
    installed, the equivalent ``x * scipy_window`` product, then prints
    the mean run time of both and their ratio.
    """

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(self, func: Callable[[], object]) -> np.ndarray:
        """Per-iteration wall times of ``func`` in seconds."""
        for _ in range(self.warmup):
            func()

        times = np.empty(self.iterations)
        for i in range(self.iterations):
            start = time.perf_counter()
            func()
            if torch.cuda.is_available():
                torch.cuda.synchronize()
            times[i] = time.perf_counter() - start
        return times

    @staticmethod
    def _seconds(value: float) -> str:
        for limit, scale, unit in _UNITS:
            if value < limit:
                return f"{value * scale:.3f}{unit}"
        return f"{value:.3f}s"

    def _report(
        self,
        title: str,
        ours: np.ndarray,
        reference: Optional[np.ndarray] = None,
    ) -> None:
        rows = [("torchwindow", ours)]
        if reference is not None:
            rows.append(("scipy", reference))

        print(f"\n{title}\n{'-' * len(title)}")
        for label, times in rows:
            print(
                f"  {label + ':':<13}{self._seconds(times.mean())}"
                f" +/- {self._seconds(times.std())}"
            )
        if reference is not None:
            ratio = reference.mean() / ours.mean()
            print(f"  {'ratio:':<13}{ratio:.2f}x scipy time")

    def bench_gaussian(self, length: int = 65536, std: float = 0.4) -> None:
        """Benchmark Gaussian against scipy.signal.windows.gaussian."""
        x = torch.randn(length, dtype=torch.float64)
        window = Gaussian(std)
        # Cloning keeps repeated in-place runs from underflowing
        tw_time = self._bench(lambda: window.apply(x.clone()))

        scipy_time = None
        if SCIPY_AVAILABLE:
            x_np = x.numpy().copy()
            sigma = std * (length - 1) / 2
            scipy_time = self._bench(
                lambda: x_np * scipy_windows.gaussian(length, sigma)
            )

        self._report(
            f"gaussian (length={length}, std={std})", tw_time, scipy_time
        )

    def bench_tukey(self, length: int = 65536, alpha: float = 0.5) -> None:
        """Benchmark Tukey against scipy.signal.windows.tukey."""
        x = torch.randn(length, dtype=torch.float64)
        window = Tukey(alpha)
        tw_time = self._bench(lambda: window.apply(x.clone()))

        scipy_time = None
        if SCIPY_AVAILABLE:
            x_np = x.numpy().copy()
            scipy_time = self._bench(
                lambda: x_np * scipy_windows.tukey(length, alpha)
            )

        self._report(
            f"tukey (length={length}, alpha={alpha})", tw_time, scipy_time
        )

    def bench_values(self, length: int = 65536, batch_size: int = 32) -> None:
        """Benchmark precomputed Tukey values on a batch of frames."""
        values = Values.from_window(Tukey(0.5), length, dtype=torch.float64)
        x = torch.randn(batch_size, length, dtype=torch.complex128)
        tw_time = self._bench(lambda: values.apply(x.clone()))

        scipy_time = None
        if SCIPY_AVAILABLE:
            w_np = scipy_windows.tukey(length, 0.5)
            x_np = x.numpy().copy()
            scipy_time = self._bench(lambda: x_np * w_np)

        self._report(
            f"values (length={length}, batch={batch_size}, complex)",
            tw_time,
            scipy_time,
        )

    def run_all(self) -> None:
        """Run all benchmarks."""
        print("=" * 60)
        print("WINDOWING BENCHMARKS")
        print("=" * 60)

        print("\n--- Closed-Form Windows ---")
        self.bench_gaussian()
        self.bench_tukey()

        print("\n--- Precomputed Values ---")
        self.bench_values()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Length Scaling (tukey) ---")
        for length in [1024, 16384, 262144, 1048576]:
            self.bench_tukey(length=length)

        print("\n--- Taper Fraction Scaling (tukey) ---")
        for alpha in [0.1, 0.5, 0.9]:
            self.bench_tukey(alpha=alpha)


if __name__ == "__main__":
    bench = BenchWindowing(warmup=5, iterations=20)
    bench.run_all()
    print("\n")
    bench.run_scaling()
