"""Hypothesis strategies for window testing."""

from ._positive_real_numbers import positive_real_numbers
from ._sample_dtypes import (
    complex_sample_dtypes,
    real_sample_dtypes,
    sample_dtypes,
)
from ._samples import samples
from ._taper_fractions import taper_fractions
from ._window_lengths import window_lengths

__all__ = [
    # Parameter strategies
    "positive_real_numbers",
    "taper_fractions",
    "window_lengths",
    # Sample strategies
    "samples",
    # Dtype strategies
    "real_sample_dtypes",
    "complex_sample_dtypes",
    "sample_dtypes",
]
