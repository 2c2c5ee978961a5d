"""torchwindow: in-place PyTorch window functions for spectral analysis."""

from . import (
    window_function,
    windowing,
)
from ._exceptions import LengthMismatchError, WindowError, WindowWarning

__all__ = [
    "LengthMismatchError",
    "WindowError",
    "WindowWarning",
    "window_function",
    "windowing",
]

__version__ = "0.1.0"
