"""Helpers shared by the window generators and transforms."""

import math
import warnings
from typing import Union

import torch
from torch import Tensor

from torchwindow._exceptions import WindowWarning


def sample_count(input: Tensor) -> int:
    """Return the number of samples along the last dimension of ``input``.

    Raises
    ------
    TypeError
        If ``input`` is not a tensor of real floating or complex samples.
    ValueError
        If ``input`` is zero-dimensional.
    """
    if not isinstance(input, Tensor):
        raise TypeError(f"expected a Tensor, got {type(input).__name__}")
    if not (input.is_floating_point() or input.is_complex()):
        raise TypeError(
            f"expected floating point or complex samples, got {input.dtype}"
        )
    if input.dim() == 0:
        raise ValueError("expected at least one dimension, got a 0-d tensor")
    return input.shape[-1]


def weight_dtype(input: Tensor) -> torch.dtype:
    """Real dtype in which weights for ``input`` are computed."""
    dtype = input.real.dtype if input.is_complex() else input.dtype
    # Half precision weights lose too much of the taper.
    if dtype in (torch.float16, torch.bfloat16):
        return torch.float32
    return dtype


def warn_if_invalid_std(std: Union[float, Tensor], stacklevel: int = 3):
    value = float(std)
    if not value > 0:
        warnings.warn(
            f"Gaussian window std should be positive, got {value}; "
            "the weights will be degenerate",
            WindowWarning,
            stacklevel=stacklevel,
        )


def warn_if_invalid_alpha(alpha: Union[float, Tensor], stacklevel: int = 3):
    value = float(alpha)
    if math.isnan(value):
        message = "Tukey window alpha is NaN"
    elif value < 0:
        message = (
            f"Tukey window alpha should be in [0, 1], got {value}; "
            "using the rectangular window"
        )
    elif value > 1:
        message = (
            f"Tukey window alpha should be in [0, 1], got {value}; "
            "using the Hann window"
        )
    else:
        return
    warnings.warn(message, WindowWarning, stacklevel=stacklevel)
