import math
from typing import Optional, Union

import torch
from torch import Tensor

from torchwindow._sequence import warn_if_invalid_alpha, weight_dtype

from ._hann_window import hann_window
from ._rectangular_window import rectangular_window


def _tukey_taper_(input: Tensor, alpha: Union[float, Tensor]) -> Tensor:
    """Scale the tapered edges of ``input`` in place, for 0 < alpha < 1.

    Only the ``width`` samples at each end are visited. The left edge is
    written before the mirrored right edge.
    """
    n = input.shape[-1]
    if n == 0:
        return input

    alpha_l = alpha * (n - 1)
    width = int(0.5 * alpha_l) + 1

    i = torch.arange(width, dtype=weight_dtype(input), device=input.device)
    w = 0.5 * (1 - torch.cos(2 * math.pi * i / alpha_l))

    input[..., :width].mul_(w)
    input[..., n - width :].mul_(w.flip(-1))
    return input


def tukey_window(
    n: int,
    alpha: Union[float, Tensor],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Tukey (tapered cosine) window function (symmetric).

    Computes a symmetric Tukey window of length n. The Tukey window can be
    thought of as something between a rectangular and a Hann window, with a
    flat center and cosine-tapered edges.

    Mathematical Definition
    -----------------------
    With alpha_l = alpha * (n - 1) and width = floor(alpha_l / 2) + 1:

        w[k] = w[n-1-k] = 0.5 * (1 - cos(2 * pi * k / alpha_l)),  k < width
        w[k] = 1,                                           otherwise

    Properties
    ----------
    - alpha <= 0: rectangular window (all ones)
    - alpha >= 1: Hann window
    - alpha = 0.5: the central 50% is flat and the outer quartiles taper

    Spectral leakage parameters (Poularikas, "The Handbook of Formulas and
    Tables for Signal Processing", table 7.1):

        |         | alpha=0.25 | alpha=0.5 | alpha=0.75 |
        |---------|------------|-----------|------------|
        | ΔF_0    |   1.1      |   1.22    |   1.36     |
        | ΔF_0.5  |   1.01     |   1.15    |   2.24     |
        | K       |   1.13     |   1.3     |   2.5      |
        | ɣ_max   | -14        | -15       | -19        |
        | β       |  -1.11     |  -2.5     |  -4.01     |

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be non-negative.
    alpha : float or Tensor
        Fraction of the window inside the cosine taper. Values outside
        [0, 1] emit a :class:`~torchwindow.WindowWarning` and are treated
        as 0 or 1.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. If None, uses the
        default floating point type.
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values.

    Examples
    --------
    >>> tukey_window(5, 0.5, dtype=torch.float64)
    tensor([0., 1., 1., 1., 0.], dtype=torch.float64)

    See Also
    --------
    hann_window : Equivalent to tukey_window with alpha=1.
    rectangular_window : Equivalent to tukey_window with alpha=0.
    """
    warn_if_invalid_alpha(alpha)
    if alpha <= 0:
        return rectangular_window(n, dtype=dtype, device=device)
    if alpha >= 1:
        return hann_window(n, dtype=dtype, device=device)

    return _tukey_taper_(
        torch.ones(n, dtype=dtype or torch.get_default_dtype(), device=device),
        alpha,
    )
