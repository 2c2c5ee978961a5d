import math
from typing import Optional

import torch
from torch import Tensor


def _hann_weights(
    n: int,
    dtype: torch.dtype,
    device: Optional[torch.device],
) -> Tensor:
    # Tensor division so that n = 1 gives an infinite step, not an exception.
    step = torch.full((), 2 * math.pi, dtype=dtype, device=device) / (n - 1)
    k = torch.arange(n, dtype=dtype, device=device)
    return 0.5 * (1 - torch.cos(step * k))


def hann_window(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Hann window function (symmetric).

    Computes a symmetric Hann (raised cosine) window of length n. The first
    and last weights are zero.

    Mathematical Definition
    -----------------------
    The symmetric Hann window is defined as:

        w[k] = 0.5 * (1 - cos(2 * pi * k / (n - 1)))

    for k = 0, 1, ..., n-1.

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be non-negative.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. If None, uses the
        default floating point type.
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values.

    Notes
    -----
    The formula is evaluated as written, so ``n = 1`` produces ``[nan]``
    rather than ``torch.hann_window``'s ``[1.]``.

    See Also
    --------
    tukey_window : Equal to hann_window when alpha >= 1.
    """
    return _hann_weights(n, dtype or torch.get_default_dtype(), device)
