from typing import Optional

import torch
from torch import Tensor


def rectangular_window(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Rectangular window function.

    Computes a rectangular (boxcar) window of length n, consisting of all
    ones. Applying it leaves a sequence unchanged.

    Mathematical Definition
    -----------------------
    The rectangular window is defined as:

        w[k] = 1,  for k = 0, 1, ..., n-1

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

    Examples
    --------
    >>> rectangular_window(4, dtype=torch.float64)
    tensor([1., 1., 1., 1.], dtype=torch.float64)
    """
    return torch.ones(
        n,
        dtype=dtype or torch.get_default_dtype(),
        device=device,
    )
