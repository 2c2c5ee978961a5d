from dataclasses import dataclass
from typing import Union

from torch import Tensor

from torchwindow._sequence import (
    sample_count,
    warn_if_invalid_std,
    weight_dtype,
)
from torchwindow.window_function._gaussian_window import _gaussian_weights

from ._window import Window


@dataclass(frozen=True)
class Gaussian(Window):
    """
    Gaussian window.

    Scales sample k of n by

        w[k] = exp(-0.5 * ((k - a) / (std * a))^2),  a = (n - 1) / 2

    The weights are not special-cased: ``std = 0`` zeroes every sample but
    the center one, which becomes NaN, and a single sample becomes NaN.

    Parameters
    ----------
    std : float or Tensor
        Shape parameter sigma. Smaller values give a narrower window.

    Examples
    --------
    >>> x = torch.ones(5, dtype=torch.float64)
    >>> Gaussian(0.5)(x)
    tensor([0.1353, 0.6065, 1.0000, 0.6065, 0.1353], dtype=torch.float64)
    """

    std: Union[float, Tensor]

    def __post_init__(self):
        warn_if_invalid_std(self.std, stacklevel=4)

    def apply(self, input: Tensor) -> Tensor:
        n = sample_count(input)
        w = _gaussian_weights(n, self.std, weight_dtype(input), input.device)
        return input.mul_(w)
