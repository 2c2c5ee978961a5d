from dataclasses import dataclass

from torch import Tensor

from torchwindow._sequence import sample_count, weight_dtype
from torchwindow.window_function._hann_window import _hann_weights

from ._window import Window


@dataclass(frozen=True)
class Hann(Window):
    """Symmetric Hann window, ``w[k] = 0.5 * (1 - cos(2 * pi * k / (n - 1)))``."""

    def apply(self, input: Tensor) -> Tensor:
        n = sample_count(input)
        return input.mul_(
            _hann_weights(n, weight_dtype(input), input.device)
        )
