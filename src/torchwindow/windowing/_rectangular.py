from dataclasses import dataclass

from torch import Tensor

from torchwindow._sequence import sample_count

from ._window import Window


@dataclass(frozen=True)
class Rectangular(Window):
    """Rectangular window: every weight is one, so samples are unchanged."""

    def apply(self, input: Tensor) -> Tensor:
        sample_count(input)
        return input
