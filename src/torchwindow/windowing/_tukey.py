from dataclasses import dataclass
from typing import Union

from torch import Tensor

from torchwindow._sequence import sample_count, warn_if_invalid_alpha
from torchwindow.window_function._tukey_window import _tukey_taper_

from ._hann import Hann
from ._rectangular import Rectangular
from ._window import Window


@dataclass(frozen=True)
class Tukey(Window):
    """
    Tukey (tapered cosine) window.

    ``alpha`` is the fraction of the window inside the cosine taper. An
    ``alpha`` of 0 or less is the rectangular window and 1 or more is the
    Hann window; in between only the two tapered edges are scaled and the
    flat center is left untouched.

    Parameters
    ----------
    alpha : float or Tensor
        Taper fraction, meaningful in [0, 1].

    Examples
    --------
    >>> x = torch.ones(5, dtype=torch.float64)
    >>> Tukey(0.5)(x)
    tensor([0., 1., 1., 1., 0.], dtype=torch.float64)
    """

    alpha: Union[float, Tensor]

    def __post_init__(self):
        warn_if_invalid_alpha(self.alpha, stacklevel=4)

    def apply(self, input: Tensor) -> Tensor:
        sample_count(input)
        if self.alpha <= 0:
            return Rectangular().apply(input)
        if self.alpha >= 1:
            return Hann().apply(input)
        return _tukey_taper_(input, self.alpha)
