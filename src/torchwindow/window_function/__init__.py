from ._gaussian_window import gaussian_window
from ._hann_window import hann_window
from ._rectangular_window import rectangular_window
from ._tukey_window import tukey_window

__all__ = [
    "gaussian_window",
    "hann_window",
    "rectangular_window",
    "tukey_window",
]
