from ._gaussian import Gaussian
from ._hann import Hann
from ._rectangular import Rectangular
from ._tukey import Tukey
from ._values import Values, window_values
from ._window import Window

__all__ = [
    "Gaussian",
    "Hann",
    "Rectangular",
    "Tukey",
    "Values",
    "Window",
    "window_values",
]
