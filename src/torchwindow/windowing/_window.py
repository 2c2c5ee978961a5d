import abc
from typing import Optional

import torch
from torch import Tensor


class Window(abc.ABC):
    """Base class for windows applied to samples in place.

    A window scales the last dimension of a real or complex tensor by its
    weights and returns the same tensor. Complex samples have their real
    and imaginary parts scaled by the same real weight, so phase is kept.

    Subclasses: :class:`Rectangular`, :class:`Hann`, :class:`Gaussian`,
    :class:`Tukey` and :class:`Values`.
    """

    @abc.abstractmethod
    def apply(self, input: Tensor) -> Tensor:
        """Scale ``input`` in place along its last dimension and return it."""
        ...

    def __call__(self, input: Tensor) -> Tensor:
        return self.apply(input)

    def weights(
        self,
        n: int,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Tensor:
        """Return the n weights of this window, by applying it to ones."""
        return self.apply(
            torch.ones(
                n,
                dtype=dtype or torch.get_default_dtype(),
                device=device,
            )
        )
