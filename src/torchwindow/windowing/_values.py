from typing import Callable, Optional

import torch
from torch import Tensor

from torchwindow._exceptions import LengthMismatchError
from torchwindow._sequence import sample_count

from ._window import Window


class Values(Window):
    """
    A window given by precomputed weights.

    ``Values`` separates how a window shape is defined from how it is
    applied: build it once for a fixed length with :meth:`from_window`, then
    apply it to any number of sequences of that length.

    Parameters
    ----------
    weights : Tensor, optional
        1-D tensor of real weights. The tensor is stored as given, not
        copied, and must not be modified afterwards. Complex weights raise
        ``TypeError``. ``None`` makes the
        identity window, which leaves every input unchanged.

    Examples
    --------
    >>> hann = Values.from_window(Hann(), 4, dtype=torch.float64)
    >>> hann(torch.full((4,), 2.0, dtype=torch.float64))
    tensor([0.0000, 1.5000, 1.5000, 0.0000], dtype=torch.float64)
    """

    def __init__(self, weights: Optional[Tensor] = None):
        if weights is not None and weights.dim() != 1:
            raise ValueError(
                f"expected 1-D weights, got shape {tuple(weights.shape)}"
            )
        if weights is not None and weights.is_complex():
            raise TypeError(f"expected real weights, got {weights.dtype}")
        self._weights = weights

    @classmethod
    def identity(cls) -> "Values":
        """Return the window that leaves every input unchanged."""
        return cls()

    @classmethod
    def from_window(
        cls,
        window: Callable[[Tensor], Tensor],
        n: int,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> "Values":
        """
        Materialize the weights of ``window`` for sequences of length n.

        ``window`` is called on a tensor of n ones and its result is kept
        as the weights.

        Parameters
        ----------
        window : callable
            Any :class:`Window`, or a function that scales a 1-D tensor in
            place and returns it.
        n : int
            Number of weights.
        dtype : torch.dtype, optional
            Data type of the ones handed to ``window``. Must be real. If
            None, uses the default floating point type.
        device : torch.device, optional
            Device of the ones handed to ``window``.
        """
        ones = torch.ones(
            n,
            dtype=dtype or torch.get_default_dtype(),
            device=device,
        )
        return cls(window(ones))

    @property
    def is_identity(self) -> bool:
        return self._weights is None

    @property
    def tensor(self) -> Optional[Tensor]:
        """A copy of the stored weights, or None for the identity window."""
        if self._weights is None:
            return None
        return self._weights.clone()

    def __len__(self) -> int:
        if self._weights is None:
            return 0
        return self._weights.shape[0]

    def __repr__(self) -> str:
        if self._weights is None:
            return "Values(identity)"
        return f"Values(n={len(self)}, dtype={self._weights.dtype})"

    def apply(self, input: Tensor) -> Tensor:
        """
        Multiply ``input`` in place by the stored weights.

        Raises
        ------
        LengthMismatchError
            If the number of weights differs from ``input.shape[-1]``.
        """
        if self._weights is None:
            return input

        n = sample_count(input)
        if len(self) != n:
            raise LengthMismatchError(
                f"window has {len(self)} weights but the input has "
                f"{n} samples"
            )
        return input.mul_(self._weights.to(device=input.device))


def window_values(
    window: Callable[[Tensor], Tensor],
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Values:
    """Return the :class:`Values` of ``window`` for length n.

    Shorthand for :meth:`Values.from_window`.
    """
    return Values.from_window(window, n, dtype=dtype, device=device)
