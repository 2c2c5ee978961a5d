"""Testing framework for window operators.

Example usage:

    from torchwindow.testing import (
        WindowOpDescriptor,
        WindowOpTestCase,
    )
    from torchwindow.windowing import Gaussian

    class TestGaussian(WindowOpTestCase):
        @property
        def descriptor(self):
            return WindowOpDescriptor(
                name="gaussian",
                window=Gaussian(0.4),
            )
"""

from ._window_op_test_case import (
    ExpectedWeights,
    WindowOpDescriptor,
    WindowOpTestCase,
    WindowOpToleranceConfig,
)

__all__ = [
    "ExpectedWeights",
    "WindowOpDescriptor",
    "WindowOpTestCase",
    "WindowOpToleranceConfig",
]
