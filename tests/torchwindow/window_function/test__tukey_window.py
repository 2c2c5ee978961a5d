import math

import pytest
import torch
import torch.testing

import torchwindow.window_function as wf
from torchwindow import WindowWarning


class TestTukeyWindow:
    """Tests for tukey_window."""

    def test_reference(self):
        """Compare against reference implementation."""
        for n in [2, 5, 64, 128]:
            for alpha in [0.1, 0.25, 0.5, 0.75, 0.99]:
                result = wf.tukey_window(n, alpha, dtype=torch.float64)
                expected = self._reference_tukey(n, alpha)
                torch.testing.assert_close(
                    result, expected, rtol=1e-12, atol=1e-12
                )

    def test_five_point_example(self):
        """alpha=0.5 on five points tapers only the two end samples."""
        result = wf.tukey_window(5, 0.5, dtype=torch.float64)
        expected = torch.tensor([0.0, 1.0, 1.0, 1.0, 0.0], dtype=torch.float64)
        torch.testing.assert_close(result, expected, rtol=0, atol=1e-15)

    def test_scipy_comparison(self):
        """Compare with scipy.signal.windows.tukey (symmetric)."""
        scipy_signal = pytest.importorskip("scipy.signal")
        for n in [4, 16, 64]:
            for alpha in [0.0, 0.25, 0.5, 1.0]:
                result = wf.tukey_window(n, alpha, dtype=torch.float64)
                expected = torch.tensor(
                    scipy_signal.windows.tukey(n, alpha, sym=True),
                    dtype=torch.float64,
                )
                torch.testing.assert_close(
                    result, expected, rtol=1e-10, atol=1e-10
                )

    def test_alpha_zero_is_rectangular(self):
        """alpha=0 should produce rectangular window (all ones)."""
        for n in [1, 5, 32, 64]:
            result = wf.tukey_window(n, 0.0, dtype=torch.float64)
            expected = wf.rectangular_window(n, dtype=torch.float64)
            torch.testing.assert_close(result, expected, rtol=0, atol=0)

    def test_alpha_one_is_hann(self):
        """alpha=1 should produce Hann window."""
        for n in [2, 5, 32, 64]:
            result = wf.tukey_window(n, 1.0, dtype=torch.float64)
            expected = wf.hann_window(n, dtype=torch.float64)
            torch.testing.assert_close(result, expected, rtol=0, atol=0)

    def test_alpha_below_zero_is_rectangular(self):
        """alpha<0 warns and falls back to the rectangular window."""
        with pytest.warns(WindowWarning, match="rectangular"):
            result = wf.tukey_window(16, -0.5, dtype=torch.float64)
        torch.testing.assert_close(result, torch.ones(16, dtype=torch.float64))

    def test_alpha_above_one_is_hann(self):
        """alpha>1 warns and falls back to the Hann window."""
        with pytest.warns(WindowWarning, match="Hann"):
            result = wf.tukey_window(16, 1.5, dtype=torch.float64)
        torch.testing.assert_close(
            result, wf.hann_window(16, dtype=torch.float64)
        )

    def test_symmetry(self):
        """Test that symmetric Tukey window is symmetric."""
        for n in [5, 10, 11, 64]:
            for alpha in [0.25, 0.5, 0.75]:
                result = wf.tukey_window(n, alpha, dtype=torch.float64)
                torch.testing.assert_close(
                    result, result.flip(0), rtol=0, atol=0
                )

    def test_flat_region(self):
        """Test that the middle of the window is exactly 1 for alpha < 1."""
        n = 64
        for alpha in [0.25, 0.5, 0.75]:
            result = wf.tukey_window(n, alpha, dtype=torch.float64)
            width = int(0.5 * alpha * (n - 1)) + 1
            flat = result[width : n - width]
            assert torch.all(flat == 1.0)

    def test_alpha_affects_taper_width(self):
        """Test that larger alpha produces narrower flat region."""
        n = 64
        narrow = wf.tukey_window(n, 0.25, dtype=torch.float64)
        wide = wf.tukey_window(n, 0.75, dtype=torch.float64)
        idx = n // 4
        assert wide[idx] < narrow[idx]

    def test_n_equals_two(self):
        """Two points are both at the zero of the taper."""
        result = wf.tukey_window(2, 0.5, dtype=torch.float64)
        torch.testing.assert_close(
            result, torch.zeros(2, dtype=torch.float64)
        )

    def test_n_equals_one_is_nan(self):
        """A single point evaluates the taper at 0/0."""
        result = wf.tukey_window(1, 0.5, dtype=torch.float64)
        assert result.shape == (1,)
        assert torch.isnan(result).all()

    def test_output_shape(self):
        """Test output shape is (n,)."""
        for n in [0, 1, 5, 100]:
            assert wf.tukey_window(n, 0.5).shape == (n,)

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_dtype_support(self, dtype):
        """Test supported dtypes."""
        assert wf.tukey_window(64, 0.5, dtype=dtype).dtype == dtype

    def test_tensor_alpha(self):
        """Test that alpha can be passed as a tensor."""
        alpha = torch.tensor(0.5, dtype=torch.float64)
        result = wf.tukey_window(64, alpha, dtype=torch.float64)
        expected = wf.tukey_window(64, 0.5, dtype=torch.float64)
        torch.testing.assert_close(result, expected)

    def test_negative_n_raises(self):
        """Test that negative n raises error."""
        with pytest.raises(RuntimeError):
            wf.tukey_window(-1, 0.5)

    @staticmethod
    def _reference_tukey(n: int, alpha: float) -> torch.Tensor:
        """Reference implementation of the Tukey window."""
        result = [1.0] * n
        alpha_l = alpha * (n - 1)
        width = int(0.5 * alpha_l) + 1
        for i in range(width):
            w = 0.5 * (1 - math.cos(2 * math.pi * i / alpha_l))
            result[i] *= w
            result[n - 1 - i] *= w
        return torch.tensor(result, dtype=torch.float64)
