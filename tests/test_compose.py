"""
Tests for pending-rotation resolution.
"""

import numpy as np
import pytest

from rigidkit.transform.api import rotation_matrix
from rigidkit.transform.compose import resolve_rotations
from rigidkit.transform.types import AxisDirection, Frame, PendingRotation

X, Y, Z = AxisDirection.X, AxisDirection.Y, AxisDirection.Z


def local(axis, angle):
    return PendingRotation(axis, angle, Frame.LOCAL)


def glob(axis, angle):
    return PendingRotation(axis, angle, Frame.GLOBAL)


def R(axis, angle, dim=4):
    return rotation_matrix(axis, angle, dim=dim)


class TestResolveRotations:
    """Test the two-pass fold of pending rotations."""

    def test_empty_queue_returns_copy(self):
        """Test empty queue returns an equal, distinct array."""
        M = np.eye(4)
        M[0, 3] = 2.0

        result = resolve_rotations(M, [])

        np.testing.assert_array_equal(result, M)
        assert result is not M

    def test_input_not_modified(self):
        """Test the starting matrix is left untouched."""
        M = np.eye(3)
        before = M.copy()

        resolve_rotations(M, [local(X, 0.4), glob(Z, 0.2)])

        np.testing.assert_array_equal(M, before)

    def test_locals_in_call_order(self):
        """Test local rotations post-multiply in call order."""
        result = resolve_rotations(np.eye(4), [local(X, 0.3), local(Y, 0.5), local(Z, 0.7)])

        expected = R(X, 0.3) @ R(Y, 0.5) @ R(Z, 0.7)
        np.testing.assert_allclose(result, expected, atol=1e-12)

    def test_globals_in_reverse_order(self):
        """Test a later global rotation ends up outermost."""
        result = resolve_rotations(np.eye(4), [glob(X, 0.3), glob(Y, 0.5)])

        expected = R(Y, 0.5) @ R(X, 0.3)
        np.testing.assert_allclose(result, expected, atol=1e-12)

    def test_global_after_locals(self):
        """Test a global rotation issued after locals is applied before them."""
        result = resolve_rotations(np.eye(4), [local(X, 0.3), local(Y, 0.5), glob(Z, 1.1)])

        expected = R(Z, 1.1) @ R(X, 0.3) @ R(Y, 0.5)
        np.testing.assert_allclose(result, expected, atol=1e-12)

    def test_interleaved_frames(self):
        """Test globals are grouped (latest first) ahead of all locals."""
        queue = [glob(X, 0.2), local(Y, 0.4), glob(Z, 0.6), local(X, 0.8), glob(Y, 1.0)]

        result = resolve_rotations(np.eye(3), queue)

        expected = (
            R(Y, 1.0, 3) @ R(Z, 0.6, 3) @ R(X, 0.2, 3) @ R(Y, 0.4, 3) @ R(X, 0.8, 3)
        )
        np.testing.assert_allclose(result, expected, atol=1e-12)

    def test_worked_example(self):
        """Test local x30, y12, global z180, local x90 against hand-computed entries."""
        deg = np.pi / 180
        queue = [local(X, 30 * deg), local(Y, 12 * deg), glob(Z, 180 * deg), local(X, np.pi / 2)]

        result = resolve_rotations(np.eye(4), queue)

        expected = np.array(
            [
                [-0.9781476007, -0.2079116908, 0.0, 0.0],
                [-0.1039558454, 0.4890738004, 0.8660254038, 0.0],
                [-0.1800568060, 0.8471006708, -0.5, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        np.testing.assert_allclose(result, expected, atol=1e-8)

    def test_seed_is_left_factor(self):
        """Test every rotation post-multiplies a non-identity seed."""
        seed = R(Y, 0.9)
        seed[:3, 3] = [1.0, 2.0, 3.0]

        result = resolve_rotations(seed, [local(X, 0.3), glob(Z, 0.5)])

        expected = seed @ R(Z, 0.5) @ R(X, 0.3)
        np.testing.assert_allclose(result, expected, atol=1e-12)
        np.testing.assert_allclose(result[:3, 3], [1.0, 2.0, 3.0])

    @pytest.mark.parametrize("dim", [3, 4])
    def test_preserves_dimension(self, dim):
        """Test output dimension follows the input."""
        result = resolve_rotations(np.eye(dim), [glob(X, 0.1), local(Z, 0.2)])

        assert result.shape == (dim, dim)
