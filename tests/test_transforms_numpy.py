"""
Tests for the elementary matrix formulas (NumPy implementations).
"""

import numpy as np
import pytest

from rigidkit.errors import DimensionMismatchError, InvalidAxisError, SingularRotationError
from rigidkit.transform.api import (
    axis_angle_to_matrix,
    matrix_to_axis_angle,
    rotation_matrix,
    rotation_matrix_degrees,
    scaling_matrix,
    translation_matrix,
)
from rigidkit.transform.types import AngleUnit, AxisDirection


@pytest.fixture
def random_axis_angles():
    """Random unit axes with angles strictly inside (0, pi)."""
    rng = np.random.default_rng(42)
    axes = rng.standard_normal((20, 3))
    axes = axes / np.linalg.norm(axes, axis=1, keepdims=True)
    angles = rng.uniform(0.1, np.pi - 0.1, size=20)
    return axes, angles


# ============================================================================
# Rotation Matrix Tests
# ============================================================================


class TestRotationMatrix:
    """Test single-axis rotation matrices."""

    def test_x_rotation(self):
        """Test X rotation follows the right-hand rule."""
        c, s = np.cos(0.3), np.sin(0.3)
        expected = np.array([[1, 0, 0], [0, c, -s], [0, s, c]])

        np.testing.assert_allclose(rotation_matrix(AxisDirection.X, 0.3), expected, atol=1e-12)

    def test_y_rotation(self):
        """Test Y rotation follows the right-hand rule."""
        c, s = np.cos(0.3), np.sin(0.3)
        expected = np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])

        np.testing.assert_allclose(rotation_matrix(AxisDirection.Y, 0.3), expected, atol=1e-12)

    def test_z_rotation(self):
        """Test Z rotation follows the right-hand rule."""
        c, s = np.cos(0.3), np.sin(0.3)
        expected = np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])

        np.testing.assert_allclose(rotation_matrix(AxisDirection.Z, 0.3), expected, atol=1e-12)

    def test_z_quarter_turn_maps_x_to_y(self):
        """Test 90deg about Z sends the X axis to the Y axis."""
        R = rotation_matrix("z", np.pi / 2)

        np.testing.assert_allclose(R @ [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], atol=1e-12)

    @pytest.mark.parametrize("axis", ["x", "y", "z"])
    def test_4x4_embeds_3x3(self, axis):
        """Test 4x4 rotation is the 3x3 block padded with identity."""
        R3 = rotation_matrix(axis, 0.7, dim=3)
        R4 = rotation_matrix(axis, 0.7, dim=4)

        assert R4.shape == (4, 4)
        np.testing.assert_allclose(R4[:3, :3], R3)
        np.testing.assert_allclose(R4[3], [0, 0, 0, 1])
        np.testing.assert_allclose(R4[:3, 3], [0, 0, 0])

    @pytest.mark.parametrize("axis", [AxisDirection.X, AxisDirection.Y, AxisDirection.Z])
    def test_proper_rotation(self, axis):
        """Test rotation matrices are orthogonal with determinant +1."""
        R = rotation_matrix(axis, 1.234)

        np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
        assert np.linalg.det(R) == pytest.approx(1.0)

    def test_degrees(self):
        """Test degree variant converts before building."""
        np.testing.assert_allclose(
            rotation_matrix_degrees("x", 45.0), rotation_matrix("x", np.pi / 4), atol=1e-12
        )
        np.testing.assert_allclose(
            rotation_matrix("y", 30.0, dim=4, unit=AngleUnit.DEGREES),
            rotation_matrix("y", np.pi / 6, dim=4),
            atol=1e-12,
        )

    def test_axis_tag_forms(self):
        """Test enum, letter and index axis tags agree."""
        by_enum = rotation_matrix(AxisDirection.Y, 0.5)

        np.testing.assert_array_equal(rotation_matrix("y", 0.5), by_enum)
        np.testing.assert_array_equal(rotation_matrix("Y", 0.5), by_enum)
        np.testing.assert_array_equal(rotation_matrix(1, 0.5), by_enum)

    def test_invalid_dimension(self):
        """Test dim other than 3 or 4 is rejected."""
        with pytest.raises(DimensionMismatchError):
            rotation_matrix("x", 0.5, dim=5)
        with pytest.raises(DimensionMismatchError):
            rotation_matrix("x", 0.5, 2)

    def test_invalid_axis(self):
        """Test unknown axis tags are rejected."""
        with pytest.raises(InvalidAxisError):
            rotation_matrix("w", 0.5)
        with pytest.raises(InvalidAxisError):
            rotation_matrix(3, 0.5)

    def test_invalid_angle(self):
        """Test non-numeric and non-finite angles are rejected."""
        with pytest.raises(TypeError):
            rotation_matrix("x", "0.5")
        with pytest.raises(ValueError):
            rotation_matrix("x", np.inf)


# ============================================================================
# Translation / Scaling Matrix Tests
# ============================================================================


class TestTranslationScalingMatrix:
    """Test single-axis translation and scaling matrices."""

    @pytest.mark.parametrize("axis, index", [("x", 0), ("y", 1), ("z", 2)])
    def test_translation(self, axis, index):
        """Test translation puts the distance in the translation column."""
        T = translation_matrix(axis, 2.5)

        expected = np.eye(4)
        expected[index, 3] = 2.5
        np.testing.assert_array_equal(T, expected)

    @pytest.mark.parametrize("axis, index", [("x", 0), ("y", 1), ("z", 2)])
    def test_scaling(self, axis, index):
        """Test scaling puts the factor on the diagonal."""
        S = scaling_matrix(axis, 3.0)

        expected = np.eye(4)
        expected[index, index] = 3.0
        np.testing.assert_array_equal(S, expected)

    def test_translation_moves_point(self):
        """Test translation matrix moves a homogeneous point."""
        point = np.array([1.0, 2.0, 3.0, 1.0])

        np.testing.assert_allclose(translation_matrix("z", -1.0) @ point, [1.0, 2.0, 2.0, 1.0])

    def test_invalid_amount(self):
        """Test non-numeric amounts are rejected."""
        with pytest.raises(TypeError):
            translation_matrix("x", None)
        with pytest.raises(TypeError):
            scaling_matrix("x", True)


# ============================================================================
# Axis-Angle Tests
# ============================================================================


class TestAxisAngle:
    """Test axis-angle <-> matrix conversions."""

    def test_axis_angle_matches_elementary(self):
        """Test axis-angle about a coordinate axis equals the elementary rotation."""
        np.testing.assert_allclose(
            axis_angle_to_matrix([0, 0, 1], 0.8), rotation_matrix("z", 0.8), atol=1e-12
        )
        np.testing.assert_allclose(
            axis_angle_to_matrix([1, 0, 0], -0.4), rotation_matrix("x", -0.4), atol=1e-12
        )

    def test_axis_angle_is_proper_rotation(self, random_axis_angles):
        """Test Rodrigues output is orthogonal with determinant +1."""
        axes, angles = random_axis_angles
        for k, theta in zip(axes, angles):
            R = axis_angle_to_matrix(k, theta)
            np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
            assert np.linalg.det(R) == pytest.approx(1.0)

    def test_axis_is_fixed_point(self, random_axis_angles):
        """Test the rotation axis is left unchanged."""
        axes, angles = random_axis_angles
        for k, theta in zip(axes, angles):
            np.testing.assert_allclose(axis_angle_to_matrix(k, theta) @ k, k, atol=1e-12)

    def test_round_trip(self, random_axis_angles):
        """Test matrix -> axis-angle recovers the original axis and angle."""
        axes, angles = random_axis_angles
        for k, theta in zip(axes, angles):
            k_out, theta_out = matrix_to_axis_angle(axis_angle_to_matrix(k, theta))

            assert theta_out == pytest.approx(theta, abs=1e-9)
            assert np.dot(k_out, k) == pytest.approx(1.0, abs=1e-9)

    def test_matrix_to_axis_angle_known(self):
        """Test extraction from a 90deg Z rotation."""
        result = matrix_to_axis_angle(rotation_matrix("z", np.pi / 2))

        np.testing.assert_allclose(result.axis, [0, 0, 1], atol=1e-12)
        assert result.angle == pytest.approx(np.pi / 2)

    def test_matrix_to_axis_angle_degrees(self):
        """Test degree output."""
        k, theta = matrix_to_axis_angle(rotation_matrix("x", np.pi / 3), unit=AngleUnit.DEGREES)

        np.testing.assert_allclose(k, [1, 0, 0], atol=1e-12)
        assert theta == pytest.approx(60.0)

    def test_accepts_4x4(self):
        """Test SE(3) input reads the rotation block."""
        M = rotation_matrix("y", 0.6, dim=4)
        M[0, 3] = 5.0

        k, theta = matrix_to_axis_angle(M)
        np.testing.assert_allclose(k, [0, 1, 0], atol=1e-12)
        assert theta == pytest.approx(0.6)

    @pytest.mark.parametrize("theta", [0.0, np.pi])
    def test_singular_angles(self, theta):
        """Test the axis is reported undefined at 0 and pi."""
        with pytest.raises(SingularRotationError):
            matrix_to_axis_angle(rotation_matrix("x", theta))

    def test_bad_shapes(self):
        """Test wrong shapes are rejected."""
        with pytest.raises(DimensionMismatchError):
            axis_angle_to_matrix([1, 0], 0.5)
        with pytest.raises(DimensionMismatchError):
            matrix_to_axis_angle(np.eye(2))
