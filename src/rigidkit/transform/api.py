"""
Elementary 3D transformation matrices.

Stateless NumPy formulas used by the builder and exposed for direct use.

Functions:
- rotation_matrix(): Right-handed rotation about X, Y or Z (3x3 or 4x4)
- translation_matrix() / scaling_matrix(): Single-axis SE(3) matrices
- axis_angle_to_matrix() / matrix_to_axis_angle(): Rodrigues conversions
"""

from typing import TypeAlias

import numpy as np

from rigidkit.constants import (
    DEFAULT_DTYPE,
    RAD_TO_DEG,
    SE3_DIM,
    SINGULAR_SIN_EPS,
    SO3_DIM,
    SPATIAL_DIMS,
)
from rigidkit.errors import DimensionMismatchError, SingularRotationError
from rigidkit.transform.types import AngleUnit, AxisAngle, AxisDirection
from rigidkit.validators import validate_dimension, validate_number

# Type aliases for better readability
ArrayLike: TypeAlias = np.ndarray | tuple | list
AxisLike: TypeAlias = AxisDirection | str | int

# ============================================================================
# Single-Axis Matrix Building (NumPy)
# ============================================================================


def _build_rotation_matrix_3x3_numpy(axis: AxisDirection, angle: float) -> np.ndarray:
    """Build 3x3 right-handed rotation about a coordinate axis."""
    c = np.cos(angle)
    s = np.sin(angle)

    match axis:
        case AxisDirection.X:
            rows = [[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]]
        case AxisDirection.Y:
            rows = [[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]]
        case AxisDirection.Z:
            rows = [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]

    return np.array(rows, dtype=DEFAULT_DTYPE)


def _build_rotation_matrix_4x4_numpy(rotation_3x3: np.ndarray) -> np.ndarray:
    """Build 4x4 rotation matrix from 3x3 rotation matrix."""
    R = np.eye(SE3_DIM, dtype=rotation_3x3.dtype)
    R[:3, :3] = rotation_3x3
    return R


def _build_translation_matrix_4x4_numpy(axis: AxisDirection, distance: float) -> np.ndarray:
    """Build 4x4 translation along one axis."""
    T = np.eye(SE3_DIM, dtype=DEFAULT_DTYPE)
    T[axis.index, 3] = distance
    return T


def _build_scale_matrix_4x4_numpy(axis: AxisDirection, factor: float) -> np.ndarray:
    """Build 4x4 scale along one axis."""
    S = np.eye(SE3_DIM, dtype=DEFAULT_DTYPE)
    S[axis.index, axis.index] = factor
    return S


def _rotation_matrix_numpy(axis: AxisDirection, angle: float, dim: int) -> np.ndarray:
    """Rotation about ``axis`` with no argument checking (used by the resolver)."""
    R = _build_rotation_matrix_3x3_numpy(axis, angle)
    if dim == SE3_DIM:
        return _build_rotation_matrix_4x4_numpy(R)
    return R


# ============================================================================
# Axis-Angle Conversions (NumPy)
# ============================================================================


def _axis_angle_to_matrix_numpy(k: np.ndarray, theta: float) -> np.ndarray:
    """Closed-form Rodrigues rotation matrix for unit axis ``k``."""
    kx, ky, kz = k[0], k[1], k[2]
    c = np.cos(theta)
    s = np.sin(theta)
    v = 1.0 - c

    R = np.empty((SO3_DIM, SO3_DIM), dtype=DEFAULT_DTYPE)

    R[0, 0] = kx * kx * v + c
    R[0, 1] = kx * ky * v - kz * s
    R[0, 2] = kx * kz * v + ky * s

    R[1, 0] = kx * ky * v + kz * s
    R[1, 1] = ky * ky * v + c
    R[1, 2] = ky * kz * v - kx * s

    R[2, 0] = kx * kz * v - ky * s
    R[2, 1] = ky * kz * v + kx * s
    R[2, 2] = kz * kz * v + c

    return R


def _matrix_to_axis_angle_numpy(R: np.ndarray) -> tuple[np.ndarray, float]:
    """Axis and angle of a 3x3 rotation block."""
    trace = R[0, 0] + R[1, 1] + R[2, 2]
    # Rounding can push the cosine slightly outside [-1, 1]
    theta = float(np.arccos(np.clip((trace - 1.0) / 2.0, -1.0, 1.0)))

    sin_theta = np.sin(theta)
    if abs(sin_theta) < SINGULAR_SIN_EPS:
        raise SingularRotationError(
            f"Rotation axis is undefined for angle {theta:.6g} rad (sin(theta) ~ 0)"
        )

    k = np.array(
        [R[2, 1] - R[1, 2], R[0, 2] - R[2, 0], R[1, 0] - R[0, 1]],
        dtype=DEFAULT_DTYPE,
    ) / (2.0 * sin_theta)

    return k, theta


# ============================================================================
# Public API - Elementary Matrices
# ============================================================================


@validate_dimension("dim", param_index=2)
@validate_number("angle", param_index=1)
def rotation_matrix(
    axis: AxisLike,
    angle: float,
    dim: int = SO3_DIM,
    unit: AngleUnit = AngleUnit.RADIANS,
) -> np.ndarray:
    """
    Rotation matrix about a coordinate axis.

    Args:
        axis: Axis to rotate about (AxisDirection, "x"/"y"/"z" or 0/1/2)
        angle: Rotation angle
        dim: 3 for an SO(3) matrix, 4 for an SE(3) matrix
        unit: Unit of ``angle``

    Returns:
        dim x dim rotation matrix

    Example:
        >>> rotation_matrix("z", np.pi / 2)  # 90deg around Z
    """
    return _rotation_matrix_numpy(AxisDirection.parse(axis), unit.to_radians(angle), dim)


def rotation_matrix_degrees(axis: AxisLike, angle: float, dim: int = SO3_DIM) -> np.ndarray:
    """Rotation matrix about a coordinate axis with ``angle`` in degrees."""
    return rotation_matrix(axis, angle, dim, unit=AngleUnit.DEGREES)


@validate_number("distance", param_index=1)
def translation_matrix(axis: AxisLike, distance: float) -> np.ndarray:
    """
    SE(3) matrix translating along one axis.

    Args:
        axis: Axis to translate along
        distance: Distance to translate

    Returns:
        4x4 identity with ``distance`` in the translation column
    """
    return _build_translation_matrix_4x4_numpy(AxisDirection.parse(axis), distance)


@validate_number("factor", param_index=1)
def scaling_matrix(axis: AxisLike, factor: float) -> np.ndarray:
    """
    SE(3) matrix scaling along one axis.

    Args:
        axis: Axis to scale along
        factor: Scale factor

    Returns:
        4x4 identity with ``factor`` on the diagonal entry of ``axis``
    """
    return _build_scale_matrix_4x4_numpy(AxisDirection.parse(axis), factor)


# ============================================================================
# Public API - Axis-Angle Utilities
# ============================================================================


@validate_number("theta", param_index=1)
def axis_angle_to_matrix(k: ArrayLike, theta: float) -> np.ndarray:
    """
    Convert an axis-angle to an SO(3) matrix.

    Args:
        k: Unit vector to rotate about (used as given, not normalized)
        theta: Angle in radians to rotate about ``k``

    Returns:
        3x3 rotation matrix
    """
    k_arr = np.asarray(k, dtype=DEFAULT_DTYPE)
    if k_arr.shape != (SPATIAL_DIMS,):
        raise DimensionMismatchError(f"k must have 3 components, got shape {k_arr.shape}")

    return _axis_angle_to_matrix_numpy(k_arr, theta)


def matrix_to_axis_angle(matrix: ArrayLike, unit: AngleUnit = AngleUnit.RADIANS) -> AxisAngle:
    """
    Convert a rotation matrix to an axis-angle.

    Only the upper-left 3x3 block is read, so SE(3) matrices are accepted.

    Args:
        matrix: 3x3 or 4x4 matrix whose rotation block is a proper rotation
        unit: Unit of the returned angle

    Returns:
        AxisAngle(axis, angle)

    Raises:
        DimensionMismatchError: If the matrix is not 3x3 or 4x4
        SingularRotationError: If the angle is 0 or pi (axis undefined)
    """
    R = np.asarray(matrix, dtype=DEFAULT_DTYPE)
    if R.shape not in ((SO3_DIM, SO3_DIM), (SE3_DIM, SE3_DIM)):
        raise DimensionMismatchError(f"matrix must be 3x3 or 4x4, got shape {R.shape}")

    k, theta = _matrix_to_axis_angle_numpy(R[:3, :3])
    if unit is AngleUnit.DEGREES:
        theta = theta * RAD_TO_DEG
    return AxisAngle(k, theta)
