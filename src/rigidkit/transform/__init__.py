"""
3D transform module.

Provides the Transformation builder, the pending-rotation resolver and the
elementary rotation/translation/scaling formulas it is built on.
"""

from rigidkit.transform.api import (
    axis_angle_to_matrix,
    matrix_to_axis_angle,
    rotation_matrix,
    rotation_matrix_degrees,
    scaling_matrix,
    translation_matrix,
)
from rigidkit.transform.builder import Transformation
from rigidkit.transform.compose import resolve_rotations
from rigidkit.transform.types import (
    AngleUnit,
    AxisAngle,
    AxisDirection,
    Frame,
    Mode,
    PendingRotation,
)

__all__ = [
    "Transformation",
    "resolve_rotations",
    "AngleUnit",
    "AxisAngle",
    "AxisDirection",
    "Frame",
    "Mode",
    "PendingRotation",
    "rotation_matrix",
    "rotation_matrix_degrees",
    "translation_matrix",
    "scaling_matrix",
    "axis_angle_to_matrix",
    "matrix_to_axis_angle",
]
