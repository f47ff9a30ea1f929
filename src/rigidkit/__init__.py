"""
rigidkit - Rigid-body transformation builder

Fluent, order-preserving construction of 3D rotation, translation and scaling
matrices with local and global reference frames.

Features:
- Chainable rotate/translate/scale modes with local or global frames
- Mixed local/global rotation chains resolved without manual reordering
- Degree or radian rotations
- Full 4x4 matrix, 3x3 rotation block and axis-angle queries
- Denavit-Hartenberg link transforms and chains
- Numba-compiled application of a resolved transform to point arrays
- Stateless elementary matrix formulas for direct use

Example - Mixed frames:
    >>> import numpy as np
    >>> from rigidkit import rotate
    >>>
    >>> M = (
    ...     rotate()
    ...     .local().xd(30).yd(12)
    ...     .global_().zd(180)
    ...     .local().x(np.pi / 2)
    ...     .matrix()
    ... )

Example - Rotation then translation:
    >>> from rigidkit import rotate
    >>>
    >>> T = rotate().zd(90).translate().x(1.0).y(2.0)
    >>> T.matrix()
    >>> T.apply([[1.0, 0.0, 0.0]])

Example - Axis-angle:
    >>> from rigidkit import rotation, axis_angle_to_matrix
    >>>
    >>> k, theta = rotation().xd(30).yd(45).axis()
    >>> R = axis_angle_to_matrix(k, theta)
"""

__version__ = "0.1.0"

# Entry points
from rigidkit.builders import (
    builder,
    dh,
    dh_chain,
    global_rotation,
    local_rotation,
    rotate,
    rotation,
    scale,
    translate,
    translation,
)

# Errors
from rigidkit.errors import (
    DimensionMismatchError,
    InvalidAxisError,
    InvalidModeError,
    ModeNotSetError,
    NotAPureRotationError,
    SingularRotationError,
    TransformationError,
)

# Parameter records
from rigidkit.params import DHParams

# Protocols
from rigidkit.protocols import MatrixSource

# Elementary matrix formulas
from rigidkit.transform.api import (
    axis_angle_to_matrix,
    matrix_to_axis_angle,
    rotation_matrix,
    rotation_matrix_degrees,
    scaling_matrix,
    translation_matrix,
)

# Builder
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
    # Version
    "__version__",
    # Entry points
    "rotate",
    "translate",
    "scale",
    "builder",
    "rotation",
    "local_rotation",
    "global_rotation",
    "translation",
    "dh",
    "dh_chain",
    # Builder and types
    "Transformation",
    "resolve_rotations",
    "AngleUnit",
    "AxisAngle",
    "AxisDirection",
    "Frame",
    "Mode",
    "PendingRotation",
    "DHParams",
    # Protocols
    "MatrixSource",
    # Elementary matrices
    "rotation_matrix",
    "rotation_matrix_degrees",
    "translation_matrix",
    "scaling_matrix",
    "axis_angle_to_matrix",
    "matrix_to_axis_angle",
    # Errors
    "TransformationError",
    "ModeNotSetError",
    "InvalidModeError",
    "DimensionMismatchError",
    "NotAPureRotationError",
    "SingularRotationError",
    "InvalidAxisError",
]
