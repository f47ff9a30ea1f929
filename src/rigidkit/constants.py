"""
Constants and default values for rigidkit.

Centralizes matrix dimensions, angle conversion factors and numeric tolerances.
"""

from __future__ import annotations

import math

import numpy as np

# =============================================================================
# Matrix Dimensions
# =============================================================================

SO3_DIM = 3  # Pure rotation stack
SE3_DIM = 4  # Homogeneous rigid transform
VALID_DIMS = frozenset({SO3_DIM, SE3_DIM})

# Spatial dimensions
SPATIAL_DIMS = 3  # X, Y, Z

# All matrices are built in double precision
DEFAULT_DTYPE = np.float64

# =============================================================================
# Angle Conversion
# =============================================================================

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# =============================================================================
# Tolerances
# =============================================================================

# Below this |sin(theta)| the axis of an axis-angle extraction is undefined
# (theta near 0 or pi)
SINGULAR_SIN_EPS = 1e-12
