"""
Numba-optimized kernels for applying resolved transforms to point arrays.

Provides JIT-compiled kernels that apply a 3x3 linear block plus a
translation vector to many points without building homogeneous coordinates.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

# ============================================================================
# Point Transforms
# ============================================================================


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def transform_points_numba(
    points: NDArray[np.float64],
    R: NDArray[np.float64],
    t: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Apply ``R @ p + t`` to every row ``p`` of ``points``.

    Args:
        points: Input points [N, 3]
        R: 3x3 rotation/scale block
        t: Translation vector [3]
        out: Output array [N, 3] (pre-allocated, may not alias ``points``)

    Note: Modifies out in-place for efficiency
    """
    N = points.shape[0]
    for i in prange(N):
        x = points[i, 0]
        y = points[i, 1]
        z = points[i, 2]

        out[i, 0] = R[0, 0] * x + R[0, 1] * y + R[0, 2] * z + t[0]
        out[i, 1] = R[1, 0] * x + R[1, 1] * y + R[1, 2] * z + t[1]
        out[i, 2] = R[2, 0] * x + R[2, 1] * y + R[2, 2] * z + t[2]


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def transform_directions_numba(
    directions: NDArray[np.float64],
    R: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Apply ``R @ v`` to every row ``v`` of ``directions`` (no translation).

    Args:
        directions: Input vectors [N, 3]
        R: 3x3 rotation/scale block
        out: Output array [N, 3] (pre-allocated, may not alias ``directions``)
    """
    N = directions.shape[0]
    for i in prange(N):
        x = directions[i, 0]
        y = directions[i, 1]
        z = directions[i, 2]

        out[i, 0] = R[0, 0] * x + R[0, 1] * y + R[0, 2] * z
        out[i, 1] = R[1, 0] * x + R[1, 1] * y + R[1, 2] * z
        out[i, 2] = R[2, 0] * x + R[2, 1] * y + R[2, 2] * z
