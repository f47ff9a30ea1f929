"""
Resolution of pending rotations into a single matrix.

Global rotations are folded in first, walking the queue from the most recent
entry back to the oldest, then the remaining local rotations are folded in
call order. Every fold post-multiplies, so a global rotation issued between
local ones ends up composed ahead of them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from rigidkit.constants import DEFAULT_DTYPE
from rigidkit.transform.api import _rotation_matrix_numpy
from rigidkit.transform.types import Frame, PendingRotation

logger = logging.getLogger(__name__)


def resolve_rotations(matrix: np.ndarray, queue: Sequence[PendingRotation]) -> np.ndarray:
    """
    Fold a queue of pending rotations into ``matrix``.

    Args:
        matrix: 3x3 or 4x4 starting matrix (not modified)
        queue: Pending rotations in call order

    Returns:
        New matrix with every rotation applied

    Example:
        >>> queue = [
        ...     PendingRotation(AxisDirection.X, 0.5, Frame.LOCAL),
        ...     PendingRotation(AxisDirection.Z, np.pi, Frame.GLOBAL),
        ... ]
        >>> resolve_rotations(np.eye(4), queue)  # Rz(pi) @ Rx(0.5)
    """
    M = np.array(matrix, dtype=DEFAULT_DTYPE)
    dim = M.shape[0]

    if not queue:
        return M

    remaining = list(queue)

    # Pass 1: global rotations, most recent first
    for i in range(len(remaining) - 1, -1, -1):
        entry = remaining[i]
        if entry.frame is Frame.GLOBAL:
            M = M @ _rotation_matrix_numpy(entry.axis, entry.angle, dim)
            del remaining[i]

    num_global = len(queue) - len(remaining)

    # Pass 2: local rotations in call order
    for entry in remaining:
        M = M @ _rotation_matrix_numpy(entry.axis, entry.angle, dim)

    logger.debug(
        "[Resolve] Folded %d global and %d local rotations", num_global, len(remaining)
    )
    return M
