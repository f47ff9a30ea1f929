"""
Protocol definitions for rigidkit matrix producers.

Defines the read-only interface shared by anything that can hand out a
transformation matrix.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class MatrixSource(Protocol):
    """
    Protocol for objects that produce a transformation matrix.

    Transformation implements this interface; functions that only need the
    final matrix should accept a MatrixSource.
    """

    def matrix(self, target: np.ndarray | None = None) -> np.ndarray:
        """
        Full transformation matrix.

        Args:
            target: Optional matrix to multiply by the transformation

        Returns:
            The matrix, or ``matrix @ target``
        """
        ...

    def matrix3(self, target: np.ndarray | None = None) -> np.ndarray:
        """
        Upper-left 3x3 block.

        Args:
            target: Optional matrix to multiply by the block

        Returns:
            The block, or ``block @ target``
        """
        ...
