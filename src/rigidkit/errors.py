"""
Error types raised by rigidkit.

All errors derive from TransformationError, which is a ValueError, so code
that already guards builder calls with ``except ValueError`` keeps working.
"""

from __future__ import annotations


class TransformationError(ValueError):
    """Base class for all rigidkit errors."""


class ModeNotSetError(TransformationError):
    """Raised when an axis call is issued before rotate/translate/scale was selected."""


class InvalidModeError(TransformationError):
    """Raised when a call is not allowed in the builder's current mode or dimension."""


class DimensionMismatchError(TransformationError):
    """Raised when a matrix, vector or point array has the wrong shape."""


class NotAPureRotationError(TransformationError):
    """Raised when an axis-angle query hits a matrix with a translation component."""


class SingularRotationError(TransformationError):
    """Raised when the rotation axis is undefined (angle of 0 or pi)."""


class InvalidAxisError(TransformationError):
    """Raised when an axis tag cannot be mapped to X, Y or Z."""
