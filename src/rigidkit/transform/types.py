"""Value types for the transformation builder.

Provides the axis, frame, mode and angle-unit tags plus the small records
passed between the builder, the resolver and the matrix formulas.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np

from rigidkit.constants import DEG_TO_RAD
from rigidkit.errors import InvalidAxisError


class AxisDirection(Enum):
    """One of the three coordinate axes, valued by its index."""

    X = 0
    Y = 1
    Z = 2

    @property
    def index(self) -> int:
        """Row/column index of this axis (0, 1 or 2)."""
        return self.value

    @classmethod
    def parse(cls, value: AxisDirection | str | int) -> AxisDirection:
        """
        Map an axis tag to an AxisDirection.

        Accepts an AxisDirection, a letter ("x", "Y", ...) or an index (0, 1, 2).

        Raises:
            InvalidAxisError: If the value does not name an axis
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidAxisError(
                    f"Unknown axis {value!r}. Use 'x', 'y' or 'z'."
                ) from None

        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidAxisError(
                    f"Axis index {value} is out of range. Use 0, 1 or 2."
                ) from None

        raise InvalidAxisError(f"Cannot interpret {type(value).__name__} as an axis")


class Frame(Enum):
    """Reference frame for subsequent transformations."""

    LOCAL = "local"  # post-multiply, object's own basis
    GLOBAL = "global"  # pre-multiply, world basis


class Mode(Enum):
    """What an axis call on the builder means."""

    NONE = "none"
    ROTATE = "rotate"
    TRANSLATE = "translate"
    SCALE = "scale"


class AngleUnit(Enum):
    """Unit of a rotation amount."""

    RADIANS = "radians"
    DEGREES = "degrees"

    def to_radians(self, value: float) -> float:
        """Convert ``value`` in this unit to radians."""
        if self is AngleUnit.DEGREES:
            return value * DEG_TO_RAD
        return value


@dataclass(frozen=True, slots=True)
class PendingRotation:
    """
    A rotation waiting to be folded into the builder's matrix.

    Attributes:
        axis: Axis to rotate about
        angle: Rotation angle in radians
        frame: Frame captured when the rotation was issued
    """

    axis: AxisDirection
    angle: float
    frame: Frame


class AxisAngle(NamedTuple):
    """Rotation as a unit axis and an angle about it."""

    axis: np.ndarray
    angle: float
