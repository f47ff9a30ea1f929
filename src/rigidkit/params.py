"""
Denavit-Hartenberg link parameters.

This module provides the DHParams record used to describe one robot link
and to fold a chain of links into a single transformation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING

from rigidkit.transform.types import AngleUnit

if TYPE_CHECKING:
    from rigidkit.transform.builder import Transformation


@dataclass(frozen=True)
class DHParams:
    """
    Denavit-Hartenberg parameters of one link.

    Attributes:
        theta: Joint angle about the local z axis
        d: Link offset along the local z axis
        a: Link length along the local x axis
        alpha: Link twist about the local x axis
        unit: Unit of ``theta`` and ``alpha``

    Example:
        >>> from rigidkit import DHParams, dh_chain
        >>> links = [
        ...     DHParams.from_degrees(theta=90, d=0.3, a=0.0, alpha=90),
        ...     DHParams(theta=0.2, d=0.0, a=0.5, alpha=0.0),
        ... ]
        >>> M = dh_chain(links).matrix()
    """

    theta: float
    d: float
    a: float
    alpha: float
    unit: AngleUnit = AngleUnit.RADIANS

    def __post_init__(self):
        """Validate parameter values."""
        for name in ("theta", "d", "a", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(f"{name} must be a number, got {type(value).__name__}")
            if not math.isfinite(value):
                raise ValueError(f"{name}={value} must be finite")

    @classmethod
    def from_degrees(cls, theta: float, d: float, a: float, alpha: float) -> DHParams:
        """Create link parameters with ``theta`` and ``alpha`` in degrees."""
        return cls(theta, d, a, alpha, unit=AngleUnit.DEGREES)

    def radians(self) -> tuple[float, float, float, float]:
        """
        Return (theta, d, a, alpha) with both angles in radians.

        Example:
            >>> DHParams.from_degrees(180, 1.0, 0.0, 90).radians()
            (3.141592653589793, 1.0, 0.0, 1.5707963267948966)
        """
        return (
            self.unit.to_radians(self.theta),
            self.d,
            self.a,
            self.unit.to_radians(self.alpha),
        )

    def apply(self, builder: Transformation) -> Transformation:
        """Append this link's transform to ``builder``."""
        return builder.dh(self.theta, self.d, self.a, self.alpha, unit=self.unit)
