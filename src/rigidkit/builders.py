"""
Entry points for building transformations.

Each function returns a Transformation seeded with an identity (or supplied)
matrix in the local frame and, where the name says so, a preselected mode.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from typing import TypeAlias

import numpy as np

from rigidkit.constants import SE3_DIM, SO3_DIM
from rigidkit.params import DHParams
from rigidkit.protocols import MatrixSource
from rigidkit.transform.builder import Transformation
from rigidkit.transform.types import AngleUnit, Frame, Mode

logger = logging.getLogger(__name__)

Seed: TypeAlias = np.ndarray | tuple | list | MatrixSource


def _seed(matrix: Seed | None, default_dim: int) -> np.ndarray | Seed:
    """Identity of ``default_dim`` when no seed is given; resolve builder seeds."""
    if matrix is None:
        return np.eye(default_dim)
    if isinstance(matrix, MatrixSource):
        return matrix.matrix()
    return matrix


def rotate(matrix: Seed | None = None) -> Transformation:
    """
    Start a transformation in rotate mode.

    Args:
        matrix: Optional 3x3 or 4x4 seed (or another builder). Defaults to eye(4).

    Returns:
        Transformation in the local frame, rotate mode

    Example:
        >>> rotate().xd(30).global_().zd(90).matrix()
    """
    return Transformation(_seed(matrix, SE3_DIM), Frame.LOCAL, Mode.ROTATE)


def translate(matrix: Seed | None = None) -> Transformation:
    """
    Start a transformation in translate mode.

    Args:
        matrix: Optional 4x4 seed (or another builder). Defaults to eye(4).

    Returns:
        Transformation in the local frame, translate mode
    """
    return Transformation(_seed(matrix, SE3_DIM), Frame.LOCAL, Mode.TRANSLATE)


def scale(matrix: Seed | None = None) -> Transformation:
    """
    Start a transformation in scale mode.

    Args:
        matrix: Optional 4x4 seed (or another builder). Defaults to eye(4).

    Returns:
        Transformation in the local frame, scale mode
    """
    return Transformation(_seed(matrix, SE3_DIM), Frame.LOCAL, Mode.SCALE)


def builder(matrix: Seed | None = None, frame: Frame = Frame.LOCAL) -> Transformation:
    """
    Start a transformation with no mode selected.

    Call .rotate(), .translate() or .scale() before any axis call.

    Args:
        matrix: Optional 3x3 or 4x4 seed (or another builder). Defaults to eye(4).
        frame: Initial reference frame

    Returns:
        Transformation with mode NONE
    """
    return Transformation(_seed(matrix, SE3_DIM), frame, Mode.NONE)


def rotation(matrix: Seed | None = None, frame: Frame = Frame.LOCAL) -> Transformation:
    """
    Start a pure rotation stack.

    Defaults to an SO(3) seed, which refuses translate/scale. Pass a 4x4 seed
    to get SE(3) output from rotations alone.

    Args:
        matrix: Optional 3x3 or 4x4 seed. Defaults to eye(3).
        frame: Initial reference frame

    Returns:
        Transformation in rotate mode
    """
    return Transformation(_seed(matrix, SO3_DIM), frame, Mode.ROTATE)


def local_rotation(matrix: Seed | None = None) -> Transformation:
    """Pure rotation stack in the local frame."""
    return rotation(matrix, Frame.LOCAL)


def global_rotation(matrix: Seed | None = None) -> Transformation:
    """Pure rotation stack in the global frame."""
    return rotation(matrix, Frame.GLOBAL)


def translation(matrix: Seed | None = None, frame: Frame = Frame.LOCAL) -> Transformation:
    """
    Start a translation builder.

    Args:
        matrix: Optional 4x4 seed. Defaults to eye(4).
        frame: Initial reference frame

    Returns:
        Transformation in translate mode

    Raises:
        InvalidModeError: If the seed is 3x3, same as translate()
    """
    return Transformation(_seed(matrix, SE3_DIM), frame, Mode.TRANSLATE)


def dh(
    theta: float,
    d: float,
    a: float,
    alpha: float,
    unit: AngleUnit = AngleUnit.RADIANS,
    matrix: Seed | None = None,
) -> Transformation:
    """
    Denavit-Hartenberg transform of one link.

    Equivalent to ``rotate().z(theta).translate().z(d).x(a).rotate().x(alpha)``.

    Args:
        theta: Rotation about z
        d: Translation along z
        a: Translation along x
        alpha: Rotation about x
        unit: Unit of ``theta`` and ``alpha``
        matrix: Optional 4x4 seed. Defaults to eye(4).

    Returns:
        Transformation in rotate mode (further chaining allowed)
    """
    return builder(matrix).dh(theta, d, a, alpha, unit=unit)


def dh_chain(links: Iterable[DHParams], matrix: Seed | None = None) -> Transformation:
    """
    Fold a sequence of Denavit-Hartenberg links into one transformation.

    Args:
        links: Link parameters from base to tip
        matrix: Optional 4x4 base seed. Defaults to eye(4).

    Returns:
        Transformation in rotate mode, or the untouched seed in rotate mode
        when ``links`` is empty

    Example:
        >>> links = [DHParams(0.1, 0.3, 0.0, np.pi / 2), DHParams(0.4, 0.0, 0.5, 0.0)]
        >>> dh_chain(links).matrix()
    """
    result = rotate(matrix)
    count = 0
    for link in links:
        result = link.apply(result)
        count += 1

    logger.debug("[Builders] Chained %d DH links", count)
    return result
