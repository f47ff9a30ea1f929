"""
Transformation: Fluent builder for rotation, translation and scaling matrices.

This module provides an immutable chaining API for composing 3D rigid-body
transformations in local or global reference frames and reading off the
resulting matrix, rotation block, axis-angle or transformed points.

Key Features:
- Explicit modes (rotate, translate, scale) and frames (local, global)
- Rotations are queued and resolved lazily so mixed local/global chains can
  be issued in any call order
- Translations and scalings are applied immediately
- Every chaining call returns a new Transformation; earlier values never change
- Denavit-Hartenberg macro for robot-link transforms
"""

from __future__ import annotations

import logging
from typing import Any, Self, TypeAlias

import numpy as np

from rigidkit.constants import DEFAULT_DTYPE, SE3_DIM, SO3_DIM, SPATIAL_DIMS
from rigidkit.errors import (
    DimensionMismatchError,
    InvalidModeError,
    ModeNotSetError,
    NotAPureRotationError,
)
from rigidkit.transform.api import (
    _build_scale_matrix_4x4_numpy,
    _build_translation_matrix_4x4_numpy,
    matrix_to_axis_angle,
)
from rigidkit.transform.compose import resolve_rotations
from rigidkit.transform.kernels import transform_directions_numba, transform_points_numba
from rigidkit.transform.types import (
    AngleUnit,
    AxisAngle,
    AxisDirection,
    Frame,
    Mode,
    PendingRotation,
)
from rigidkit.validators import as_transform_matrix, validate_number

logger = logging.getLogger(__name__)

# Type aliases for better readability (Python 3.12+ syntax)
ArrayLike: TypeAlias = np.ndarray | tuple | list
AxisLike: TypeAlias = AxisDirection | str | int


class Transformation:
    """
    Immutable builder for 3D transformation matrices.

    A Transformation holds a 3x3 (pure rotation) or 4x4 (rigid transform)
    matrix, the current frame and mode, and a queue of rotations that have
    been issued but not yet folded into the matrix.

    Axis calls mean different things per mode:
    - rotate: queue a rotation about the axis (radians, or degrees via xd/yd/zd)
    - translate: move along the axis
    - scale: scale along the axis

    Local transformations post-multiply the matrix, global ones pre-multiply.

    Example:
        >>> M = (Transformation(np.eye(4), mode=Mode.ROTATE)
        ...     .local().xd(30).yd(12)
        ...     .global_().zd(180)
        ...     .local().x(np.pi / 2)
        ...     .translate().z(1.5)
        ...     .matrix()
        ... )
    """

    __slots__ = ("_matrix", "_frame", "_mode", "_pending")

    def __init__(
        self,
        matrix: ArrayLike,
        frame: Frame = Frame.LOCAL,
        mode: Mode = Mode.NONE,
    ):
        """
        Initialize a builder from a seed matrix.

        Args:
            matrix: 3x3 or 4x4 seed matrix (copied)
            frame: Initial reference frame
            mode: Initial mode

        Raises:
            DimensionMismatchError: If the seed is not 3x3 or 4x4
            InvalidModeError: If a 3x3 seed is given translate or scale mode
        """
        M = as_transform_matrix(matrix)
        frame = Frame(frame)
        mode = Mode(mode)

        if mode in (Mode.TRANSLATE, Mode.SCALE) and M.shape[0] == SO3_DIM:
            raise InvalidModeError(
                f"{mode.value} mode needs a 4x4 matrix; 3x3 builders only rotate"
            )

        M.setflags(write=False)
        self._matrix: np.ndarray = M
        self._frame: Frame = frame
        self._mode: Mode = mode
        self._pending: tuple[PendingRotation, ...] = ()

    @classmethod
    def _from_state(
        cls,
        matrix: np.ndarray,
        frame: Frame,
        mode: Mode,
        pending: tuple[PendingRotation, ...],
    ) -> Self:
        """Build a value from already-validated state."""
        obj = cls.__new__(cls)
        if matrix.flags.writeable:
            matrix.setflags(write=False)
        obj._matrix = matrix
        obj._frame = frame
        obj._mode = mode
        obj._pending = pending
        return obj

    def _derive(self, **changes: Any) -> Self:
        """New value with the given fields replaced."""
        return self._from_state(
            changes.get("matrix", self._matrix),
            changes.get("frame", self._frame),
            changes.get("mode", self._mode),
            changes.get("pending", self._pending),
        )

    # ------------------------------------------------------------------
    # Frame selection
    # ------------------------------------------------------------------

    def with_frame(self, frame: Frame) -> Self:
        """
        Set the reference frame for subsequent calls.

        Rotations already queued keep the frame they were issued in.

        Args:
            frame: Frame.LOCAL or Frame.GLOBAL

        Returns:
            New Transformation for method chaining
        """
        return self._derive(frame=Frame(frame))

    def local(self) -> Self:
        """Interpret subsequent calls in the local (object) frame."""
        return self.with_frame(Frame.LOCAL)

    def global_(self) -> Self:
        """Interpret subsequent calls in the global (world) frame."""
        return self.with_frame(Frame.GLOBAL)

    def loc(self) -> Self:
        """Shorthand for .local()"""
        return self.local()

    def glob(self) -> Self:
        """Shorthand for .global_()"""
        return self.global_()

    def g(self) -> Self:
        """Shorthand for .global_()"""
        return self.global_()

    # ------------------------------------------------------------------
    # Mode selection
    # ------------------------------------------------------------------

    def _switch_mode(self, mode: Mode) -> Self:
        if mode is self._mode:
            return self

        if mode in (Mode.TRANSLATE, Mode.SCALE) and self.dim == SO3_DIM:
            raise InvalidModeError(
                f"Cannot {mode.value} a 3x3 rotation builder. "
                f"Seed the builder with a 4x4 matrix to combine rotations with {mode.value}s."
            )

        # Leaving rotate mode folds the queue so translate/scale see the full matrix
        current = self.resolve() if self._pending else self

        logger.debug("[Transformation] Mode %s -> %s", self._mode.value, mode.value)
        return current._derive(mode=mode)

    def rotate(self) -> Self:
        """
        Interpret subsequent axis calls as rotations.

        Returns:
            New Transformation for method chaining
        """
        return self._switch_mode(Mode.ROTATE)

    def translate(self) -> Self:
        """
        Interpret subsequent axis calls as translations.

        Pending rotations are resolved first.

        Returns:
            New Transformation for method chaining

        Raises:
            InvalidModeError: On a 3x3 rotation builder
        """
        return self._switch_mode(Mode.TRANSLATE)

    def scale(self) -> Self:
        """
        Interpret subsequent axis calls as scalings.

        Pending rotations are resolved first.

        Returns:
            New Transformation for method chaining

        Raises:
            InvalidModeError: On a 3x3 rotation builder
        """
        return self._switch_mode(Mode.SCALE)

    def r(self) -> Self:
        """Shorthand for .rotate()"""
        return self.rotate()

    def t(self) -> Self:
        """Shorthand for .translate()"""
        return self.translate()

    def s(self) -> Self:
        """Shorthand for .scale()"""
        return self.scale()

    # ------------------------------------------------------------------
    # Axis operations
    # ------------------------------------------------------------------

    def _compose(self, elementary: np.ndarray) -> np.ndarray:
        if self._frame is Frame.LOCAL:
            return self._matrix @ elementary
        return elementary @ self._matrix

    @validate_number("amount", param_index=2)
    def step(
        self,
        axis: AxisLike,
        amount: float,
        unit: AngleUnit = AngleUnit.RADIANS,
    ) -> Self:
        """
        Apply one transformation along ``axis`` according to the current mode.

        Args:
            axis: Axis (AxisDirection, "x"/"y"/"z" or 0/1/2)
            amount: Angle, distance or scale factor
            unit: Angle unit; DEGREES is only valid in rotate mode

        Returns:
            New Transformation for method chaining

        Raises:
            ModeNotSetError: If no mode has been selected
            InvalidModeError: If ``unit`` is DEGREES outside rotate mode
        """
        direction = AxisDirection.parse(axis)

        if unit is AngleUnit.DEGREES and self._mode is not Mode.ROTATE:
            raise InvalidModeError(
                "Degree amounts are only valid for rotations. Call .rotate() first."
            )

        match self._mode:
            case Mode.ROTATE:
                entry = PendingRotation(direction, float(unit.to_radians(amount)), self._frame)
                return self._derive(pending=self._pending + (entry,))
            case Mode.TRANSLATE:
                T = _build_translation_matrix_4x4_numpy(direction, amount)
                return self._derive(matrix=self._compose(T))
            case Mode.SCALE:
                S = _build_scale_matrix_4x4_numpy(direction, amount)
                return self._derive(matrix=self._compose(S))
            case Mode.NONE:
                raise ModeNotSetError(
                    "Transformation mode is not set. "
                    "Set a mode with .rotate(), .translate() or .scale()"
                )

    def x(self, n: float) -> Self:
        """Rotate, translate or scale along the X axis (radians for rotations)."""
        return self.step(AxisDirection.X, n)

    def y(self, n: float) -> Self:
        """Rotate, translate or scale along the Y axis (radians for rotations)."""
        return self.step(AxisDirection.Y, n)

    def z(self, n: float) -> Self:
        """Rotate, translate or scale along the Z axis (radians for rotations)."""
        return self.step(AxisDirection.Z, n)

    def xd(self, n: float) -> Self:
        """Rotate ``n`` degrees about the X axis (rotate mode only)."""
        return self.step(AxisDirection.X, n, AngleUnit.DEGREES)

    def yd(self, n: float) -> Self:
        """Rotate ``n`` degrees about the Y axis (rotate mode only)."""
        return self.step(AxisDirection.Y, n, AngleUnit.DEGREES)

    def zd(self, n: float) -> Self:
        """Rotate ``n`` degrees about the Z axis (rotate mode only)."""
        return self.step(AxisDirection.Z, n, AngleUnit.DEGREES)

    def dh(
        self,
        theta: float,
        d: float,
        a: float,
        alpha: float,
        unit: AngleUnit = AngleUnit.RADIANS,
    ) -> Self:
        """
        Append a Denavit-Hartenberg link transform.

        Expands to rotate z(theta), translate z(d) and x(a), rotate x(alpha),
        each step following the usual frame rules. The result stays in rotate
        mode and is not resolved, so chaining can continue.

        Args:
            theta: Rotation about the local z axis
            d: Distance along the local z axis
            a: Distance along the local x axis
            alpha: Rotation about the local x axis
            unit: Unit of ``theta`` and ``alpha``

        Returns:
            New Transformation for method chaining

        Raises:
            InvalidModeError: On a 3x3 rotation builder
        """
        if self.dim == SO3_DIM:
            raise InvalidModeError("Denavit-Hartenberg transforms need a 4x4 builder")

        return (
            self.rotate()
            .step(AxisDirection.Z, theta, unit)
            .translate()
            .z(d)
            .x(a)
            .rotate()
            .step(AxisDirection.X, alpha, unit)
        )

    def dh_degrees(self, theta: float, d: float, a: float, alpha: float) -> Self:
        """Same as .dh() with ``theta`` and ``alpha`` in degrees."""
        return self.dh(theta, d, a, alpha, unit=AngleUnit.DEGREES)

    # ------------------------------------------------------------------
    # Resolution and queries
    # ------------------------------------------------------------------

    def resolve(self) -> Self:
        """
        Fold all pending rotations into the matrix.

        Returns:
            New Transformation with an empty rotation queue (same mode and frame)
        """
        if not self._pending:
            return self

        logger.debug("[Transformation] Resolving %d pending rotations", len(self._pending))
        return self._derive(matrix=resolve_rotations(self._matrix, self._pending), pending=())

    def _resolved_matrix(self) -> np.ndarray:
        return self.resolve()._matrix

    def _check_target(self, target: ArrayLike, dim: int) -> np.ndarray:
        target_arr = np.asarray(target, dtype=DEFAULT_DTYPE)
        if target_arr.ndim not in (1, 2) or target_arr.shape[0] != dim:
            raise DimensionMismatchError(
                f"target must have {dim} rows, got shape {target_arr.shape}"
            )
        return target_arr

    def matrix(self, target: ArrayLike | None = None) -> np.ndarray:
        """
        Calculate the transformation matrix.

        Args:
            target: Optional matrix or vector to multiply by the transformation.
                Defaults to the identity of the builder's dimension.

        Returns:
            The transformation matrix, or ``matrix @ target``
        """
        M = self._resolved_matrix()
        if target is None:
            return M.copy()
        return M @ self._check_target(target, self.dim)

    def matrix3(self, target: ArrayLike | None = None) -> np.ndarray:
        """
        Calculate the upper-left 3x3 rotation/scale block.

        Args:
            target: Optional 3-row matrix or vector to multiply by the block

        Returns:
            The 3x3 block, or ``block @ target``
        """
        R = self._resolved_matrix()[:3, :3]
        if target is None:
            return R.copy()
        return R @ self._check_target(target, SO3_DIM)

    def m(self, target: ArrayLike | None = None) -> np.ndarray:
        """Shorthand for .matrix()"""
        return self.matrix(target)

    def m3(self, target: ArrayLike | None = None) -> np.ndarray:
        """Shorthand for .matrix3()"""
        return self.matrix3(target)

    def _axis_angle(self, unit: AngleUnit) -> AxisAngle:
        if not self.is_pure_rotation:
            raise NotAPureRotationError(
                "Cannot create an axis-angle for an SE(3) matrix with a translation component"
            )
        return matrix_to_axis_angle(self._resolved_matrix(), unit)

    def axis(self) -> AxisAngle:
        """
        Axis-angle of the resolved rotation.

        Returns:
            AxisAngle(axis, angle) with the angle in radians

        Raises:
            NotAPureRotationError: If the matrix carries a translation
            SingularRotationError: If the angle is 0 or pi
        """
        return self._axis_angle(AngleUnit.RADIANS)

    def axisd(self) -> AxisAngle:
        """Same as .axis() with the angle in degrees."""
        return self._axis_angle(AngleUnit.DEGREES)

    def _as_vectors(self, values: ArrayLike, name: str) -> tuple[np.ndarray, bool]:
        arr = np.asarray(values, dtype=DEFAULT_DTYPE)
        single = arr.ndim == 1
        if single:
            arr = arr[np.newaxis, :]
        if arr.ndim != 2 or arr.shape[1] != SPATIAL_DIMS:
            raise DimensionMismatchError(f"{name} must have shape [N, 3] or [3], got {arr.shape}")
        return np.ascontiguousarray(arr), single

    def apply(self, points: ArrayLike) -> np.ndarray:
        """
        Transform points with the resolved matrix.

        Args:
            points: Points [N, 3] or a single point [3]

        Returns:
            New array of transformed points with the input's shape

        Example:
            >>> rotate().zd(90).translate().x(1).apply([[1, 0, 0]])
            array([[0., 2., 0.]])
        """
        pts, single = self._as_vectors(points, "points")
        M = self._resolved_matrix()

        R = M[:3, :3].copy()
        t = M[:3, 3].copy() if self.dim == SE3_DIM else np.zeros(SPATIAL_DIMS, dtype=DEFAULT_DTYPE)

        out = np.empty_like(pts)
        transform_points_numba(pts, R, t, out)
        return out[0] if single else out

    def apply_directions(self, vectors: ArrayLike) -> np.ndarray:
        """
        Transform direction vectors with the resolved 3x3 block (no translation).

        Args:
            vectors: Vectors [N, 3] or a single vector [3]

        Returns:
            New array of transformed vectors with the input's shape
        """
        vecs, single = self._as_vectors(vectors, "vectors")
        R = self._resolved_matrix()[:3, :3].copy()

        out = np.empty_like(vecs)
        transform_directions_numba(vecs, R, out)
        return out[0] if single else out

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def dim(self) -> int:
        """Matrix dimension (3 or 4)."""
        return self._matrix.shape[0]

    @property
    def mode(self) -> Mode:
        """Current mode."""
        return self._mode

    @property
    def frame(self) -> Frame:
        """Current reference frame."""
        return self._frame

    @property
    def pending(self) -> tuple[PendingRotation, ...]:
        """Rotations issued but not yet folded into the matrix."""
        return self._pending

    @property
    def is_pure_rotation(self) -> bool:
        """True if the matrix has no translation component."""
        if self.dim == SO3_DIM:
            return True
        # Rotations never touch the translation column, so pending entries don't matter
        return not np.any(self._matrix[:3, 3] != 0.0)

    def copy(self) -> Self:
        """
        Return an equivalent Transformation.

        Values are immutable, so the copy only matters for callers that
        expect a distinct object.
        """
        return self._from_state(self._matrix, self._frame, self._mode, self._pending)

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    def __len__(self) -> int:
        """Number of pending rotations."""
        return len(self._pending)

    def __bool__(self) -> bool:
        """Builders are always truthy, even with nothing pending."""
        return True

    def __repr__(self) -> str:
        """String representation of the builder."""
        return (
            f"Transformation(dim={self.dim}, mode={self._mode.value}, "
            f"frame={self._frame.value}, pending={len(self._pending)})"
        )
