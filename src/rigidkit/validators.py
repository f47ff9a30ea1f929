"""
Validation helpers for rigidkit builders and matrix formulas.

Provides reusable validation logic for axis magnitudes, matrix dimensions
and seed matrices.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from functools import wraps
from numbers import Real
from typing import Any, TypeAlias

import numpy as np

from rigidkit.constants import DEFAULT_DTYPE, VALID_DIMS
from rigidkit.errors import DimensionMismatchError

# Python 3.12+ type alias for callables
F: TypeAlias = Callable[..., Any]


def validate_number(param_name: str = "value", param_index: int = 1) -> Callable[[F], F]:
    """
    Decorator for validating finite numeric parameters.

    Args:
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature (default: 1 = first arg after self)

    Returns:
        Decorated function with numeric validation

    Example:
        >>> @validate_number('amount', param_index=2)
        ... def step(self, axis, amount: float) -> Self:
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            # Get value from args or kwargs
            if len(args) > param_index:
                value = args[param_index]
            elif param_name in kwargs:
                value = kwargs[param_name]
            else:
                # No value provided, let function handle it
                return func(*args, **kwargs)

            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(
                    f"{param_name} must be a number, got {type(value).__name__}. "
                    f"Provide a numeric value (int or float)."
                )

            if not math.isfinite(value):
                raise ValueError(f"{param_name}={value} must be finite.")

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_dimension(param_name: str = "dim", param_index: int = 2) -> Callable[[F], F]:
    """
    Decorator for validating a matrix dimension argument (3 or 4).

    Args:
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with dimension validation

    Example:
        >>> @validate_dimension('dim')
        ... def rotation_matrix(axis, angle, dim=3):
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if len(args) > param_index:
                value = args[param_index]
            elif param_name in kwargs:
                value = kwargs[param_name]
            else:
                return func(*args, **kwargs)

            if value not in VALID_DIMS:
                choices_str = ", ".join(str(d) for d in sorted(VALID_DIMS))
                raise DimensionMismatchError(
                    f"{param_name}={value!r} is not valid. Valid options are: {choices_str}"
                )

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def as_transform_matrix(matrix: Any, name: str = "matrix") -> np.ndarray:
    """
    Convert a seed matrix to a float64 array and check its shape.

    Args:
        matrix: Square 3x3 (SO(3)) or 4x4 (SE(3)) array-like
        name: Name used in error messages

    Returns:
        A new float64 array with the same entries

    Raises:
        DimensionMismatchError: If the matrix is not square or not 3x3/4x4
        ValueError: If the matrix contains NaN or infinite entries
    """
    arr = np.array(matrix, dtype=DEFAULT_DTYPE)

    if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] not in VALID_DIMS:
        raise DimensionMismatchError(
            f"{name} must be a 3x3 or 4x4 matrix, got shape {arr.shape}"
        )

    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite entries")

    return arr
