"""
Example: Building rigid-body transformations.

Demonstrates how to use rigidkit for:
- Local and global rotations in any call order
- Combining rotations with translations and scalings
- Axis-angle queries
- Denavit-Hartenberg chains
- Transforming point clouds
"""

import logging

import numpy as np

from rigidkit import (
    DHParams,
    NotAPureRotationError,
    axis_angle_to_matrix,
    dh_chain,
    rotate,
    rotation,
    translate,
)

# Configure logging to see resolution details
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

np.set_printoptions(precision=4, suppress=True)


def example_1_mixed_frames():
    """Example 1: Local and global rotations."""
    print("\n" + "=" * 80)
    print("Example 1: Mixed Frames")
    print("=" * 80)

    M = rotate().local().xd(30).yd(12).global_().zd(180).local().x(np.pi / 2).matrix()
    print("local x30, y12 / global z180 / local x90:")
    print(M)


def example_2_rotate_then_translate():
    """Example 2: Rotate, then translate in local and global frames."""
    print("\n" + "=" * 80)
    print("Example 2: Rotation + Translation")
    print("=" * 80)

    base = rotate().zd(90).translate()
    print("Local x(5) moves along the rotated x axis:")
    print(base.local().x(5).matrix()[:3, 3])
    print("Global x(5) moves along the world x axis:")
    print(base.global_().x(5).matrix()[:3, 3])


def example_3_axis_angle():
    """Example 3: Axis-angle queries."""
    print("\n" + "=" * 80)
    print("Example 3: Axis-Angle")
    print("=" * 80)

    T = rotation().xd(30).yd(45)
    k, theta = T.axisd()
    print(f"Axis: {k}, angle: {theta:.3f} deg")

    R = axis_angle_to_matrix(k, np.deg2rad(theta))
    print(f"Round trip matches: {np.allclose(R, T.matrix())}")

    try:
        translate().x(1.0).axis()
    except NotAPureRotationError as e:
        print(f"Expected error: {e}")


def example_4_dh_chain():
    """Example 4: Forward kinematics of a three-link arm."""
    print("\n" + "=" * 80)
    print("Example 4: Denavit-Hartenberg Chain")
    print("=" * 80)

    links = [
        DHParams.from_degrees(theta=30, d=0.4, a=0.0, alpha=90),
        DHParams.from_degrees(theta=-45, d=0.0, a=0.5, alpha=0),
        DHParams.from_degrees(theta=60, d=0.0, a=0.3, alpha=0),
    ]
    tip = dh_chain(links)
    print("Tip pose:")
    print(tip.matrix())


def example_5_points():
    """Example 5: Transform a point cloud."""
    print("\n" + "=" * 80)
    print("Example 5: Point Cloud")
    print("=" * 80)

    points = np.random.default_rng(42).standard_normal((5, 3))
    T = rotate().global_().zd(45).translate().z(1.0)
    print("Transformed points:")
    print(T.apply(points))


if __name__ == "__main__":
    example_1_mixed_frames()
    example_2_rotate_then_translate()
    example_3_axis_angle()
    example_4_dh_chain()
    example_5_points()
