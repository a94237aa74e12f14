#!/usr/bin/env python3
# src/rigidmap/domain/geometry.py
"""
Applying rigid transforms to point collections and measuring RMSD.

Both translate() and rigid_transform() mutate their argument in place and
return it. Applying them concurrently to the same collection from several
threads is not safe; callers have to serialise such access.
"""

from typing import Union
import numpy as np

from ..exceptions import DimensionMismatchError
from .interfaces.coordinate_provider import CoordinateProvider
from .models.atom_bijection import as_points
from .models.rigid_transform import RigidTransform

Points = Union[np.ndarray, CoordinateProvider]


def _update_in_place(points: Points, transform: RigidTransform) -> Points:
    if isinstance(points, CoordinateProvider):
        points.set_coordinates(transform.apply(points.get_coordinates()))
        return points
    if not isinstance(points, np.ndarray):
        raise TypeError(
            f"Expected a numpy array or CoordinateProvider, got {type(points).__name__}"
        )
    if not np.issubdtype(points.dtype, np.floating):
        raise TypeError(f"In-place update needs a float array, got {points.dtype}")
    points[...] = transform.apply(points)
    return points


def translate(points: Points, translation) -> Points:
    """
    Shift every point by a translation vector, in place.

    Args:
        points: Float array of shape (3,) or (n, 3), or a CoordinateProvider
        translation: Vector of length 3

    Returns:
        The same object that was passed in
    """
    return _update_in_place(points, RigidTransform.from_translation(translation))


def rigid_transform(points: Points, transform: RigidTransform) -> Points:
    """
    Replace every point p by R @ p + t, in place.

    Args:
        points: Float array of shape (3,) or (n, 3), or a CoordinateProvider
        transform: Transform to apply

    Returns:
        The same object that was passed in
    """
    return _update_in_place(points, transform)


def compute_rmsd(source, target) -> float:
    """
    Root-mean-square deviation between two index-aligned point sets.

    No fitting is performed.

    Args:
        source: Array-like of shape (n, 3)
        target: Array-like of shape (n, 3)

    Returns:
        sqrt(mean_i |target_i - source_i|^2)

    Raises:
        DimensionMismatchError: If the sets differ in length or are empty
    """
    source = as_points(source, "source")
    target = as_points(target, "target")
    if len(source) != len(target):
        raise DimensionMismatchError(
            f"Point sets differ in length: {len(source)} != {len(target)}"
        )
    if len(source) == 0:
        raise DimensionMismatchError("Cannot compute RMSD of empty point sets")
    diff = target - source
    return float(np.sqrt(np.mean(np.sum(diff * diff, axis=1))))
