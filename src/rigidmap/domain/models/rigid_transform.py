#!/usr/bin/env python3
# src/rigidmap/domain/models/rigid_transform.py

"""
Domain model for a rigid-body transform x -> R x + t.
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np

from ...config import DEFAULT_TOLERANCES
from ...exceptions import DimensionMismatchError


def _frozen_array(value, shape) -> np.ndarray:
    array = np.array(value, dtype=np.float64)
    if array.shape != shape:
        raise DimensionMismatchError(f"Expected shape {shape}, got {array.shape}")
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class RigidTransform:
    """Immutable pairing of a 3x3 rotation matrix and a translation vector.

    Orthonormality of the rotation is not checked here; it is a guarantee of
    the algorithms that produce transforms, not of the constructor.
    """

    rotation: np.ndarray
    translation: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "rotation", _frozen_array(self.rotation, (3, 3)))
        object.__setattr__(self, "translation", _frozen_array(self.translation, (3,)))

    @classmethod
    def identity(cls) -> "RigidTransform":
        return cls(np.eye(3), np.zeros(3))

    @classmethod
    def from_translation(cls, translation) -> "RigidTransform":
        return cls(np.eye(3), translation)

    def apply(self, points) -> np.ndarray:
        """
        Transform points without touching the input.

        Args:
            points: Array-like of shape (3,) or (n_points, 3)

        Returns:
            New array of the same shape holding R @ p + t for each point
        """
        points = np.asarray(points, dtype=np.float64)
        return points @ self.rotation.T + self.translation

    def inverse(self) -> "RigidTransform":
        """Inverse transform, assuming the rotation is orthonormal."""
        rotation_t = self.rotation.T
        return RigidTransform(rotation_t, -rotation_t @ self.translation)

    def compose(self, other: "RigidTransform") -> "RigidTransform":
        """Transform equivalent to applying other first, then self."""
        return RigidTransform(
            self.rotation @ other.rotation,
            self.rotation @ other.translation + self.translation,
        )

    def as_matrix(self) -> np.ndarray:
        """4x4 homogeneous matrix representation."""
        matrix = np.eye(4)
        matrix[:3, :3] = self.rotation
        matrix[:3, 3] = self.translation
        return matrix

    def is_proper_rotation(self, atol: Optional[float] = None) -> bool:
        """Whether the rotation is orthonormal with determinant +1.

        atol defaults to DEFAULT_TOLERANCES.orthonormality_tolerance.
        """
        if atol is None:
            atol = DEFAULT_TOLERANCES.orthonormality_tolerance
        return bool(
            np.allclose(self.rotation.T @ self.rotation, np.eye(3), atol=atol)
            and np.isclose(np.linalg.det(self.rotation), 1.0, atol=atol)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, RigidTransform):
            return NotImplemented
        return bool(
            np.array_equal(self.rotation, other.rotation)
            and np.array_equal(self.translation, other.translation)
        )

    def __hash__(self):
        return hash((self.rotation.tobytes(), self.translation.tobytes()))

    def __repr__(self):
        return (
            f"RigidTransform(rotation={self.rotation.tolist()}, "
            f"translation={self.translation.tolist()})"
        )
