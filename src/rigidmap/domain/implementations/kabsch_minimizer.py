"""Least-squares rigid superposition (Kabsch algorithm)."""

import logging
from typing import Optional
import numpy as np

from ...config import DEFAULT_TOLERANCES, ToleranceConfig
from ...exceptions import DegenerateGeometryError, DimensionMismatchError
from ..interfaces.rmsd_minimizer import RMSDMinimizer
from ..models.atom_bijection import AtomBijection
from ..models.rigid_transform import RigidTransform


def _centroids(bijection: AtomBijection):
    if len(bijection) == 0:
        raise DimensionMismatchError("Cannot superimpose empty point sets")
    return bijection.source.mean(axis=0), bijection.target.mean(axis=0)


class KabschMinimizer(RMSDMinimizer):
    """Closed-form Kabsch fit through the eigendecomposition of R^T R.

    With R the cross-covariance of the centred point sets and (mu_i, a_i) the
    eigenpairs of R^T R, the rotation is sum_i (R a_i) a_i^T / sqrt(mu_i),
    i.e. the orthonormal factor of the polar decomposition of R.

    The closed form loses accuracy as R^T R becomes ill-conditioned, and it is
    undefined once an eigenvalue vanishes. Such fits (ratio of smallest to
    largest eigenvalue at or below eigenvalue_tolerance) are factorised by SVD
    instead, which yields the same rotation. The rank of R is read from its
    singular values; collinear or single-point input has no unique rotation
    about the line and makes strict mode raise DegenerateGeometryError instead
    of picking one.
    """

    def __init__(
        self,
        config: Optional[ToleranceConfig] = None,
        proper_rotation: bool = True,
        strict: bool = False,
    ):
        """Initialize minimizer.

        Args:
            config: Numerical tolerances
            proper_rotation: Correct a reflection (det -1) to the best proper
                rotation, as SVD-based Kabsch does
            strict: Raise instead of guessing when the rotation is not
                uniquely determined
        """
        self.config = config or DEFAULT_TOLERANCES
        self.proper_rotation = proper_rotation
        self.strict = strict
        self.logger = logging.getLogger(__name__)

    def _svd_rotation(self, left: np.ndarray, right_t: np.ndarray) -> np.ndarray:
        rotation = left @ right_t
        if np.linalg.det(rotation) < 0:
            if self.proper_rotation:
                right_t = right_t.copy()
                right_t[-1] *= -1
                rotation = left @ right_t
            else:
                self.logger.warning("Best orthonormal fit is a reflection (det = -1)")
        return rotation

    def _closed_form_rotation(self, covariance: np.ndarray) -> np.ndarray:
        mu, a = np.linalg.eigh(covariance.T @ covariance)
        images = np.column_stack(
            [covariance @ a[:, i] / np.sqrt(mu[i]) for i in range(3)]
        )
        if np.linalg.det(images) * np.linalg.det(a) < 0:
            if self.proper_rotation:
                # eigh sorts ascending, column 0 belongs to the smallest eigenvalue
                images[:, 0] = -images[:, 0]
            else:
                self.logger.warning("Best orthonormal fit is a reflection (det = -1)")
        return images @ a.T

    def compute(self, bijection: AtomBijection) -> RigidTransform:
        mean_a, mean_b = _centroids(bijection)
        centered_a = bijection.source - mean_a
        centered_b = bijection.target - mean_b

        # sum_i (B_i - mean_b)(A_i - mean_a)^T
        covariance = centered_b.T @ centered_a

        left, singular_values, right_t = np.linalg.svd(covariance)
        threshold = max(
            self.config.singular_value_tolerance * singular_values.max(),
            np.finfo(np.float64).eps ** 2,
        )
        rank = int(np.count_nonzero(singular_values > threshold))

        if rank == 0:
            if self.strict:
                raise DegenerateGeometryError(
                    "Points coincide with their centroid; rotation is undetermined"
                )
            self.logger.warning(
                "All points coincide with their centroid; using identity rotation"
            )
            rotation = np.eye(3)
        elif rank == 1:
            if self.strict:
                raise DegenerateGeometryError(
                    "Points are collinear; rotation about the line is undetermined"
                )
            self.logger.warning(
                "Points are collinear; picking an arbitrary rotation about the line"
            )
            rotation = self._svd_rotation(left, right_t)
        elif (
            singular_values[-1] / singular_values[0]
        ) ** 2 > self.config.eigenvalue_tolerance:
            rotation = self._closed_form_rotation(covariance)
        else:
            self.logger.debug(
                f"Covariance of rank {rank} is ill-conditioned; using SVD rotation"
            )
            rotation = self._svd_rotation(left, right_t)

        return RigidTransform(rotation, mean_b - rotation @ mean_a)



class SVDKabschMinimizer(RMSDMinimizer):
    """Kabsch fit through the singular value decomposition of the covariance."""

    def compute(self, bijection: AtomBijection) -> RigidTransform:
        center1, center2 = _centroids(bijection)

        # Center coordinates
        coords1_centered = bijection.source - center1
        coords2_centered = bijection.target - center2

        # Calculate correlation matrix
        correlation_matrix = np.dot(coords2_centered.T, coords1_centered)

        # SVD
        U, _, Vt = np.linalg.svd(correlation_matrix)

        # Calculate rotation matrix
        rotation = np.dot(U, Vt)

        # Ensure right-handed coordinate system
        if np.linalg.det(rotation) < 0:
            Vt[-1] *= -1
            rotation = np.dot(U, Vt)

        return RigidTransform(rotation, center2 - np.dot(rotation, center1))


def compute_rmsd_minimizer(
    bijection: AtomBijection, minimizer: Optional[RMSDMinimizer] = None
) -> RigidTransform:
    """Fit bijection.source onto bijection.target, by default with KabschMinimizer."""
    return (minimizer or KabschMinimizer()).compute(bijection)
