#!/usr/bin/env python3
# src/rigidmap/domain/implementations/three_point_matcher.py

"""
Rigid transform mapping one ordered point triple onto another.

The transform maps
(1) w1 onto v1,
(2) w2 onto the ray that starts in v1 and goes through v2,
(3) w3 into the half-plane spanned by v1, v2 and v3.

Near-degenerate triples never raise. Each stage picks one of the MatchCase
branches and falls back to identity or point inversion when a direction is
too short to be trusted.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import numpy as np
from scipy.spatial.transform import Rotation

from ...config import DEFAULT_TOLERANCES, ToleranceConfig
from ..models.rigid_transform import RigidTransform

logger = logging.getLogger(__name__)


class MatchCase(Enum):
    """Branch taken by one stage of the three-point construction."""

    AXIS_DEGENERATE = "axis_degenerate"
    AXIS_ANTIPARALLEL = "axis_antiparallel"
    AXIS_HALF_TURN = "axis_half_turn"
    PLANE_DEGENERATE = "plane_degenerate"
    PLANE_ALIGNED = "plane_aligned"
    PLANE_FLIPPED = "plane_flipped"
    PLANE_ROTATION = "plane_rotation"


@dataclass(frozen=True)
class MatchResult:
    """Transform built by ThreePointMatcher and the branches that produced it."""

    transform: RigidTransform
    axis_case: MatchCase
    plane_case: Optional[MatchCase] = None


def _squared_norm(vector: np.ndarray) -> float:
    return float(np.dot(vector, vector))


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def _axis_angle(angle: float, axis: np.ndarray) -> np.ndarray:
    return Rotation.from_rotvec(angle * _normalize(axis)).as_matrix()


class ThreePointMatcher:
    """Builds the rigid transform taking (w1, w2, w3) onto (v1, v2, v3)."""

    def __init__(self, config: Optional[ToleranceConfig] = None):
        self.config = config or DEFAULT_TOLERANCES

    def _align_first_axis(
        self, tw2: np.ndarray, tv2: np.ndarray
    ) -> Tuple[MatchCase, np.ndarray]:
        """Rotation taking the direction of tw2 onto that of tv2."""
        eps2 = self.config.epsilon_squared
        if _squared_norm(tv2) < eps2 or _squared_norm(tw2) < eps2:
            return MatchCase.AXIS_DEGENERATE, np.eye(3)

        rotation_axis = _normalize(tw2) + _normalize(tv2)
        if _squared_norm(rotation_axis) < self.config.epsilon:
            # antiparallel directions: invert the second vector
            return MatchCase.AXIS_ANTIPARALLEL, -np.eye(3)

        # a half-turn about the bisector swaps the two unit vectors
        return MatchCase.AXIS_HALF_TURN, _axis_angle(np.pi, rotation_axis)

    def _align_plane(
        self, tw3: np.ndarray, tv2: np.ndarray, tv3: np.ndarray
    ) -> Tuple[MatchCase, np.ndarray]:
        """Rotation about tv2 bringing tw3 into the plane of tv2 and tv3."""
        eps, eps2 = self.config.epsilon, self.config.epsilon_squared
        if _squared_norm(tw3) <= eps2 or _squared_norm(tv3) <= eps2:
            return MatchCase.PLANE_DEGENERATE, np.eye(3)

        tv2 = _normalize(tv2)
        axis_w = np.cross(tv2, _normalize(tw3))
        axis_v = np.cross(tv2, _normalize(tv3))
        if _squared_norm(axis_w) <= eps2 or _squared_norm(axis_v) <= eps2:
            return MatchCase.PLANE_DEGENERATE, np.eye(3)

        axis_w = _normalize(axis_w)
        axis_v = _normalize(axis_v)
        product = float(np.dot(axis_w, axis_v))
        rotation_axis = np.cross(axis_w, axis_v)

        if _squared_norm(rotation_axis) < eps2:
            if product < 0.0:
                return MatchCase.PLANE_FLIPPED, _axis_angle(np.pi, tv2)
            return MatchCase.PLANE_ALIGNED, np.eye(3)

        angle = np.arccos(np.clip(product, -1.0, 1.0))
        if angle > eps:
            return MatchCase.PLANE_ROTATION, _axis_angle(angle, rotation_axis)
        # too small an angle to trust the axis
        return MatchCase.PLANE_ALIGNED, np.eye(3)

    def match(self, w1, w2, w3, v1, v2, v3) -> MatchResult:
        """
        Construct the transform for two ordered point triples.

        Args:
            w1, w2, w3: Source points, each array-like of length 3
            v1, v2, v3: Target points, each array-like of length 3

        Returns:
            MatchResult with the transform and the branches taken
        """
        w1, w2, w3, v1, v2, v3 = (
            np.asarray(p, dtype=np.float64) for p in (w1, w2, w3, v1, v2, v3)
        )
        eps2 = self.config.epsilon_squared

        # move w1 and v1 to the origin
        tw2, tw3 = w2 - w1, w3 - w1
        tv2, tv3 = v2 - v1, v3 - v1

        # avoid building an axis from a vanishing first difference
        if _squared_norm(tv2) < eps2 <= _squared_norm(tv3):
            tv2, tv3 = tv3, tv2
        if _squared_norm(tw2) < eps2 <= _squared_norm(tw3):
            tw2, tw3 = tw3, tw2

        final_translation = -w1
        final_rotation = np.eye(3)

        axis_case, rotation = self._align_first_axis(tw2, tv2)
        logger.debug("First axis: %s", axis_case.value)
        plane_case = None

        if axis_case is not MatchCase.AXIS_DEGENERATE:
            tw3 = rotation @ tw3
            final_rotation = rotation @ final_rotation
            final_translation = rotation @ final_translation

            plane_case, rotation = self._align_plane(tw3, tv2, tv3)
            logger.debug("Plane: %s", plane_case.value)
            final_rotation = rotation @ final_rotation
            final_translation = rotation @ final_translation

        final_translation = final_translation + v1
        return MatchResult(
            RigidTransform(final_rotation, final_translation), axis_case, plane_case
        )


def match_points(
    w1, w2, w3, v1, v2, v3, config: Optional[ToleranceConfig] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Translation and rotation mapping the triple (w1, w2, w3) onto (v1, v2, v3).

    Returns:
        (translation, rotation) so that x -> rotation @ x + translation sends
        w1 to v1, w2 onto the ray v1->v2 and w3 into the plane of v1, v2, v3
    """
    result = ThreePointMatcher(config).match(w1, w2, w3, v1, v2, v3)
    return (
        np.array(result.transform.translation),
        np.array(result.transform.rotation),
    )
