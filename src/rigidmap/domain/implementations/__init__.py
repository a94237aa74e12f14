"""Superposition algorithm implementations."""

from .kabsch_minimizer import KabschMinimizer, SVDKabschMinimizer, compute_rmsd_minimizer
from .three_point_matcher import MatchCase, MatchResult, ThreePointMatcher, match_points

__all__ = [
    "KabschMinimizer",
    "SVDKabschMinimizer",
    "compute_rmsd_minimizer",
    "MatchCase",
    "MatchResult",
    "ThreePointMatcher",
    "match_points",
]
