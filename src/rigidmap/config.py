#!/usr/bin/env python3
# src/rigidmap/config.py

"""
Numerical tolerances shared by the superposition algorithms.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceConfig:
    """Thresholds used to detect near-degenerate geometry.

    Attributes:
        epsilon: Threshold for squared rotation-axis lengths and angles
        epsilon_squared: Threshold for squared lengths of difference vectors
        singular_value_tolerance: Singular values of the cross-covariance
            below this fraction of the largest one are treated as zero
        eigenvalue_tolerance: Smallest ratio of eigenvalues of R^T R for
            which the closed-form Kabsch rotation is used; worse conditioned
            fits are factorised by SVD
        orthonormality_tolerance: Absolute tolerance for rotation checks
    """

    epsilon: float = 1e-5
    epsilon_squared: float = 1e-8
    singular_value_tolerance: float = 1e-10
    eigenvalue_tolerance: float = 1e-6
    orthonormality_tolerance: float = 1e-6

    def __post_init__(self):
        for name in (
            "epsilon",
            "epsilon_squared",
            "singular_value_tolerance",
            "eigenvalue_tolerance",
            "orthonormality_tolerance",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")


DEFAULT_TOLERANCES = ToleranceConfig()
