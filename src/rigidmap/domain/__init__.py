"""Core domain models, interfaces and algorithms."""

from .models.rigid_transform import RigidTransform
from .models.atom_bijection import AtomBijection
from .models.alignment_result import AlignmentResult
from .interfaces.coordinate_provider import CoordinateProvider
from .interfaces.rmsd_minimizer import RMSDMinimizer

__all__ = [
    "RigidTransform",
    "AtomBijection",
    "AlignmentResult",
    "CoordinateProvider",
    "RMSDMinimizer",
]
