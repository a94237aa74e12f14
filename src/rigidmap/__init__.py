"""Rigid-body superposition of 3D point sets and molecular structures."""

from .config import DEFAULT_TOLERANCES, ToleranceConfig
from .exceptions import DegenerateGeometryError, DimensionMismatchError, RigidMapError
from .domain.geometry import compute_rmsd, rigid_transform, translate
from .domain.models.rigid_transform import RigidTransform
from .domain.models.atom_bijection import AtomBijection
from .domain.models.bond import Bond, BondOrderType
from .domain.models.atom import Atom
from .domain.models.molecule import Molecule
from .domain.implementations.kabsch_minimizer import (
    KabschMinimizer,
    SVDKabschMinimizer,
    compute_rmsd_minimizer,
)
from .domain.implementations.three_point_matcher import (
    MatchCase,
    ThreePointMatcher,
    match_points,
)
from .services.alignment_service import AlignmentService, map_rigid

__all__ = [
    "DEFAULT_TOLERANCES",
    "ToleranceConfig",
    "RigidMapError",
    "DimensionMismatchError",
    "DegenerateGeometryError",
    "compute_rmsd",
    "rigid_transform",
    "translate",
    "RigidTransform",
    "AtomBijection",
    "Bond",
    "BondOrderType",
    "Atom",
    "Molecule",
    "KabschMinimizer",
    "SVDKabschMinimizer",
    "compute_rmsd_minimizer",
    "MatchCase",
    "ThreePointMatcher",
    "match_points",
    "AlignmentService",
    "map_rigid",
]
