"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondOrderType
from .molecule import Molecule
from .rigid_transform import RigidTransform
from .atom_bijection import AtomBijection
from .alignment_result import AlignmentResult

__all__ = [
    "Atom",
    "Bond",
    "BondOrderType",
    "Molecule",
    "RigidTransform",
    "AtomBijection",
    "AlignmentResult",
]
