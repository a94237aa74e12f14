"""Domain model for structure superposition results."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .rigid_transform import RigidTransform


@dataclass
class AlignmentResult:
    """Contains results from a rigid superposition."""

    rmsd: float
    matched_atoms: int
    transformation: Optional[RigidTransform]
    matched_pairs: List[Tuple[int, int]]
    rmsd_before: Optional[float] = None
