"""Service for rigid superposition of molecular structures."""

import logging
from typing import Callable, Optional, Sequence

from ..domain.geometry import compute_rmsd, rigid_transform
from ..domain.implementations.kabsch_minimizer import KabschMinimizer
from ..domain.implementations.three_point_matcher import ThreePointMatcher
from ..domain.interfaces.rmsd_minimizer import RMSDMinimizer
from ..domain.models.alignment_result import AlignmentResult
from ..domain.models.atom import Atom, is_heavy_atom
from ..domain.models.atom_bijection import AtomBijection
from ..domain.models.molecule import Molecule
from ..exceptions import DimensionMismatchError

AtomFilter = Callable[[Atom], bool]


def _resolve_filter(
    heavy_atoms_only: bool, atom_filter: Optional[AtomFilter]
) -> Optional[AtomFilter]:
    if atom_filter and heavy_atoms_only:
        return lambda atom: is_heavy_atom(atom) and atom_filter(atom)
    if heavy_atoms_only:
        return is_heavy_atom
    return atom_filter


class AlignmentService:
    """Service for superimposing one structure onto another."""

    def __init__(
        self,
        minimizer: Optional[RMSDMinimizer] = None,
        matcher: Optional[ThreePointMatcher] = None,
    ):
        """Initialize service with fitting strategies."""
        self._minimizer = minimizer or KabschMinimizer()
        self._matcher = matcher or ThreePointMatcher()
        self.logger = logging.getLogger(__name__)

    def superimpose(
        self,
        mobile: Molecule,
        reference: Molecule,
        heavy_atoms_only: bool = False,
        atom_filter: Optional[AtomFilter] = None,
    ) -> AlignmentResult:
        """
        Move mobile onto reference by minimizing RMSD, in place.

        Atoms are paired by index. Only atoms passing the filter take part in
        the fit, but the whole mobile structure is transformed.

        Args:
            mobile: Structure to move
            reference: Structure to fit onto
            heavy_atoms_only: Leave hydrogens out of the fit
            atom_filter: Additional predicate selecting the fitted atoms

        Returns:
            AlignmentResult with RMSD over the fitted atoms before and after

        Raises:
            DimensionMismatchError: If the structures differ in atom count or
                no atom passes the filter
        """
        bijection = AtomBijection.trivial(
            mobile, reference, _resolve_filter(heavy_atoms_only, atom_filter)
        )
        if len(bijection) == 0:
            raise DimensionMismatchError("No atoms selected for superposition")

        rmsd_before = bijection.rmsd()
        transform = self._minimizer.compute(bijection)
        rigid_transform(mobile, transform)
        rmsd = compute_rmsd(transform.apply(bijection.source), bijection.target)

        self.logger.info(
            f"Superimposed {len(bijection)} atoms: RMSD {rmsd_before:.3f} -> {rmsd:.3f}"
        )
        return AlignmentResult(
            rmsd=rmsd,
            matched_atoms=len(bijection),
            transformation=transform,
            matched_pairs=bijection.matched_pairs,
            rmsd_before=rmsd_before,
        )

    def match_three_points(
        self,
        mobile: Molecule,
        reference: Molecule,
        mobile_indices: Sequence[int],
        reference_indices: Optional[Sequence[int]] = None,
    ) -> AlignmentResult:
        """
        Move mobile so that three of its atoms line up with three reference atoms.

        Args:
            mobile: Structure to move, transformed in place
            reference: Structure providing the target triple
            mobile_indices: Indices of the three mobile atoms (w1, w2, w3)
            reference_indices: Indices of the three reference atoms; defaults
                to mobile_indices

        Returns:
            AlignmentResult with RMSD over the six matched atoms
        """
        if reference_indices is None:
            reference_indices = mobile_indices
        if len(mobile_indices) != 3 or len(reference_indices) != 3:
            raise DimensionMismatchError("Three-point matching needs exactly 3 atoms")

        pairs = list(zip(mobile_indices, reference_indices))
        bijection = AtomBijection.from_pairs(mobile, reference, pairs)
        rmsd_before = bijection.rmsd()

        result = self._matcher.match(*bijection.source, *bijection.target)
        self.logger.debug(
            f"Three-point match: {result.axis_case.value}, "
            f"{result.plane_case.value if result.plane_case else 'no plane stage'}"
        )
        rigid_transform(mobile, result.transform)

        return AlignmentResult(
            rmsd=compute_rmsd(result.transform.apply(bijection.source), bijection.target),
            matched_atoms=3,
            transformation=result.transform,
            matched_pairs=pairs,
            rmsd_before=rmsd_before,
        )


def map_rigid(
    mol_a: Molecule,
    mol_b: Molecule,
    heavy_atoms_only: bool = False,
    atom_filter: Optional[AtomFilter] = None,
    minimizer: Optional[RMSDMinimizer] = None,
) -> Molecule:
    """Superimpose mol_a onto mol_b in place and return mol_a."""
    AlignmentService(minimizer=minimizer).superimpose(
        mol_a, mol_b, heavy_atoms_only=heavy_atoms_only, atom_filter=atom_filter
    )
    return mol_a
