#!/usr/bin/env python3
# src/rigidmap/domain/models/atom_bijection.py

"""
Domain model for an index-aligned correspondence between two point sets.
"""

from typing import Callable, List, Optional, Sequence, Tuple
import numpy as np

from ...exceptions import DimensionMismatchError
from .atom import Atom
from .molecule import Molecule


def as_points(points, name: str = "points") -> np.ndarray:
    """Convert array-like input into a float64 array of shape (n, 3)."""
    array = np.array(points, dtype=np.float64)
    if array.size == 0:
        return array.reshape(0, 3)
    if array.ndim == 1 and array.shape[0] == 3:
        array = array.reshape(1, 3)
    if array.ndim != 2 or array.shape[1] != 3:
        raise DimensionMismatchError(
            f"{name} must have shape (n, 3), got {array.shape}"
        )
    return array


class AtomBijection:
    """Pairs source[i] with target[i] for two equally long point sets."""

    def __init__(
        self,
        source,
        target,
        matched_pairs: Optional[List[Tuple[int, int]]] = None,
    ):
        """
        Initialize an AtomBijection.

        Args:
            source: Array-like of shape (n, 3), the points to be moved
            target: Array-like of shape (n, 3), the points to fit onto
            matched_pairs: Index pairs (source_idx, target_idx) the points came
                from; defaults to (i, i)

        Raises:
            DimensionMismatchError: If the point sets differ in length
        """
        self.source = as_points(source, "source")
        self.target = as_points(target, "target")
        if len(self.source) != len(self.target):
            raise DimensionMismatchError(
                f"Point sets differ in length: {len(self.source)} != {len(self.target)}"
            )
        if matched_pairs is None:
            matched_pairs = [(i, i) for i in range(len(self.source))]
        self.matched_pairs = list(matched_pairs)

    @classmethod
    def from_pairs(
        cls,
        mol_a: Molecule,
        mol_b: Molecule,
        pairs: Sequence[Tuple[int, int]],
    ) -> "AtomBijection":
        """Build a bijection from explicit (index_in_a, index_in_b) pairs."""
        coords_a = mol_a.get_coordinates()
        coords_b = mol_b.get_coordinates()
        pairs = list(pairs)
        return cls(
            [coords_a[i] for i, _ in pairs],
            [coords_b[j] for _, j in pairs],
            matched_pairs=pairs,
        )

    @classmethod
    def trivial(
        cls,
        mol_a: Molecule,
        mol_b: Molecule,
        atom_filter: Optional[Callable[[Atom], bool]] = None,
    ) -> "AtomBijection":
        """
        Pair atom i of mol_a with atom i of mol_b.

        Args:
            mol_a: Molecule providing the source points
            mol_b: Molecule providing the target points
            atom_filter: Predicate over mol_a's atoms; rejected atoms are left
                out of the correspondence

        Raises:
            DimensionMismatchError: If the molecules differ in atom count
        """
        if len(mol_a) != len(mol_b):
            raise DimensionMismatchError(
                f"Molecules differ in atom count: {len(mol_a)} != {len(mol_b)}"
            )
        indices = (
            mol_a.select(atom_filter) if atom_filter else list(range(len(mol_a)))
        )
        return cls.from_pairs(mol_a, mol_b, [(i, i) for i in indices])

    def __len__(self) -> int:
        return len(self.source)

    def rmsd(self) -> float:
        """Unfitted RMSD between the paired points."""
        from ..geometry import compute_rmsd

        return compute_rmsd(self.source, self.target)
