#!/usr/bin/env python3
# src/rigidmap/domain/models/molecule.py

"""
Domain model representing a molecular structure as a set of atoms and bonds.
"""

from typing import Callable, List, Optional
import numpy as np

from ..interfaces.coordinate_provider import CoordinateProvider
from ...exceptions import DimensionMismatchError
from .atom import Atom, is_heavy_atom
from .bond import Bond


class Molecule(CoordinateProvider):
    """Atoms and bonds of a single molecular structure."""

    def __init__(self, atoms: List[Atom], bonds: Optional[List[Bond]] = None):
        """
        Initialize a Molecule.

        Args:
            atoms: List of Atom objects
            bonds: List of Bond objects indexing into atoms
        """
        self.atoms = atoms
        self.bonds = bonds or []

    def __len__(self) -> int:
        return len(self.atoms)

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return np.array(
            [atom.coordinates for atom in self.atoms], dtype=np.float64
        ).reshape(-1, 3)

    def set_coordinates(self, coordinates: np.ndarray) -> None:
        coordinates = np.asarray(coordinates, dtype=np.float64)
        if coordinates.shape != (len(self.atoms), 3):
            raise DimensionMismatchError(
                f"Expected coordinates of shape ({len(self.atoms)}, 3), "
                f"got {coordinates.shape}"
            )
        for atom, xyz in zip(self.atoms, coordinates):
            atom.coordinates = (float(xyz[0]), float(xyz[1]), float(xyz[2]))

    def select(self, atom_filter: Callable[[Atom], bool]) -> List[int]:
        """Indices of the atoms accepted by atom_filter."""
        return [i for i, atom in enumerate(self.atoms) if atom_filter(atom)]

    def heavy_atoms(self) -> List[Atom]:
        """All non-hydrogen atoms."""
        return [atom for atom in self.atoms if is_heavy_atom(atom)]
