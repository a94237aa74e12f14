#!/usr/bin/env python3
# src/rigidmap/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass
from typing import Tuple

HYDROGEN_ELEMENTS = frozenset({"H", "D", "T"})


@dataclass
class Atom:
    """Represents an atom in a molecular structure."""

    atom_id: int
    element: str
    coordinates: Tuple[float, float, float]
    atom_name: str = ""
    residue_name: str = ""
    residue_id: int = 0
    chain_id: str = "A"

    @property
    def is_hydrogen(self) -> bool:
        """Whether the atom is a hydrogen isotope."""
        return self.element.strip().upper() in HYDROGEN_ELEMENTS


def is_heavy_atom(atom: Atom) -> bool:
    """Default filter used for heavy-atom-only superposition."""
    return not atom.is_hydrogen
