"""Adapter between Biopython PDB atoms and the Molecule domain model."""

from typing import List
import numpy as np
from Bio.PDB.Atom import Atom as PDBAtom

from ...domain.models.atom import Atom
from ...domain.models.molecule import Molecule
from ...exceptions import DimensionMismatchError


class BiopythonAdapter:
    """Converts lists of Bio.PDB atoms to and from Molecule."""

    def to_molecule(self, pdb_atoms: List[PDBAtom]) -> Molecule:
        """
        Convert Bio.PDB atoms to a Molecule without bonds.

        Args:
            pdb_atoms: Atoms, e.g. list(structure.get_atoms())

        Returns:
            Molecule whose atom i corresponds to pdb_atoms[i]
        """
        atoms = []
        for i, pdb_atom in enumerate(pdb_atoms):
            residue = pdb_atom.get_parent()
            chain = residue.get_parent() if residue is not None else None
            atoms.append(
                Atom(
                    atom_id=i,
                    element=pdb_atom.element or pdb_atom.get_name()[:1],
                    coordinates=tuple(float(c) for c in pdb_atom.coord),
                    atom_name=pdb_atom.get_name(),
                    residue_name=residue.get_resname() if residue is not None else "",
                    residue_id=residue.id[1] if residue is not None else 0,
                    chain_id=chain.id if chain is not None else "A",
                )
            )
        return Molecule(atoms)

    def write_coordinates(self, molecule: Molecule, pdb_atoms: List[PDBAtom]) -> None:
        """Copy molecule's coordinates back onto the Bio.PDB atoms."""
        if len(molecule) != len(pdb_atoms):
            raise DimensionMismatchError(
                f"Atom counts differ: {len(molecule)} != {len(pdb_atoms)}"
            )
        for pdb_atom, xyz in zip(pdb_atoms, molecule.get_coordinates()):
            pdb_atom.set_coord(np.asarray(xyz, dtype=np.float32))
