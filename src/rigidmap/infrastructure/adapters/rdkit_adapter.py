"""Adapter between RDKit molecules and the Molecule domain model."""

from rdkit import Chem
from rdkit.Geometry import Point3D

from ...domain.models.atom import Atom
from ...domain.models.bond import Bond, BondOrderType
from ...domain.models.molecule import Molecule
from ...exceptions import DimensionMismatchError

_BOND_ORDERS = {
    Chem.BondType.SINGLE: BondOrderType.SINGLE,
    Chem.BondType.DOUBLE: BondOrderType.DOUBLE,
    Chem.BondType.TRIPLE: BondOrderType.TRIPLE,
    Chem.BondType.QUADRUPLE: BondOrderType.QUADRUPLE,
}


class RDKitAdapter:
    """Converts RDKit molecules with 3D conformers to and from Molecule."""

    def to_molecule(self, mol: Chem.Mol, conf_id: int = -1) -> Molecule:
        """
        Convert an RDKit molecule to a Molecule.

        Args:
            mol: RDKit molecule with at least one conformer
            conf_id: Conformer to read coordinates from

        Returns:
            Molecule with one Atom per RDKit atom; aromatic and other bond
            types without an integer order become BondOrderType.UNKNOWN

        Raises:
            ValueError: If the molecule has no conformer
        """
        if mol.GetNumConformers() == 0:
            raise ValueError("RDKit molecule has no conformer")
        positions = mol.GetConformer(conf_id).GetPositions()

        atoms = []
        for rdatom in mol.GetAtoms():
            idx = rdatom.GetIdx()
            info = rdatom.GetPDBResidueInfo()
            atoms.append(
                Atom(
                    atom_id=idx,
                    element=rdatom.GetSymbol(),
                    coordinates=tuple(float(c) for c in positions[idx]),
                    atom_name=info.GetName().strip() if info else "",
                    residue_name=info.GetResidueName().strip() if info else "",
                    residue_id=info.GetResidueNumber() if info else 0,
                    chain_id=(info.GetChainId() or "A") if info else "A",
                )
            )

        bonds = [
            Bond(
                bond.GetBeginAtomIdx(),
                bond.GetEndAtomIdx(),
                _BOND_ORDERS.get(bond.GetBondType(), BondOrderType.UNKNOWN),
            )
            for bond in mol.GetBonds()
        ]
        return Molecule(atoms, bonds)

    def write_coordinates(
        self, molecule: Molecule, mol: Chem.Mol, conf_id: int = -1
    ) -> Chem.Mol:
        """Copy molecule's coordinates into the given RDKit conformer."""
        if len(molecule) != mol.GetNumAtoms():
            raise DimensionMismatchError(
                f"Atom counts differ: {len(molecule)} != {mol.GetNumAtoms()}"
            )
        conformer = mol.GetConformer(conf_id)
        for i, (x, y, z) in enumerate(molecule.get_coordinates()):
            conformer.SetAtomPosition(i, Point3D(float(x), float(y), float(z)))
        return mol
