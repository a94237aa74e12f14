"""Interface for RMSD-minimizing superposition strategies."""

from abc import ABC, abstractmethod

from ..models.atom_bijection import AtomBijection
from ..models.rigid_transform import RigidTransform


class RMSDMinimizer(ABC):
    """Abstract base class for least-squares rigid fitting strategies."""

    @abstractmethod
    def compute(self, bijection: AtomBijection) -> RigidTransform:
        """
        Compute the transform that best maps bijection.source onto bijection.target.

        Args:
            bijection: Index-aligned source and target points

        Returns:
            RigidTransform minimizing the RMSD after application to the source
        """
        pass

    def fit(self, source, target) -> RigidTransform:
        """Shortcut for compute() on two raw point arrays."""
        return self.compute(AtomBijection(source, target))
