"""Interface for containers that expose mutable 3D coordinates."""

from abc import ABC, abstractmethod
import numpy as np


class CoordinateProvider(ABC):
    """Abstract base class for anything holding an ordered set of 3D points."""

    @abstractmethod
    def get_coordinates(self) -> np.ndarray:
        """
        Get the coordinates of all points.

        Returns:
            numpy array of shape (n_points, 3)
        """
        pass

    @abstractmethod
    def set_coordinates(self, coordinates: np.ndarray) -> None:
        """
        Replace the coordinates of all points.

        Args:
            coordinates: numpy array of shape (n_points, 3), same order as
                returned by get_coordinates
        """
        pass
