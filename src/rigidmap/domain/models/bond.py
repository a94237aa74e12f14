#!/usr/bin/env python3
# src/rigidmap/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Union


class BondOrderType(Enum):
    """Enumeration of bond orders, keyed by their integer code."""

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    QUADRUPLE = 4
    UNKNOWN = 100

    @classmethod
    def from_code(cls, code: Union[int, "BondOrderType"]) -> "BondOrderType":
        """
        Build a bond order from an integer code.

        Args:
            code: One of 1-4, the unknown sentinel 100, or a BondOrderType

        Returns:
            The matching BondOrderType

        Raises:
            ValueError: If the code is not a defined bond order
        """
        if isinstance(code, cls):
            return code
        if isinstance(code, bool) or not isinstance(code, Integral):
            raise ValueError(f"Bond order code must be an integer, got {code!r}")
        return cls(int(code))


@dataclass(frozen=True)
class Bond:
    """Represents a chemical bond between two atoms."""

    atom1_id: int
    atom2_id: int
    order: BondOrderType = BondOrderType.SINGLE

    def __post_init__(self):
        for name in ("atom1_id", "atom2_id"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"{name} must be an integer atom index, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        object.__setattr__(self, "order", BondOrderType.from_code(self.order))
