"""Adapters for external libraries."""

from .rdkit_adapter import RDKitAdapter
from .biopython_adapter import BiopythonAdapter

__all__ = [
    "RDKitAdapter",
    "BiopythonAdapter",
]
