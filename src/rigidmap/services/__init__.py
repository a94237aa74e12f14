"""Superposition services."""

from .alignment_service import AlignmentService, map_rigid

__all__ = ["AlignmentService", "map_rigid"]
