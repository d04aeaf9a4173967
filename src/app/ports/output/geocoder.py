from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import GeoPoint


class IGeocoder(ABC):
    """Port for turning a coordinate into a short human-readable place name."""

    @abstractmethod
    def reverse(self, point: GeoPoint) -> str | None:
        """Return a short name, or None when nothing useful is known."""
