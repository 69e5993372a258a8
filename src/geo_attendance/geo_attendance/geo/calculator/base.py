from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import GeoPoint


class DistanceCalculator(ABC):
    """Calculator interface (Strategy Pattern for distance)."""

    @abstractmethod
    def distance(self, a: GeoPoint, b: GeoPoint) -> float:
        """Distance between two points in meters."""
        raise NotImplementedError
