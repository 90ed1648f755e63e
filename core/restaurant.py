"""Restaurant model - a geo-located point fed to the clustering engine."""
from __future__ import annotations


class Restaurant:
    """A restaurant with a geographic location and optional labels."""

    def __init__(self, id: str, lat: float, lon: float, name: str | None = None,
                 cuisine: str | None = None, zone: str | None = None) -> None:
        self.id = id
        self.lat = lat
        self.lon = lon
        self.name = name or f"Restaurant {id}"
        self.cuisine = cuisine
        self.zone = zone

    def get_location(self) -> tuple[float, float]:
        return (self.lat, self.lon)

    def to_dict(self) -> dict:
        return {
            'id': self.id, 'name': self.name, 'lat': self.lat, 'lon': self.lon,
            'cuisine': self.cuisine, 'zone': self.zone
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Restaurant):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Restaurant(id={self.id!r}, name={self.name!r})"
