"""Cluster model - represents a group of restaurants sharing a k-means index."""
from __future__ import annotations

from collections import Counter

from core.restaurant import Restaurant

UNKNOWN_CUISINE = "Unknown"


class Cluster:
    """A non-empty group of restaurants around a common centroid."""

    def __init__(self, index: int, center: tuple[float, float], color: str) -> None:
        self.index = index
        self.center = center
        self.color = color
        self.restaurants: list[Restaurant] = []

    @property
    def label(self) -> str:
        """Human facing name, numbered from 1."""
        return f"Cluster {self.index + 1}"

    def add_restaurant(self, restaurant: Restaurant) -> None:
        """Add a restaurant to this cluster."""
        self.restaurants.append(restaurant)

    def get_restaurant_count(self) -> int:
        return len(self.restaurants)

    def get_locations(self) -> list[tuple[float, float]]:
        """Return list of (lat, lon) tuples for members."""
        return [r.get_location() for r in self.restaurants]

    def get_cuisine_counts(self) -> dict[str, int]:
        """Count members per cuisine, most frequent first."""
        counts = Counter(r.cuisine or UNKNOWN_CUISINE for r in self.restaurants)
        return dict(counts.most_common())

    def get_dominant_cuisine(self) -> str | None:
        """Most frequent cuisine, ties resolved by first appearance."""
        counts = self.get_cuisine_counts()
        if not counts:
            return None
        return next(iter(counts))

    def get_stats(self) -> dict:
        """Return statistics about this cluster."""
        return {
            'index': self.index,
            'label': self.label,
            'color': self.color,
            'center': list(self.center),
            'restaurant_count': self.get_restaurant_count(),
            'cuisines': self.get_cuisine_counts(),
            'dominant_cuisine': self.get_dominant_cuisine(),
        }

    def to_dict(self) -> dict:
        return {
            'index': self.index,
            'center': list(self.center),
            'color': self.color,
            'restaurants': [
                {**r.to_dict(), 'cluster': self.index} for r in self.restaurants
            ],
        }

    def __repr__(self) -> str:
        return f"Cluster(index={self.index}, restaurants={len(self.restaurants)})"

    def __str__(self) -> str:
        return f"{self.label}: {len(self.restaurants)} restaurants"
