"""Data Generator - sample and synthetic restaurant locations."""
import numpy as np
import pandas as pd

SAMPLE_RESTAURANTS = [
    {"id": "r1", "name": "Mario's Italian Bistro", "lat": 40.7589, "lon": -73.9851, "cuisine": "Italian", "zone": "Manhattan"},
    {"id": "r2", "name": "Sakura Sushi", "lat": 40.7505, "lon": -73.9934, "cuisine": "Japanese", "zone": "Manhattan"},
    {"id": "r3", "name": "Le Petit Paris", "lat": 40.7614, "lon": -73.9776, "cuisine": "French", "zone": "Manhattan"},
    {"id": "r4", "name": "Spice Route", "lat": 40.7505, "lon": -73.9934, "cuisine": "Indian", "zone": "Manhattan"},
    {"id": "r5", "name": "Brooklyn Burger Co.", "lat": 40.6892, "lon": -73.9442, "cuisine": "American", "zone": "Brooklyn"},
    {"id": "r6", "name": "Pasta Palace", "lat": 40.7831, "lon": -73.9712, "cuisine": "Italian", "zone": "Manhattan"},
    {"id": "r7", "name": "Dragon Garden", "lat": 40.7589, "lon": -73.9851, "cuisine": "Chinese", "zone": "Manhattan"},
    {"id": "r8", "name": "Taco Libre", "lat": 40.6782, "lon": -73.9442, "cuisine": "Mexican", "zone": "Brooklyn"},
    {"id": "r9", "name": "Mediterranean Delight", "lat": 40.7505, "lon": -73.9934, "cuisine": "Mediterranean", "zone": "Manhattan"},
    {"id": "r10", "name": "BBQ Masters", "lat": 40.6892, "lon": -73.9442, "cuisine": "American", "zone": "Brooklyn"},
    {"id": "r11", "name": "Green Garden", "lat": 40.7831, "lon": -73.9712, "cuisine": "Vegetarian", "zone": "Manhattan"},
    {"id": "r12", "name": "Ocean Breeze", "lat": 40.7589, "lon": -73.9851, "cuisine": "Seafood", "zone": "Manhattan"},
    {"id": "r13", "name": "Curry House", "lat": 40.6782, "lon": -73.9442, "cuisine": "Indian", "zone": "Brooklyn"},
    {"id": "r14", "name": "Pizza Corner", "lat": 40.7505, "lon": -73.9934, "cuisine": "Italian", "zone": "Manhattan"},
    {"id": "r15", "name": "Golden Wok", "lat": 40.6892, "lon": -73.9442, "cuisine": "Chinese", "zone": "Brooklyn"},
]

# (min_lat, min_lon, max_lat, max_lon) around lower Manhattan and Brooklyn
DEFAULT_BOUNDS = (40.65, -74.02, 40.80, -73.92)
DEFAULT_CUISINES = ["Italian", "Japanese", "French", "Indian", "American", "Chinese", "Mexican"]


class DataGenerator:
    """Generates restaurant records for demos and tests."""

    def __init__(self, bounds=DEFAULT_BOUNDS, cuisines=None):
        self.bounds = bounds
        self.cuisines = cuisines or DEFAULT_CUISINES

    def sample(self):
        """Return the fixed sample dataset as a DataFrame."""
        return pd.DataFrame(SAMPLE_RESTAURANTS)

    def generate(self, n=100, seed=42, bounds=None):
        """
        Generate n random restaurant locations inside the bounding box.

        Args:
            n: Number of restaurants to generate
            seed: Random seed for reproducibility
            bounds: (min_lat, min_lon, max_lat, max_lon), defaults to the generator bounds

        Returns:
            DataFrame with id, name, lat, lon, cuisine columns
        """
        rng = np.random.default_rng(seed)
        min_lat, min_lon, max_lat, max_lon = bounds or self.bounds

        ids = np.arange(1, n + 1)
        df = pd.DataFrame({
            "id": [f"g{i}" for i in ids],
            "name": [f"Restaurant {i}" for i in ids],
            "lat": rng.uniform(min_lat, max_lat, size=n),
            "lon": rng.uniform(min_lon, max_lon, size=n),
            "cuisine": rng.choice(self.cuisines, size=n),
        })

        return df
