import pytest

from config import Config
from core.restaurant import Restaurant


@pytest.fixture
def config(tmp_path):
    """Config pointing output at a temp dir and clustering at a fixed seed."""
    class TestConfig(Config):
        OUTPUT_DIR = str(tmp_path / "maps")
        DATA_FILE = None
        RANDOM_SEED = 0
    return TestConfig


@pytest.fixture
def make_restaurants():
    """Build restaurants from (lat, lon) pairs."""
    def _make(points, cuisines=None, zones=None):
        restaurants = []
        for i, (lat, lon) in enumerate(points):
            restaurants.append(Restaurant(
                id=f"r{i}",
                name=f"Place {i}",
                lat=lat,
                lon=lon,
                cuisine=cuisines[i] if cuisines else None,
                zone=zones[i] if zones else None
            ))
        return restaurants
    return _make


@pytest.fixture
def two_groups(make_restaurants):
    return make_restaurants(
        [(0, 0), (0, 1), (10, 10), (10, 11)],
        cuisines=["Thai", "Thai", "Italian", None],
        zones=["West", "West", "East", None],
    )
