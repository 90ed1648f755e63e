"""
Configuration settings for the Restaurant Cluster Map.

This module centralizes all configuration parameters for data loading,
clustering, analytics and map rendering.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> int | None:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


class Config:
    """Central configuration for the restaurant dashboard."""

    # =========================================================================
    # Clustering
    # =========================================================================
    DEFAULT_CLUSTER_COUNT: int = int(os.getenv("DEFAULT_CLUSTER_COUNT", "5"))
    CLUSTER_COUNT_OPTIONS: list[int] = [3, 4, 5, 6, 7, 8]  # Offered in the UI, any k >= 1 is accepted
    MAX_ITERATIONS: int = int(os.getenv("MAX_ITERATIONS", "100"))

    # None means a fresh time-seeded draw on every run
    RANDOM_SEED: int | None = _optional_int("RANDOM_SEED")

    # =========================================================================
    # Colors
    # =========================================================================
    CLUSTER_COLORS: list[str] = [
        "#e91e63", "#9c27b0", "#3f51b5", "#00bcd4", "#4caf50", "#ff9800", "#f44336"
    ]
    CUISINE_COLORS: list[str] = [
        "#e91e63", "#9c27b0", "#3f51b5", "#00bcd4", "#4caf50",
        "#ff9800", "#f44336", "#795548", "#607d8b", "#9e9e9e"
    ]

    # =========================================================================
    # Map Rendering
    # =========================================================================
    DEFAULT_MAP_CENTER: tuple[float, float] = (40.7484, -73.9857)  # Used when there is nothing to plot
    MAP_ZOOM_START: int = 12

    # =========================================================================
    # Paths
    # =========================================================================
    OUTPUT_DIR: str = os.getenv("OUTPUT_DIR", "maps")
    DATA_FILE: str | None = os.getenv("DATA_FILE") or None  # Local CSV loaded at startup, sample data otherwise

    # =========================================================================
    # Runtime
    # =========================================================================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")
