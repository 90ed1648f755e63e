"""Clustering Service - groups restaurants into geographic clusters."""
import logging

import numpy as np

from core.cluster import Cluster
from utils.kmeans import KMeansClusterer, validate_cluster_count

logger = logging.getLogger(__name__)


def cluster_color(index, palette):
    """Palette color for a cluster index, wrapping around the palette."""
    return palette[index % len(palette)]


class ClusteringService:
    """Service for clustering restaurants into groups."""

    def __init__(self, config):
        self.config = config
        self.palette = list(config.CLUSTER_COLORS)
        self.max_iter = getattr(config, 'MAX_ITERATIONS', 100)
        self.clusterer = None

    def cluster_restaurants(self, restaurants, num_clusters, random_state=None, init="random"):
        """
        Cluster restaurants into groups.

        Args:
            restaurants: List of Restaurant objects
            num_clusters: Number of clusters to create
            random_state: Seed or numpy Generator, None for a fresh draw
            init: "random" or an explicit (num_clusters, 2) array of centroids

        Returns:
            List of non-empty Cluster objects ordered by index
        """
        num_clusters = validate_cluster_count(num_clusters)
        if not restaurants:
            return []

        self.clusterer = KMeansClusterer(
            n_clusters=num_clusters,
            random_state=random_state,
            max_iter=self.max_iter,
            init=init
        )
        coordinates = np.array([[r.lat, r.lon] for r in restaurants], dtype=float)
        self.clusterer.fit(coordinates)

        clusters = {}
        for restaurant, cluster_id in zip(restaurants, self.clusterer.labels_):
            cluster_id = int(cluster_id)
            if cluster_id not in clusters:
                center = tuple(float(v) for v in self.clusterer.cluster_centers_[cluster_id])
                clusters[cluster_id] = Cluster(
                    index=cluster_id,
                    center=center,
                    color=cluster_color(cluster_id, self.palette)
                )
            clusters[cluster_id].add_restaurant(restaurant)

        logger.info(
            "Clustered %d restaurants into %d non-empty cluster(s) (k=%d)",
            len(restaurants), len(clusters), num_clusters
        )
        return [clusters[i] for i in sorted(clusters)]
