"""KMeans Clusterer - Lloyd's algorithm over (lat, lon) coordinates."""
import logging
import numbers

import numpy as np

from core.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100


def validate_cluster_count(n_clusters):
    """Reject anything that is not a positive integer."""
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, numbers.Integral):
        raise InvalidParameterError(f"Cluster count must be an integer, got {n_clusters!r}")
    if n_clusters <= 0:
        raise InvalidParameterError(f"Cluster count must be positive, got {n_clusters}")
    return int(n_clusters)


class KMeansClusterer:
    """
    KMeans over a flat lat/lon plane.

    Centroids start uniformly at random inside the bounding box of the data
    (or at explicit positions when ``init`` is an array). Each iteration
    assigns every point to its nearest centroid, lowest index winning exact
    ties, and stops once no assignment changes. Centroids left without
    members keep their previous position.
    """

    def __init__(self, n_clusters=5, random_state=None, max_iter=MAX_ITERATIONS, init="random"):
        self.n_clusters = validate_cluster_count(n_clusters)
        if isinstance(max_iter, bool) or not isinstance(max_iter, numbers.Integral) or max_iter <= 0:
            raise InvalidParameterError(f"max_iter must be a positive integer, got {max_iter!r}")
        self.max_iter = int(max_iter)
        self.random_state = random_state
        self.init = init
        self.cluster_centers_ = None
        self.labels_ = None
        self.n_iter_ = 0
        self.converged_ = False

    def _validate_coordinates(self, coordinates):
        coords = np.asarray(coordinates, dtype=float)
        if coords.size == 0:
            return coords.reshape(0, 2)
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise InvalidParameterError(f"Coordinates must have shape (n, 2), got {coords.shape}")
        if not np.all(np.isfinite(coords)):
            raise InvalidParameterError("Coordinates must be finite numbers")
        return coords

    def _initial_centroids(self, coords):
        if isinstance(self.init, str):
            if self.init != "random":
                raise InvalidParameterError(f"Unknown init method: {self.init!r}")
            rng = np.random.default_rng(self.random_state)
            low = coords.min(axis=0)
            high = coords.max(axis=0)
            return rng.uniform(low, high, size=(self.n_clusters, 2))

        centroids = np.array(self.init, dtype=float)
        if centroids.shape != (self.n_clusters, 2):
            raise InvalidParameterError(
                f"init must have shape ({self.n_clusters}, 2), got {centroids.shape}"
            )
        if not np.all(np.isfinite(centroids)):
            raise InvalidParameterError("init centroids must be finite numbers")
        return centroids

    @staticmethod
    def _assign(coords, centroids):
        # argmin returns the first minimum, so equal distances keep the lower index
        diff = coords[:, np.newaxis, :] - centroids[np.newaxis, :, :]
        distances = np.sqrt((diff ** 2).sum(axis=2))
        return distances.argmin(axis=1)

    def _update(self, coords, labels, centroids):
        for i in range(self.n_clusters):
            members = coords[labels == i]
            if len(members) > 0:
                centroids[i] = members.mean(axis=0)

    def fit(self, coordinates):
        """
        Fit KMeans model to coordinates.

        Args:
            coordinates: Array of shape (n_samples, 2) with [lat, lon]

        Returns:
            self
        """
        coords = self._validate_coordinates(coordinates)
        self.converged_ = False
        self.n_iter_ = 0

        if len(coords) == 0:
            self.labels_ = np.zeros(0, dtype=int)
            self.cluster_centers_ = np.empty((0, 2))
            self.converged_ = True
            return self

        centroids = self._initial_centroids(coords)
        labels = np.zeros(len(coords), dtype=int)

        while self.n_iter_ < self.max_iter:
            new_labels = self._assign(coords, centroids)
            if np.array_equal(new_labels, labels):
                self.converged_ = True
                break
            labels = new_labels
            self._update(coords, labels, centroids)
            self.n_iter_ += 1

        # Convergence on the very first pass leaves the random draw in place
        self._update(coords, labels, centroids)

        if self.converged_:
            logger.debug("KMeans converged after %d iteration(s)", self.n_iter_)
        else:
            logger.debug("KMeans stopped at the %d iteration limit", self.max_iter)

        self.labels_ = labels
        self.cluster_centers_ = centroids
        return self

    def fit_predict(self, coordinates):
        return self.fit(coordinates).labels_
