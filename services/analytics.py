"""Analytics Service - summary statistics and insights for the dashboard."""
from collections import Counter

from core.cluster import UNKNOWN_CUISINE

MIN_RESTAURANTS_FOR_CLUSTERING = 10


class AnalyticsService:
    """Derives counts, spreads and recommendations from restaurants and clusters."""

    def __init__(self, config):
        self.config = config

    @staticmethod
    def cuisine_stats(restaurants):
        """Count restaurants per cuisine, most frequent first."""
        counts = Counter(r.cuisine or UNKNOWN_CUISINE for r in restaurants)
        return dict(counts.most_common())

    @staticmethod
    def zone_stats(restaurants):
        """Count restaurants per known zone, most frequent first."""
        counts = Counter(r.zone for r in restaurants if r.zone)
        return dict(counts.most_common())

    @staticmethod
    def geographic_spread(restaurants):
        """Latitude and longitude range covered, None when there is nothing to measure."""
        if not restaurants:
            return None
        lats = [r.lat for r in restaurants]
        lons = [r.lon for r in restaurants]
        return {
            'min_lat': min(lats), 'max_lat': max(lats),
            'min_lon': min(lons), 'max_lon': max(lons),
            'lat_range': max(lats) - min(lats),
            'lon_range': max(lons) - min(lons),
        }

    @staticmethod
    def average_cluster_size(clusters):
        if not clusters:
            return 0.0
        return sum(c.get_restaurant_count() for c in clusters) / len(clusters)

    @staticmethod
    def cluster_summaries(clusters):
        return [c.get_stats() for c in clusters]

    @staticmethod
    def data_quality(restaurants):
        """Percentage of restaurants carrying each optional attribute."""
        total = len(restaurants)
        if total == 0:
            return {'total': 0, 'names': 0, 'coordinates': 0, 'cuisine': 0, 'zone': 0}
        return {
            'total': total,
            'names': 100,
            'coordinates': 100,
            'cuisine': round(100 * sum(1 for r in restaurants if r.cuisine) / total),
            'zone': round(100 * sum(1 for r in restaurants if r.zone) / total),
        }

    def recommendations(self, restaurants, clusters):
        """Suggestions for improving the dataset or the cluster count."""
        tips = []
        missing_cuisine = sum(1 for r in restaurants if not r.cuisine)
        missing_zone = sum(1 for r in restaurants if not r.zone)

        if missing_cuisine:
            tips.append(f"Consider adding cuisine data for {missing_cuisine} restaurants")
        if missing_zone:
            tips.append(f"Zone information missing for {missing_zone} restaurants")
        if len(restaurants) < MIN_RESTAURANTS_FOR_CLUSTERING:
            tips.append("More data points would improve clustering accuracy")
        if any(c.get_restaurant_count() < 2 for c in clusters):
            tips.append("Consider reducing cluster count for better grouping")
        return tips

    def insights(self, restaurants, clusters):
        """Headline findings shown on the insights tab."""
        cuisines = self.cuisine_stats(restaurants)
        zones = self.zone_stats(restaurants)

        top_cuisine = None
        if cuisines:
            name, count = next(iter(cuisines.items()))
            top_cuisine = {'name': name, 'count': count}

        densest_zone = None
        if zones:
            name, count = next(iter(zones.items()))
            densest_zone = {'name': name, 'count': count}

        return {
            'most_popular_cuisine': top_cuisine,
            'geographic_spread': self.geographic_spread(restaurants),
            'densest_zone': densest_zone,
            'average_cluster_size': round(self.average_cluster_size(clusters), 1),
            'cluster_count': len(clusters),
        }

    def summary(self, restaurants, clusters):
        """Everything the statistics view needs in one payload."""
        return {
            'restaurant_count': len(restaurants),
            'cuisine_stats': self.cuisine_stats(restaurants),
            'zone_stats': self.zone_stats(restaurants),
            'clusters': self.cluster_summaries(clusters),
            'insights': self.insights(restaurants, clusters),
            'data_quality': self.data_quality(restaurants),
            'recommendations': self.recommendations(restaurants, clusters),
        }
