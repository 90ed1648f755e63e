"""Dashboard Planner - main orchestrator for loading, clustering and reporting."""
from services.analytics import AnalyticsService
from services.clustering import ClusteringService
from services.dataset import ALL, DatasetService
from services.visualization import VisualizationService


class DashboardPlanner:
    """Main orchestrator that coordinates all services for the dashboard."""

    def __init__(self, config):
        self.config = config

        # Data containers
        self.restaurants = []
        self.filtered_restaurants = []
        self.clusters = []

        # Services
        self.dataset_service = DatasetService(config)
        self.clustering_service = ClusteringService(config)
        self.analytics_service = AnalyticsService(config)
        self.visualization_service = VisualizationService(config)

        # State
        self.stats = {}

    def load_restaurants(self, path=None):
        """Load restaurants from a CSV file or the sample set."""
        source = path or self.config.DATA_FILE or "sample data"
        print(f"[1] Loading restaurants from {source}...")
        self.restaurants = self.dataset_service.load(path)
        self.filtered_restaurants = list(self.restaurants)
        print(f"    OK: {len(self.restaurants)} restaurants loaded")

        return self.restaurants

    def set_restaurants(self, restaurants):
        """Replace the working dataset, clearing derived state."""
        self.restaurants = list(restaurants)
        self.filtered_restaurants = list(self.restaurants)
        self.clusters = []
        self.stats = {}

    def apply_filters(self, cuisine=ALL, zone=ALL):
        """Restrict the displayed restaurants by cuisine and zone."""
        print(f"[2] Filtering (cuisine={cuisine or ALL}, zone={zone or ALL})...")
        self.filtered_restaurants = self.dataset_service.filter_restaurants(
            self.restaurants, cuisine=cuisine, zone=zone
        )
        print(f"    OK: {len(self.filtered_restaurants)}/{len(self.restaurants)} restaurants shown")

        return self.filtered_restaurants

    def create_clusters(self, num_clusters=None, random_state=None):
        """Cluster the whole dataset into groups."""
        if num_clusters is None:
            num_clusters = self.config.DEFAULT_CLUSTER_COUNT
        if random_state is None:
            random_state = self.config.RANDOM_SEED
        print(f"[3] Creating {num_clusters} clusters...")

        self.clusters = self.clustering_service.cluster_restaurants(
            self.restaurants,
            num_clusters,
            random_state=random_state
        )
        print(f"    OK: {len(self.clusters)} non-empty clusters created")

        return self.clusters

    def generate_maps(self):
        """Write HTML maps for the filtered restaurants and the clusters."""
        print("[4] Generating maps...")
        files = [
            self.visualization_service.create_restaurants_map(self.filtered_restaurants),
            self.visualization_service.create_clusters_map(self.clusters, self.filtered_restaurants),
        ]
        print(f"    OK: {files[0]} (restaurants)")
        print(f"    OK: {files[1]} (clusters)")

        return files

    def calculate_statistics(self):
        """Calculate summary statistics."""
        self.stats = self.analytics_service.summary(self.filtered_restaurants, self.clusters)
        # Completeness is judged on the full dataset, not the filtered view
        self.stats['data_quality'] = self.analytics_service.data_quality(self.restaurants)
        self.stats['recommendations'] = self.analytics_service.recommendations(
            self.restaurants, self.clusters
        )
        return self.stats

    def print_summary(self):
        """Print execution summary."""
        stats = self.calculate_statistics()
        insights = stats['insights']

        print("\n" + "=" * 50)
        print("                    SUMMARY")
        print("=" * 50)
        print(f"✓ Restaurants: {stats['restaurant_count']}")
        print(f"✓ Clusters: {insights['cluster_count']}")
        print(f"✓ Average Cluster Size: {insights['average_cluster_size']}")
        top = insights['most_popular_cuisine']
        if top:
            print(f"✓ Most Popular Cuisine: {top['name']} ({top['count']} restaurants)")
        zone = insights['densest_zone']
        if zone:
            print(f"✓ Densest Zone: {zone['name']} ({zone['count']} restaurants)")
        for cluster in stats['clusters']:
            print(f"   {cluster['label']}: {cluster['restaurant_count']} restaurants, "
                  f"mostly {cluster['dominant_cuisine']}")
        for tip in stats['recommendations']:
            print(f"• {tip}")
        print("=" * 50 + "\n")

    def run(self, path=None, num_clusters=None, random_state=None, cuisine=ALL, zone=ALL):
        """Execute the full dashboard pipeline."""
        print("\n" + "=" * 50)
        print("        RESTAURANT CLUSTER MAP")
        print("=" * 50 + "\n")

        self.load_restaurants(path)
        self.apply_filters(cuisine=cuisine, zone=zone)
        self.create_clusters(num_clusters, random_state=random_state)
        self.generate_maps()
        self.print_summary()

        return self.stats
