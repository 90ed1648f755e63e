"""Visualization Service - generates HTML maps for restaurants and clusters."""
import html
import os

import folium


class VisualizationService:
    """Service for creating Folium map visualizations."""

    def __init__(self, config):
        self.config = config
        self.output_dir = config.OUTPUT_DIR
        self.default_center = config.DEFAULT_MAP_CENTER
        self.zoom_start = config.MAP_ZOOM_START
        self.cuisine_palette = list(config.CUISINE_COLORS)

    def _get_cuisine_colors(self, restaurants):
        """Assign palette colors to cuisines in order of first appearance."""
        colors = {}
        for restaurant in restaurants:
            cuisine = restaurant.cuisine or "Unknown"
            if cuisine not in colors:
                colors[cuisine] = self.cuisine_palette[len(colors) % len(self.cuisine_palette)]
        return colors

    def _base_map(self, restaurants):
        if restaurants:
            avg_lat = sum(r.lat for r in restaurants) / len(restaurants)
            avg_lon = sum(r.lon for r in restaurants) / len(restaurants)
            location = [avg_lat, avg_lon]
        else:
            location = list(self.default_center)
        return folium.Map(location=location, zoom_start=self.zoom_start)

    @staticmethod
    def _popup(restaurant, cluster=None):
        lines = [f"<b>{html.escape(restaurant.name)}</b>"]
        if restaurant.cuisine:
            lines.append(f"<b>Cuisine:</b> {html.escape(restaurant.cuisine)}")
        if restaurant.zone:
            lines.append(f"<b>Zone:</b> {html.escape(restaurant.zone)}")
        if cluster is not None:
            lines.append(f"<b>Cluster:</b> {cluster.index + 1}")
        lines.append(f"{restaurant.lat:.4f}, {restaurant.lon:.4f}")
        return "<br>".join(lines)

    def _save(self, m, filename):
        os.makedirs(self.output_dir, exist_ok=True)
        path = os.path.join(self.output_dir, filename)
        m.save(path)
        return path

    def build_restaurants_map(self, restaurants):
        """Map of restaurants colored by cuisine."""
        m = self._base_map(restaurants)
        colors = self._get_cuisine_colors(restaurants)

        for restaurant in restaurants:
            color = colors[restaurant.cuisine or "Unknown"]
            folium.CircleMarker(
                location=restaurant.get_location(),
                radius=6,
                color=color,
                fill=True,
                fill_opacity=0.8,
                popup=self._popup(restaurant),
                tooltip=restaurant.name
            ).add_to(m)

        return m

    def build_clusters_map(self, clusters, restaurants=None):
        """
        Map of cluster centroids and their members.

        Args:
            clusters: List of Cluster objects
            restaurants: Optional restaurants to show; members outside it are skipped

        Returns:
            folium.Map
        """
        visible_ids = None
        if restaurants is not None:
            visible_ids = {r.id for r in restaurants}

        all_restaurants = [r for c in clusters for r in c.restaurants]
        m = self._base_map(all_restaurants)

        for cluster in clusters:
            folium.Marker(
                location=list(cluster.center),
                popup=f"<b>{cluster.label}</b><br>"
                      f"{cluster.get_restaurant_count()} restaurants<br>"
                      f"Center: {cluster.center[0]:.4f}, {cluster.center[1]:.4f}",
                icon=folium.DivIcon(html=f"""
                    <div style="background: {cluster.color}; color: white;
                         width: 26px; height: 26px; border-radius: 50%;
                         text-align: center; line-height: 26px; font-weight: bold;
                         border: 3px solid white;
                         box-shadow: 0 3px 6px rgba(0,0,0,0.4);">
                        {cluster.index + 1}
                    </div>
                """)
            ).add_to(m)

            for restaurant in cluster.restaurants:
                if visible_ids is not None and restaurant.id not in visible_ids:
                    continue
                folium.CircleMarker(
                    location=restaurant.get_location(),
                    radius=5,
                    color=cluster.color,
                    fill=True,
                    fill_opacity=0.7,
                    popup=self._popup(restaurant, cluster),
                    tooltip=restaurant.name
                ).add_to(m)

        return m

    def create_restaurants_map(self, restaurants):
        """Write the restaurants map and return its path."""
        return self._save(self.build_restaurants_map(restaurants), "restaurants.html")

    def create_clusters_map(self, clusters, restaurants=None):
        """Write the clusters map and return its path."""
        return self._save(self.build_clusters_map(clusters, restaurants), "clusters.html")

    def render_clusters_map(self, clusters, restaurants=None):
        """Clusters map as a standalone HTML document."""
        return self.build_clusters_map(clusters, restaurants).get_root().render()
