"""
Flask Web Application for the Restaurant Cluster Map.

Provides a REST API and map pages for:
- Restaurants and filters
- Clusters
- Statistics and insights
- Data upload
"""
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, jsonify, request
from dotenv import load_dotenv

load_dotenv()

from config import Config
from core.exceptions import DataParseError, InvalidParameterError
from services.dataset import ALL
from services.planner import DashboardPlanner

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['SECRET_KEY'] = Config.SECRET_KEY

# In-memory dataset, replaced on upload
planner = DashboardPlanner(Config)
planner.set_restaurants(planner.dataset_service.load())


def _int_arg(name, default):
    """Read an integer query parameter, rejecting malformed values."""
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidParameterError(f"Query parameter '{name}' must be an integer, got {raw!r}")


def _filters():
    return request.args.get('cuisine', ALL), request.args.get('zone', ALL)


def _cluster_all():
    k = _int_arg('k', Config.DEFAULT_CLUSTER_COUNT)
    seed = _int_arg('seed', Config.RANDOM_SEED)
    return planner.clustering_service.cluster_restaurants(
        planner.restaurants, k, random_state=seed
    )


@app.errorhandler(InvalidParameterError)
@app.errorhandler(DataParseError)
def handle_bad_request(e):
    return jsonify({'error': str(e)}), 400


# =============================================================================
# Map Pages
# =============================================================================

@app.route('/')
@app.route('/map')
def clusters_map():
    """Interactive cluster map of the (filtered) restaurants."""
    try:
        cuisine, zone = _filters()
        restaurants = planner.dataset_service.filter_restaurants(
            planner.restaurants, cuisine=cuisine, zone=zone
        )
        clusters = _cluster_all()
        return planner.visualization_service.render_clusters_map(clusters, restaurants)
    except InvalidParameterError:
        raise
    except Exception as e:
        logger.exception("Map rendering failed")
        return jsonify({'error': str(e)}), 500


# =============================================================================
# REST API - Restaurants
# =============================================================================

@app.route('/api/restaurants')
def api_restaurants():
    """Get restaurants, optionally filtered by cuisine and zone."""
    cuisine, zone = _filters()
    restaurants = planner.dataset_service.filter_restaurants(
        planner.restaurants, cuisine=cuisine, zone=zone
    )
    return jsonify({
        'total': len(planner.restaurants),
        'count': len(restaurants),
        'restaurants': [r.to_dict() for r in restaurants]
    })


@app.route('/api/filters')
def api_filters():
    """Get available filter values and cluster count options."""
    return jsonify({
        'cuisines': planner.dataset_service.get_cuisines(planner.restaurants),
        'zones': planner.dataset_service.get_zones(planner.restaurants),
        'cluster_counts': Config.CLUSTER_COUNT_OPTIONS,
        'default_cluster_count': Config.DEFAULT_CLUSTER_COUNT
    })


@app.route('/api/upload', methods=['POST'])
def api_upload():
    """Replace the dataset with uploaded CSV (raw body or 'file' form field)."""
    try:
        upload = request.files.get('file')
        csv_text = upload.read() if upload else request.get_data()
        if not csv_text:
            raise DataParseError("No CSV data received")

        restaurants = planner.dataset_service.parse_csv(csv_text)
        planner.set_restaurants(restaurants)
        logger.info("Dataset replaced with %d uploaded restaurants", len(restaurants))
        return jsonify({
            'success': True,
            'message': f'Loaded {len(restaurants)} restaurants',
            'count': len(restaurants)
        })
    except DataParseError:
        raise
    except Exception as e:
        logger.exception("Upload failed")
        return jsonify({'error': str(e)}), 500


@app.route('/api/sample', methods=['POST'])
def api_sample():
    """Reset the dataset to the built-in sample restaurants."""
    planner.set_restaurants(planner.dataset_service.load_sample())
    return jsonify({'success': True, 'count': len(planner.restaurants)})


# =============================================================================
# REST API - Clusters & Statistics
# =============================================================================

@app.route('/api/clusters')
def api_clusters():
    """Cluster the whole dataset into k groups."""
    try:
        clusters = _cluster_all()
        return jsonify({
            'requested': _int_arg('k', Config.DEFAULT_CLUSTER_COUNT),
            'clusters': [c.to_dict() for c in clusters]
        })
    except InvalidParameterError:
        raise
    except Exception as e:
        logger.exception("Clustering failed")
        return jsonify({'error': str(e)}), 500


@app.route('/api/stats')
def api_stats():
    """Get dashboard statistics, insights and data quality."""
    try:
        cuisine, zone = _filters()
        filtered = planner.dataset_service.filter_restaurants(
            planner.restaurants, cuisine=cuisine, zone=zone
        )
        clusters = _cluster_all()
        analytics = planner.analytics_service

        stats = analytics.summary(filtered, clusters)
        stats['total_restaurants'] = len(planner.restaurants)
        stats['data_quality'] = analytics.data_quality(planner.restaurants)
        stats['recommendations'] = analytics.recommendations(planner.restaurants, clusters)
        return jsonify(stats)
    except InvalidParameterError:
        raise
    except Exception as e:
        logger.exception("Statistics failed")
        return jsonify({'error': str(e)}), 500


if __name__ == '__main__':
    logging.basicConfig(level=Config.LOG_LEVEL)
    app.run(debug=True, port=int(os.getenv('PORT', '5000')))
