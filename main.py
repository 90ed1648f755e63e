"""Restaurant Cluster Map - Main Entry Point"""
import argparse
import logging

from config import Config
from services.planner import DashboardPlanner


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Cluster restaurants and render dashboard maps.")
    parser.add_argument("--csv", help="CSV file with restaurant data (sample data when omitted)")
    parser.add_argument("--clusters", type=int, default=Config.DEFAULT_CLUSTER_COUNT,
                        help="Number of clusters")
    parser.add_argument("--seed", type=int, default=Config.RANDOM_SEED,
                        help="Random seed for reproducible clustering")
    parser.add_argument("--cuisine", default="all", help="Only show this cuisine")
    parser.add_argument("--zone", default="all", help="Only show this zone")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    planner = DashboardPlanner(Config)
    planner.run(
        path=args.csv,
        num_clusters=args.clusters,
        random_state=args.seed,
        cuisine=args.cuisine,
        zone=args.zone
    )
