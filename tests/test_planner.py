import os

from services.planner import DashboardPlanner


def test_run_with_sample_data(config, capsys):
    planner = DashboardPlanner(config)
    stats = planner.run(num_clusters=3, random_state=0)

    assert len(planner.restaurants) == 15
    assert 1 <= len(planner.clusters) <= 3
    assert sum(c.get_restaurant_count() for c in planner.clusters) == 15
    assert stats["restaurant_count"] == 15
    assert os.path.exists(os.path.join(config.OUTPUT_DIR, "clusters.html"))

    out = capsys.readouterr().out
    assert "[3] Creating 3 clusters..." in out
    assert "SUMMARY" in out


def test_filters_only_change_displayed_restaurants(config):
    planner = DashboardPlanner(config)
    stats = planner.run(num_clusters=2, random_state=1, zone="Brooklyn")

    assert len(planner.filtered_restaurants) == 5
    assert sum(c.get_restaurant_count() for c in planner.clusters) == 15
    assert stats["restaurant_count"] == 5
    assert stats["data_quality"]["total"] == 15


def test_default_cluster_count_from_config(config):
    config.DEFAULT_CLUSTER_COUNT = 4
    planner = DashboardPlanner(config)
    planner.load_restaurants()
    planner.create_clusters()

    assert planner.clustering_service.clusterer.n_clusters == 4


def test_csv_path(config, tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("name,lat,lon,cuisine\nA,0,0,Thai\nB,0,1,Thai\nC,10,10,Pizza\n")

    planner = DashboardPlanner(config)
    planner.run(path=str(path), num_clusters=1)

    assert [c.get_restaurant_count() for c in planner.clusters] == [3]
