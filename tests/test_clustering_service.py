import numpy as np
import pytest

from core.exceptions import InvalidParameterError
from services.clustering import ClusteringService, cluster_color
from services.dataset import DatasetService


@pytest.fixture
def service(config):
    return ClusteringService(config)


@pytest.fixture
def sample_restaurants(config):
    return DatasetService(config).load_sample()


def _member_ids(clusters):
    return [r.id for c in clusters for r in c.restaurants]


def test_two_natural_groups(service, two_groups):
    clusters = service.cluster_restaurants(two_groups, 2, init=[[1, 1], [9, 9]])

    assert [c.index for c in clusters] == [0, 1]
    assert [r.id for r in clusters[0].restaurants] == ["r0", "r1"]
    assert [r.id for r in clusters[1].restaurants] == ["r2", "r3"]
    assert clusters[0].center == pytest.approx((0, 0.5))
    assert clusters[1].center == pytest.approx((10, 10.5))


@pytest.mark.parametrize("k", [1, 2, 3, 5, 8, 20])
def test_every_restaurant_in_exactly_one_cluster(service, sample_restaurants, k):
    clusters = service.cluster_restaurants(sample_restaurants, k, random_state=k)

    ids = _member_ids(clusters)
    assert sorted(ids) == sorted(r.id for r in sample_restaurants)
    assert len(ids) == len(set(ids))
    assert all(c.get_restaurant_count() > 0 for c in clusters)
    assert len(clusters) <= k


def test_members_keep_input_order(service, sample_restaurants):
    order = {r.id: i for i, r in enumerate(sample_restaurants)}
    for cluster in service.cluster_restaurants(sample_restaurants, 4, random_state=9):
        positions = [order[r.id] for r in cluster.restaurants]
        assert positions == sorted(positions)


def test_clusters_ordered_by_index(service, sample_restaurants):
    clusters = service.cluster_restaurants(sample_restaurants, 6, random_state=1)
    indexes = [c.index for c in clusters]
    assert indexes == sorted(indexes)


def test_single_cluster_holds_everything(service, sample_restaurants):
    clusters = service.cluster_restaurants(sample_restaurants, 1, random_state=0)

    assert len(clusters) == 1
    assert clusters[0].get_restaurant_count() == len(sample_restaurants)
    lat = np.mean([r.lat for r in sample_restaurants])
    lon = np.mean([r.lon for r in sample_restaurants])
    assert clusters[0].center == pytest.approx((lat, lon))


def test_same_seed_same_partition(service, sample_restaurants):
    first = service.cluster_restaurants(sample_restaurants, 4, random_state=21)
    second = service.cluster_restaurants(sample_restaurants, 4, random_state=21)

    assert [c.to_dict() for c in first] == [c.to_dict() for c in second]


def test_restaurants_are_not_mutated(service, two_groups):
    before = [r.to_dict() for r in two_groups]
    clusters = service.cluster_restaurants(two_groups, 2, random_state=0)

    assert [r.to_dict() for r in two_groups] == before
    by_id = {r.id: r for r in two_groups}
    assert all(by_id[m.id] is m for c in clusters for m in c.restaurants)


def test_empty_input_returns_no_clusters(service):
    assert service.cluster_restaurants([], 3) == []


@pytest.mark.parametrize("k", [0, -1])
def test_invalid_cluster_count(service, two_groups, k):
    with pytest.raises(InvalidParameterError):
        service.cluster_restaurants(two_groups, k)


def test_invalid_cluster_count_rejected_for_empty_input(service):
    with pytest.raises(InvalidParameterError):
        service.cluster_restaurants([], 0)


def test_more_clusters_than_points(service, make_restaurants):
    restaurants = make_restaurants([(0, 0), (0, 5), (5, 0)])
    clusters = service.cluster_restaurants(restaurants, 10, random_state=3)

    assert 1 <= len(clusters) <= 3
    assert sorted(_member_ids(clusters)) == ["r0", "r1", "r2"]


def test_coincident_points_give_one_cluster(service, make_restaurants):
    restaurants = make_restaurants([(40.75, -73.99)] * 5)
    clusters = service.cluster_restaurants(restaurants, 4, random_state=0)

    assert len(clusters) == 1
    assert clusters[0].index == 0
    assert clusters[0].color == "#e91e63"


def test_palette_wraps_after_seven_colors(service, make_restaurants):
    points = [(float(i * 10), float(i * 10)) for i in range(9)]
    restaurants = make_restaurants(points)
    clusters = service.cluster_restaurants(restaurants, 9, init=points)

    assert len(clusters) == 9
    assert clusters[7].color == clusters[0].color
    assert clusters[8].color == clusters[1].color
    assert len({c.color for c in clusters[:7]}) == 7


def test_cluster_color_modulo():
    palette = ["a", "b", "c"]
    assert cluster_color(0, palette) == "a"
    assert cluster_color(4, palette) == "b"


def test_to_dict_tags_members_with_cluster(service, two_groups):
    clusters = service.cluster_restaurants(two_groups, 2, init=[[1, 1], [9, 9]])
    payload = clusters[1].to_dict()

    assert payload["index"] == 1
    assert payload["color"] == "#9c27b0"
    assert payload["center"] == pytest.approx([10, 10.5])
    assert [r["cluster"] for r in payload["restaurants"]] == [1, 1]
    assert payload["restaurants"][0]["name"] == "Place 2"
