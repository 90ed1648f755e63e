import pytest

from web.app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        client.post('/api/sample')
        yield client
        client.post('/api/sample')


def test_restaurants(client):
    data = client.get('/api/restaurants').get_json()

    assert data['total'] == 15
    assert data['count'] == 15
    assert {'id', 'name', 'lat', 'lon', 'cuisine', 'zone'} <= set(data['restaurants'][0])


def test_restaurants_filtered(client):
    data = client.get('/api/restaurants?cuisine=Italian&zone=Manhattan').get_json()
    assert data['count'] == 3


def test_filters(client):
    data = client.get('/api/filters').get_json()

    assert data['zones'] == ['Brooklyn', 'Manhattan']
    assert 'Italian' in data['cuisines']
    assert data['cluster_counts'] == [3, 4, 5, 6, 7, 8]


def test_clusters_cover_every_restaurant(client):
    data = client.get('/api/clusters?k=4&seed=3').get_json()

    members = [r['id'] for c in data['clusters'] for r in c['restaurants']]
    assert data['requested'] == 4
    assert sorted(members) == sorted(set(members))
    assert len(members) == 15
    assert all(c['restaurants'] for c in data['clusters'])


def test_clusters_seeded_are_repeatable(client):
    first = client.get('/api/clusters?k=5&seed=8').get_json()
    second = client.get('/api/clusters?k=5&seed=8').get_json()
    assert first == second


@pytest.mark.parametrize("query", ["k=0", "k=-1", "k=abc", "seed=x"])
def test_clusters_bad_parameters(client, query):
    response = client.get(f'/api/clusters?{query}')

    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_stats(client):
    data = client.get('/api/stats?k=3&seed=1&zone=Brooklyn').get_json()

    assert data['restaurant_count'] == 5
    assert data['total_restaurants'] == 15
    assert data['insights']['densest_zone'] == {'name': 'Brooklyn', 'count': 5}
    assert data['data_quality']['cuisine'] == 100


def test_map_page(client):
    response = client.get('/map?k=3&seed=2')

    assert response.status_code == 200
    assert b'leaflet' in response.data.lower()


def test_upload_raw_csv(client):
    csv_text = "name,lat,lon\nA,0,0\nB,0,1\nC,10,10\n"
    response = client.post('/api/upload', data=csv_text, content_type='text/csv')

    assert response.get_json() == {'success': True, 'message': 'Loaded 3 restaurants', 'count': 3}
    assert client.get('/api/restaurants').get_json()['total'] == 3


def test_upload_file_field(client):
    import io
    data = {'file': (io.BytesIO(b"latitude,longitude\n1,2\n"), 'restaurants.csv')}
    response = client.post('/api/upload', data=data, content_type='multipart/form-data')

    assert response.status_code == 200
    assert response.get_json()['count'] == 1


def test_upload_bad_csv_keeps_dataset(client):
    response = client.post('/api/upload', data="name,lat,lon\nA,x,y\n", content_type='text/csv')

    assert response.status_code == 400
    assert 'row 1' in response.get_json()['error']
    assert client.get('/api/restaurants').get_json()['total'] == 15


def test_upload_empty_body(client):
    response = client.post('/api/upload', data=b'', content_type='text/csv')
    assert response.status_code == 400


def test_upload_non_utf8_file_is_a_bad_request(client):
    import io
    payload = "name,lat,lon\nCafé,1,2\n".encode("latin-1")
    data = {'file': (io.BytesIO(payload), 'restaurants.csv')}
    response = client.post('/api/upload', data=data, content_type='multipart/form-data')

    assert response.status_code == 400
    assert response.is_json
    assert 'UTF-8' in response.get_json()['error']
    assert client.get('/api/restaurants').get_json()['total'] == 15


def test_map_bad_cluster_count(client):
    response = client.get('/map?k=0')

    assert response.status_code == 400
    assert 'error' in response.get_json()
