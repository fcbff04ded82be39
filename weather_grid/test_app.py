import pytest

from weather_grid.app import app
from weather_grid.weather.session import WeatherSession


@pytest.fixture
def client():
    app.config['WEATHER_SESSION'] = WeatherSession()
    with app.test_client() as client:
        yield client
    app.config['WEATHER_SESSION'] = WeatherSession()


@pytest.mark.parametrize("url", ['/grid', '/cities', '/summary', '/map/city'])
def test_views_need_a_loaded_session(client, url):
    response = client.get(url)
    assert response.status_code == 409
    assert 'error' in response.get_json()


def test_load_requires_config(client):
    assert client.post('/load', json={}).status_code == 400


def test_load_missing_config(client, tmp_path):
    response = client.post('/load', json={'config': str(tmp_path / 'missing.txt')})
    assert response.status_code == 404


def test_load_and_query(client, scenario_config):
    response = client.post('/load', json={'config': str(scenario_config)})
    assert response.status_code == 200
    data = response.get_json()
    assert data['total_cities'] == 1
    assert data['statistics']['total_cells'] == 25
    assert len(data['errors']) == 1

    grid = client.get('/grid').get_json()
    assert len(grid['cells']) == 25
    city_cells = [c for c in grid['cells'] if c['is_city']]
    assert [(c['x'], c['y'], c['city_id']) for c in city_cells] == [(2, 2, 7)]

    cities = client.get('/cities').get_json()
    assert cities[0]['lower_left'] == [2, 2]
    assert cities[0]['avg_pressure'] == pytest.approx(27.78)

    summary = client.get('/summary').get_json()
    assert summary[0]['city_id'] == 7
    assert summary[0]['rain_probability'] == 70


def test_ascii_map(client, scenario_config):
    client.post('/load', json={'config': str(scenario_config)})
    response = client.get('/map/pressure_lmh')
    assert response.mimetype == 'text/plain'
    assert 'L' in response.get_data(as_text=True)
    assert client.get('/map/rainfall').status_code == 400
