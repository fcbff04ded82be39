"""
Tests for the grid store and city registry
"""
import math

import pytest

from weather_grid.city_registry import City, CityRegistry
from weather_grid.errors import ConfigError, OutOfBoundsError
from weather_grid.grid_store import GridBounds, GridStore


def test_normalize_is_a_bijection():
    bounds = GridBounds(3, 7, -2, 1)
    seen = set()
    for x in range(3, 8):
        for y in range(-2, 2):
            col, row = bounds.normalize(x, y)
            assert 0 <= col < bounds.width
            assert 0 <= row < bounds.height
            assert bounds.denormalize(col, row) == (x, y)
            seen.add((col, row))
    assert len(seen) == bounds.width * bounds.height == 20


def test_normalize_rejects_outside_coordinates():
    bounds = GridBounds(0, 4, 0, 4)
    with pytest.raises(OutOfBoundsError) as exc:
        bounds.normalize(10, 10)
    assert (exc.value.x, exc.value.y) == (10, 10)
    with pytest.raises(OutOfBoundsError):
        bounds.normalize(-1, 0)


def test_empty_range_is_rejected():
    with pytest.raises(ConfigError):
        GridBounds(5, 4, 0, 0)


def test_new_grid_is_blank():
    grid = GridStore(GridBounds(0, 2, 0, 1))
    assert grid.pressure.shape == (2, 3)
    cell = grid.cell(2, 1)
    assert not cell.is_city
    assert cell.city_id is None
    assert cell.pressure == 0.0
    assert cell.cloud_cover == 0.0


def test_setters_touch_a_single_cell():
    grid = GridStore(GridBounds(10, 12, 20, 21))
    grid.set_city(1, 0, 4)
    grid.set_pressure(1, 0, 55)
    grid.set_cloud_cover(2, 1, 90)

    cell = grid.cell(1, 0)
    assert cell.is_city and cell.city_id == 4
    assert cell.pressure == 55.0
    assert grid.cell(2, 1).cloud_cover == 90.0
    assert grid.get_statistics()["city_cells"] == 1
    assert grid.pressure.sum() == 55.0


def test_cell_access_is_bounds_checked():
    grid = GridStore(GridBounds(0, 1, 0, 1))
    with pytest.raises(OutOfBoundsError):
        grid.cell(2, 0)
    with pytest.raises(OutOfBoundsError):
        grid.set_pressure(0, -1, 10)


def test_to_dict_uses_input_coordinates():
    grid = GridStore(GridBounds(5, 6, 1, 1))
    grid.set_city(1, 0, 2)
    data = grid.to_dict()
    assert data["bounds"] == {"x_min": 5, "x_max": 6, "y_min": 1, "y_max": 1}
    assert [(c["x"], c["y"], c["city_id"]) for c in data["cells"]] == [(5, 1, None), (6, 1, 2)]


def test_registry_starts_with_empty_bounds():
    registry = CityRegistry()
    city = registry.register(3, 4, 4)
    assert city.lower_left == (4, 4)
    assert city.top_right == (4, 4)

    fresh = CityRegistry()
    assert fresh.get(3) is None
    assert 3 not in fresh


def test_registry_bounding_box_is_min_max_of_all_cells():
    registry = CityRegistry()
    points = [(5, 1), (2, 7), (4, 3), (9, 0)]
    for x, y in points:
        registry.register(1, x, y, "Big_City")
    city = registry[1]
    assert city.lower_left == (2, 0)
    assert city.top_right == (9, 7)
    assert city.cell_count == 4
    assert city.size_label == "Big_City"


def test_registry_bounding_box_never_shrinks():
    registry = CityRegistry()
    registry.register(1, 0, 0)
    registry.register(1, 6, 6)
    registry.register(1, 3, 3)
    assert registry[1].lower_left == (0, 0)
    assert registry[1].top_right == (6, 6)


def test_registry_iterates_in_id_order():
    registry = CityRegistry()
    for city_id in (9, 2, 5):
        registry.register(city_id, 0, 0)
    assert [city.id for city in registry] == [2, 5, 9]
    assert len(registry) == 3


def test_empty_city_serializes_without_bounds():
    city = City(id=8)
    assert city.is_empty
    assert math.isinf(city.lower_left[0])
    assert city.to_dict()["lower_left"] is None
