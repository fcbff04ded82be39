import numpy as np
import pytest

from weather_grid.city_registry import City, CityRegistry
from weather_grid.grid_store import GridBounds, GridStore
from weather_grid.score_system.aggregator import (
    aggregate_cities,
    calculate_city_averages,
    expanded_window,
)


def make_grid(bounds):
    grid = GridStore(bounds)
    # distinct value per cell so any wrong window shows up in the mean
    grid.pressure[:] = np.arange(grid.pressure.size).reshape(grid.pressure.shape)
    grid.cloud_cover[:] = 100 - grid.pressure
    return grid


def test_window_is_expanded_by_one_cell():
    grid = make_grid(GridBounds(0, 9, 0, 9))
    registry = CityRegistry()
    registry.register(1, 3, 4)
    registry.register(1, 5, 6)
    assert expanded_window(registry[1], grid) == (2, 6, 3, 7)


def test_window_is_clamped_to_grid():
    grid = make_grid(GridBounds(0, 4, 0, 4))
    registry = CityRegistry()
    registry.register(1, 0, 4)
    assert expanded_window(registry[1], grid) == (0, 1, 3, 4)


def test_window_uses_offset_bounds():
    grid = make_grid(GridBounds(10, 14, 20, 24))
    registry = CityRegistry()
    registry.register(1, 10, 22)
    assert expanded_window(registry[1], grid) == (0, 1, 1, 3)


def test_mean_equals_sum_over_count():
    grid = make_grid(GridBounds(0, 4, 0, 4))
    registry = CityRegistry()
    registry.register(1, 0, 0)
    pressure, cloud, count = calculate_city_averages(registry[1], grid)
    expected = grid.pressure[0:2, 0:2]
    assert count == 4
    assert pressure == pytest.approx(expected.sum() / 4)
    assert cloud == pytest.approx((100 - expected).sum() / 4)


def test_city_without_cells_averages_to_zero():
    grid = make_grid(GridBounds(0, 4, 0, 4))
    assert calculate_city_averages(City(id=3), grid) == (0.0, 0.0, 0)


def test_aggregation_is_idempotent():
    grid = make_grid(GridBounds(0, 6, 0, 6))
    registry = CityRegistry()
    registry.register(1, 2, 2)
    registry.register(2, 6, 0)
    registry.register(2, 5, 1)

    aggregate_cities(registry, grid)
    first = [(c.avg_pressure, c.avg_cloud_cover) for c in registry]
    aggregate_cities(registry, grid)
    second = [(c.avg_pressure, c.avg_cloud_cover) for c in registry]
    assert first == second
    assert registry[2].avg_pressure == pytest.approx(grid.pressure[0:3, 4:7].mean())
