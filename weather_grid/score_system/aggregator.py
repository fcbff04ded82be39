"""
City weather averages.
Each city is scored over its bounding box grown by one cell on every side,
clipped to the grid, so that the surrounding area counts towards its weather.
"""
from typing import Optional, Tuple

from weather_grid.city_registry import City, CityRegistry
from weather_grid.grid_store import GridStore

SURROUNDING_CELLS = 1


def expanded_window(city: City, grid: GridStore) -> Optional[Tuple[int, int, int, int]]:
    """
    Normalized (col_lo, col_hi, row_lo, row_hi), inclusive, of the area
    averaged for `city`. None if the city has no cells on this grid.
    """
    if city.is_empty:
        return None
    bounds = grid.bounds
    x_lo = max(city.lower_left[0] - SURROUNDING_CELLS, bounds.x_min)
    x_hi = min(city.top_right[0] + SURROUNDING_CELLS, bounds.x_max)
    y_lo = max(city.lower_left[1] - SURROUNDING_CELLS, bounds.y_min)
    y_hi = min(city.top_right[1] + SURROUNDING_CELLS, bounds.y_max)
    if x_lo > x_hi or y_lo > y_hi:
        return None
    return x_lo - bounds.x_min, x_hi - bounds.x_min, y_lo - bounds.y_min, y_hi - bounds.y_min


def calculate_city_averages(city: City, grid: GridStore) -> Tuple[float, float, int]:
    """
    Mean pressure and cloud cover around one city.

    Returns:
        (avg_pressure, avg_cloud_cover, cells_visited); both averages are 0.0
        when no cell was visited
    """
    window = expanded_window(city, grid)
    if window is None:
        return 0.0, 0.0, 0
    col_lo, col_hi, row_lo, row_hi = window
    pressure = grid.pressure[row_lo:row_hi + 1, col_lo:col_hi + 1]
    cloud_cover = grid.cloud_cover[row_lo:row_hi + 1, col_lo:col_hi + 1]
    count = int(pressure.size)
    if count == 0:
        return 0.0, 0.0, 0
    return float(pressure.sum()) / count, float(cloud_cover.sum()) / count, count


def aggregate_cities(registry: CityRegistry, grid: GridStore) -> None:
    """Store fresh averages on every city in the registry."""
    for city in registry:
        city.avg_pressure, city.avg_cloud_cover, _ = calculate_city_averages(city, grid)
