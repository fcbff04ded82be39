import enum
from typing import Iterable

import pandas as pd

from weather_grid.city_registry import City
from weather_grid.weather.config import LOW_THRESHOLD, MEDIUM_THRESHOLD, RAIN_PROBABILITY


class Level(str, enum.Enum):
    LOW = "L"
    MEDIUM = "M"
    HIGH = "H"


def classify_level(value):
    ## shared by cloud cover and pressure, anything from 65 up is High
    if value < LOW_THRESHOLD:
        return Level.LOW
    elif value < MEDIUM_THRESHOLD:
        return Level.MEDIUM
    else:
        return Level.HIGH


def rain_probability(pressure_level, cloud_level):
    ## low pressure with heavy cloud is the wettest combination
    return RAIN_PROBABILITY.get((Level(pressure_level).value, Level(cloud_level).value), 0)


def calculate_city_forecast(city: City):
    """
    Classify a city's averages and look up its chance of rain.

    Args:
        city: City with averages already computed

    Returns:
        Dictionary with the averages, their symbols and the rain probability
    """
    cloud_level = classify_level(city.avg_cloud_cover)
    pressure_level = classify_level(city.avg_pressure)
    return {
        'city_id': city.id,
        'city_name': city.size_label or 'Unknown',
        'avg_cloud_cover': round(city.avg_cloud_cover, 2),
        'cloud_level': cloud_level.value,
        'avg_pressure': round(city.avg_pressure, 2),
        'pressure_level': pressure_level.value,
        'rain_probability': rain_probability(pressure_level, cloud_level),
    }


def forecast_summary(cities: Iterable[City]) -> pd.DataFrame:
    """One row per city, indexed by city id."""
    rows = [calculate_city_forecast(city) for city in cities]
    columns = ['city_id', 'city_name', 'avg_cloud_cover', 'cloud_level',
               'avg_pressure', 'pressure_level', 'rain_probability']
    return pd.DataFrame(rows, columns=columns).set_index('city_id')
