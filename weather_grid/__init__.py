"""Weather grid: city, cloud cover and pressure maps with a per-city forecast."""

__version__ = "0.1.0"
