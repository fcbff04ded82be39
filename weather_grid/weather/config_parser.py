"""
Configuration file reader.

The configuration is line oriented:

    GridX_IdxRange=0-8
    GridY_IdxRange=0-8
    citylocation.txt
    cloudcover.txt
    pressure.txt

Range lines start with ``Grid``; data file lines are recognised by the file
name appearing anywhere in the line.
"""
import os
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from weather_grid.common import get_logger
from weather_grid.errors import ConfigError, FileOpenError, WeatherGridError
from weather_grid.grid_store import GridBounds
from weather_grid.weather.config import (
    CITY_LOCATION_FILE,
    CLOUD_COVER_FILE,
    COMMENT_PREFIXES,
    GRID_PREFIX,
    GRID_X_KEY,
    GRID_Y_KEY,
    MAX_GRID_CELLS,
    PRESSURE_FILE,
)

logger = get_logger(__name__)

INTEGER = re.compile(r"-?[0-9]+")


@dataclass
class GridConfig:
    bounds: GridBounds
    city_path: Optional[str] = None
    cloud_path: Optional[str] = None
    pressure_path: Optional[str] = None
    errors: List[WeatherGridError] = field(default_factory=list)

    def as_tuple(self) -> Tuple:
        """(x_min, x_max, y_min, y_max, city_path, cloud_path, pressure_path)"""
        return (
            self.bounds.x_min,
            self.bounds.x_max,
            self.bounds.y_min,
            self.bounds.y_max,
            self.city_path,
            self.cloud_path,
            self.pressure_path,
        )


def parse_range(value: str) -> Tuple[int, int]:
    """Parse ``<min>-<max>`` into a pair of ints."""
    low, sep, high = value.strip().partition("-")
    if not sep:
        raise ConfigError(f"Grid range '{value.strip()}' is missing '-'")
    low, high = low.strip(), high.strip()
    if not (INTEGER.fullmatch(low) and INTEGER.fullmatch(high)):
        raise ConfigError(f"Grid range '{value.strip()}' is not an integer range")
    low, high = int(low), int(high)
    if low > high:
        raise ConfigError(f"Grid range '{value.strip()}' has min greater than max")
    return low, high


def _resolve_path(line: str, base_dir: Optional[str]) -> str:
    path = line.strip()
    if base_dir and not os.path.isabs(path) and not os.path.exists(path):
        candidate = os.path.join(base_dir, path)
        if os.path.exists(candidate):
            return candidate
    return path


def parse_config(text: str, base_dir: Optional[str] = None) -> GridConfig:
    """
    Extract grid ranges and data file paths from configuration text.

    Problems are collected on the returned config rather than raised; an axis
    whose range could not be read keeps the default 0-0.

    Args:
        text: Full contents of the configuration file
        base_dir: Directory used to resolve relative data file paths

    Returns:
        GridConfig with bounds, the three paths (None when absent) and errors
    """
    ranges = {}
    seen_keys = set()
    paths = {}
    errors: List[WeatherGridError] = []

    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIXES):
            continue

        if stripped.startswith(GRID_PREFIX) and "=" in stripped:
            key, _, value = stripped.partition("=")
            key = key.strip()
            if key not in (GRID_X_KEY, GRID_Y_KEY):
                logger.debug("Ignoring unknown grid key %s", key)
                continue
            seen_keys.add(key)
            try:
                ranges[key] = parse_range(value)
            except ConfigError as e:
                errors.append(ConfigError(f"{key}: {e}"))
            continue

        for name in (CITY_LOCATION_FILE, CLOUD_COVER_FILE, PRESSURE_FILE):
            if name in stripped:
                paths[name] = _resolve_path(stripped, base_dir)
                break

    for key in (GRID_X_KEY, GRID_Y_KEY):
        if key not in seen_keys:
            errors.append(ConfigError(f"{key} not found, using 0-0"))

    for name in (CITY_LOCATION_FILE, CLOUD_COVER_FILE, PRESSURE_FILE):
        if name not in paths:
            errors.append(FileOpenError(name, "not listed in configuration file"))

    x_min, x_max = ranges.get(GRID_X_KEY, (0, 0))
    y_min, y_max = ranges.get(GRID_Y_KEY, (0, 0))
    cells = (x_max - x_min + 1) * (y_max - y_min + 1)
    if cells > MAX_GRID_CELLS:
        errors.append(ConfigError(
            f"Grid of {cells} cells exceeds the limit of {MAX_GRID_CELLS}, using 0-0"
        ))
        x_min = x_max = y_min = y_max = 0

    return GridConfig(
        bounds=GridBounds(x_min, x_max, y_min, y_max),
        city_path=paths.get(CITY_LOCATION_FILE),
        cloud_path=paths.get(CLOUD_COVER_FILE),
        pressure_path=paths.get(PRESSURE_FILE),
        errors=errors,
    )


def read_config(file_path: str) -> GridConfig:
    """Read and parse a configuration file from disk."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOpenError(file_path, getattr(e, "strerror", None) or str(e)) from e
    return parse_config(text, base_dir=os.path.dirname(os.path.abspath(file_path)))
