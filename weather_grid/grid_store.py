"""
Grid Store for the Weather Grid
Holds city membership, pressure and cloud cover for every grid cell.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

import numpy as np

from weather_grid.errors import ConfigError, OutOfBoundsError


@dataclass(frozen=True)
class GridBounds:
    """Inclusive coordinate ranges read from the configuration file."""
    x_min: int = 0
    x_max: int = 0
    y_min: int = 0
    y_max: int = 0

    def __post_init__(self):
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ConfigError(
                f"Empty grid range x={self.x_min}-{self.x_max}, y={self.y_min}-{self.y_max}"
            )

    @property
    def width(self) -> int:
        return self.x_max - self.x_min + 1

    @property
    def height(self) -> int:
        return self.y_max - self.y_min + 1

    def contains(self, x: int, y: int) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def normalize(self, x: int, y: int) -> Tuple[int, int]:
        """
        Translate an input coordinate into zero-based grid indices.

        Raises:
            OutOfBoundsError: if the coordinate lies outside the grid
        """
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y)
        return x - self.x_min, y - self.y_min

    def denormalize(self, col: int, row: int) -> Tuple[int, int]:
        return col + self.x_min, row + self.y_min


@dataclass(frozen=True)
class Cell:
    """Snapshot of one grid cell."""
    is_city: bool
    city_id: Optional[int]
    pressure: float
    cloud_cover: float


class GridStore:
    """
    Rectangular store of weather cells.

    Every field is a contiguous numpy array of shape (height, width) indexed
    as [row, col], where col/row are normalized x/y indices. Index 0 is the
    configured minimum on each axis.
    """

    NO_CITY = -1

    def __init__(self, bounds: GridBounds):
        self.bounds = bounds
        shape = (bounds.height, bounds.width)
        self.is_city = np.zeros(shape, dtype=bool)
        self.city_id = np.full(shape, self.NO_CITY, dtype=np.int64)
        self.pressure = np.zeros(shape, dtype=np.float64)
        self.cloud_cover = np.zeros(shape, dtype=np.float64)

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def in_range(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def _check(self, col: int, row: int) -> None:
        if not self.in_range(col, row):
            raise OutOfBoundsError(*self.bounds.denormalize(col, row))

    def cell(self, col: int, row: int) -> Cell:
        """Return the cell at normalized indices (col, row)."""
        self._check(col, row)
        city_id = int(self.city_id[row, col])
        return Cell(
            is_city=bool(self.is_city[row, col]),
            city_id=None if city_id == self.NO_CITY else city_id,
            pressure=float(self.pressure[row, col]),
            cloud_cover=float(self.cloud_cover[row, col]),
        )

    def set_city(self, col: int, row: int, city_id: int) -> None:
        self._check(col, row)
        self.is_city[row, col] = True
        self.city_id[row, col] = city_id

    def set_pressure(self, col: int, row: int, value: float) -> None:
        self._check(col, row)
        self.pressure[row, col] = value

    def set_cloud_cover(self, col: int, row: int, value: float) -> None:
        self._check(col, row)
        self.cloud_cover[row, col] = value

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (x, y, cell) in input coordinates, row by row from y_min."""
        for row in range(self.height):
            for col in range(self.width):
                x, y = self.bounds.denormalize(col, row)
                yield x, y, self.cell(col, row)

    def to_dict(self) -> Dict:
        """JSON friendly dump used by the web view."""
        return {
            "bounds": {
                "x_min": self.bounds.x_min,
                "x_max": self.bounds.x_max,
                "y_min": self.bounds.y_min,
                "y_max": self.bounds.y_max,
            },
            "cells": [
                {
                    "x": x,
                    "y": y,
                    "is_city": cell.is_city,
                    "city_id": cell.city_id,
                    "pressure": cell.pressure,
                    "cloud_cover": cell.cloud_cover,
                }
                for x, y, cell in self.iter_cells()
            ],
        }

    def get_statistics(self) -> Dict:
        """Get grid statistics for debugging."""
        return {
            "width": self.width,
            "height": self.height,
            "total_cells": int(self.is_city.size),
            "city_cells": int(self.is_city.sum()),
            "mean_pressure": float(self.pressure.mean()),
            "mean_cloud_cover": float(self.cloud_cover.mean()),
        }
