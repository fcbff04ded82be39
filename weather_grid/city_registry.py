"""
City Registry
Tracks the bounding box and weather averages of every city on the grid.
"""
import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple

EMPTY_LOWER_LEFT = (math.inf, math.inf)
EMPTY_TOP_RIGHT = (-math.inf, -math.inf)


@dataclass
class City:
    id: int
    lower_left: Tuple = EMPTY_LOWER_LEFT
    top_right: Tuple = EMPTY_TOP_RIGHT
    avg_pressure: float = 0.0
    avg_cloud_cover: float = 0.0
    size_label: Optional[str] = None
    cell_count: int = field(default=0)

    @property
    def is_empty(self) -> bool:
        return self.cell_count == 0

    def include(self, x: int, y: int) -> None:
        """Grow the bounding box so that it covers (x, y)."""
        self.lower_left = (min(x, self.lower_left[0]), min(y, self.lower_left[1]))
        self.top_right = (max(x, self.top_right[0]), max(y, self.top_right[1]))
        self.cell_count += 1

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "size_label": self.size_label,
            "lower_left": list(self.lower_left) if not self.is_empty else None,
            "top_right": list(self.top_right) if not self.is_empty else None,
            "avg_pressure": round(self.avg_pressure, 2),
            "avg_cloud_cover": round(self.avg_cloud_cover, 2),
        }


class CityRegistry:
    """Mapping of city id -> City. Bounding boxes only ever grow."""

    def __init__(self):
        self._cities: Dict[int, City] = {}

    def register(self, city_id: int, x: int, y: int, size_label: Optional[str] = None) -> City:
        """Record that city `city_id` occupies input coordinate (x, y)."""
        city = self._cities.get(city_id)
        if city is None:
            city = self._cities[city_id] = City(id=city_id)
        city.include(x, y)
        if size_label is not None:
            city.size_label = size_label
        return city

    def get(self, city_id: int) -> Optional[City]:
        return self._cities.get(city_id)

    def __getitem__(self, city_id: int) -> City:
        return self._cities[city_id]

    def __contains__(self, city_id) -> bool:
        return city_id in self._cities

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self) -> Iterator[City]:
        # sorted so that summaries print in a stable order
        for city_id in sorted(self._cities):
            yield self._cities[city_id]
