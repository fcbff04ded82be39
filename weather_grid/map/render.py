"""
ASCII rendering of the weather grid and the forecast summary.
"""
import enum
from dataclasses import dataclass, replace
from typing import Callable, List

from weather_grid.city_registry import CityRegistry
from weather_grid.grid_store import Cell, GridBounds, GridStore
from weather_grid.score_system.forecast import calculate_city_forecast, classify_level

BORDER = "#"


@dataclass(frozen=True)
class MapLayout:
    """Column widths for one grid, computed once from its bounds."""
    cell_width: int
    label_width: int

    @classmethod
    def from_bounds(cls, bounds: GridBounds) -> "MapLayout":
        return cls(
            cell_width=max(len(str(bounds.x_min)), len(str(bounds.x_max))),
            label_width=max(len(str(bounds.y_min)), len(str(bounds.y_max))),
        )

    def pad(self, content) -> str:
        return f" {str(content):^{self.cell_width}} "


def index_digit(value: float) -> int:
    """Single digit 0-9 for a 0-100 percentage."""
    return int(max(0.0, value - 1) / 10)


def _city_content(cell: Cell):
    return cell.city_id if cell.city_id is not None else ""


class MapKind(enum.Enum):
    CITY = ("Display City Map", _city_content)
    CLOUD_INDEX = ("Display Cloud Coverage Map (Cloudiness Index)",
                   lambda cell: index_digit(cell.cloud_cover))
    CLOUD_LMH = ("Display Cloud Coverage Map (LMH Symbol)",
                 lambda cell: classify_level(cell.cloud_cover).value)
    PRESSURE_INDEX = ("Display Atmospheric Pressure Map (Pressure Index)",
                      lambda cell: index_digit(cell.pressure))
    PRESSURE_LMH = ("Display Atmospheric Pressure Map (LMH Symbol)",
                    lambda cell: classify_level(cell.pressure).value)

    def __init__(self, title, content):
        self.title = title
        self.content = content


def render_map(grid: GridStore, kind: MapKind, layout: MapLayout = None) -> str:
    """
    Draw the grid inside a '#' border, highest y on top, x labels underneath.
    """
    layout = layout or MapLayout.from_bounds(grid.bounds)
    content: Callable[[Cell], object] = kind.content
    bounds = grid.bounds
    rows = [
        [str(content(grid.cell(col, row))) for col in range(grid.width)]
        for row in range(grid.height)
    ]
    # wide city ids or out of range index values widen every column
    widest = max(len(text) for texts in rows for text in texts)
    if widest > layout.cell_width:
        layout = replace(layout, cell_width=widest)
    margin = " " * (layout.label_width + 1)
    border_row = margin + layout.pad(BORDER) * (grid.width + 2)

    lines: List[str] = [border_row]
    for row in range(grid.height - 1, -1, -1):
        y = bounds.y_min + row
        cells = "".join(layout.pad(text) for text in rows[row])
        lines.append(f"{y:>{layout.label_width}} {layout.pad(BORDER)}{cells}{layout.pad(BORDER)}")
    lines.append(border_row)
    x_labels = "".join(layout.pad(bounds.x_min + col) for col in range(grid.width))
    lines.append(margin + layout.pad("") + x_labels)
    return "\n".join(line.rstrip() for line in lines)


RAIN_ART = {
    90: ["~~~~", "~~~~~", "\\\\\\\\\\"],
    80: ["~~~~", "~~~~~", " \\\\\\\\"],
    70: ["~~~~", "~~~~~", "  \\\\\\"],
    60: ["~~~~", "~~~~~", "   \\\\"],
    50: ["~~~~", "~~~~~", "    \\"],
    40: ["~~~~", "~~~~~"],
    30: ["~~~", "~~~~"],
    20: ["~~", "~~~"],
    10: ["~", "~~"],
}


def rain_art(probability: int) -> str:
    return "\n".join(RAIN_ART.get(probability, []))


def render_summary(registry: CityRegistry) -> str:
    """Forecast summary text for every city, in city id order."""
    blocks = []
    for city in registry:
        forecast = calculate_city_forecast(city)
        lines = [
            f"City Name : {forecast['city_name']}",
            f"City ID : {forecast['city_id']}",
            f"Average Cloud Cover (ACC) : {forecast['avg_cloud_cover']:.2f} ({forecast['cloud_level']})",
            f"Average Pressure (AP) : {forecast['avg_pressure']:.2f} ({forecast['pressure_level']})",
            f"Probability of Rain (%) : {forecast['rain_probability']}",
        ]
        art = rain_art(forecast['rain_probability'])
        if art:
            lines.append(art)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
