"""
Record parsing for the three weather data files.

    citylocation.txt   [x, y]-<city id>-<Small_City|Mid_City|Big_City>
    cloudcover.txt     [x, y]-<percentage>
    pressure.txt       [x, y]-<percentage>
"""
import enum
import re
from dataclasses import dataclass
from typing import List, Optional

from weather_grid.city_registry import CityRegistry
from weather_grid.errors import InvalidValueError, MalformedRecordError
from weather_grid.grid_store import GridBounds, GridStore
from weather_grid.weather.config import CITY_SIZE_RANKS, MAX_PERCENTAGE, MIN_PERCENTAGE

INTEGER = re.compile(r"-?[0-9]+")


class SourceKind(str, enum.Enum):
    CITY_LOCATION = "city_location"
    CLOUD_COVER = "cloud_cover"
    PRESSURE = "pressure"


@dataclass(frozen=True)
class Record:
    kind: SourceKind
    x: int
    y: int
    col: int
    row: int
    city_id: Optional[int] = None
    size_label: Optional[str] = None
    size_rank: Optional[int] = None
    value: Optional[int] = None


def _to_int(text: str, field_name: str, line: str) -> int:
    text = text.strip()
    if not INTEGER.fullmatch(text):
        raise MalformedRecordError(f"Invalid {field_name} '{text}' in line '{line}'")
    return int(text)


def parse_record(line: str, kind: SourceKind, bounds: GridBounds) -> Optional[Record]:
    """
    Parse one data line into a Record.

    Args:
        line: Raw line from one of the data files
        kind: Which file the line came from
        bounds: Grid bounds used to normalize and range check the coordinate

    Returns:
        The parsed Record, or None for a blank line

    Raises:
        MalformedRecordError: missing delimiters or non-numeric fields
        OutOfBoundsError: coordinate outside the configured grid
    """
    line = line.strip()
    if not line:
        return None

    coord, sep, payload = line.partition("-")
    if not sep:
        raise MalformedRecordError(f"Missing '-' in line '{line}'")

    coord = coord.replace(" ", "").replace("[", "").replace("]", "")
    x_text, comma, y_text = coord.partition(",")
    if not comma:
        raise MalformedRecordError(f"Missing ',' in coordinate of line '{line}'")
    x = _to_int(x_text, "x coordinate", line)
    y = _to_int(y_text, "y coordinate", line)
    col, row = bounds.normalize(x, y)

    if kind is SourceKind.CITY_LOCATION:
        id_text, sep, label = payload.partition("-")
        if not sep:
            raise MalformedRecordError(f"Missing city size in line '{line}'")
        label = label.strip()
        return Record(
            kind=kind,
            x=x,
            y=y,
            col=col,
            row=row,
            city_id=_to_int(id_text, "city ID", line),
            size_label=label,
            size_rank=CITY_SIZE_RANKS.get(label),
        )

    return Record(kind=kind, x=x, y=y, col=col, row=row, value=_to_int(payload, "percentage", line))


def validate_record(record: Record) -> List[InvalidValueError]:
    """Return the value problems of an otherwise well formed record."""
    problems = []
    if record.kind is SourceKind.CITY_LOCATION:
        if record.city_id < 0:
            problems.append(InvalidValueError(f"Invalid city ID {record.city_id} at ({record.x}, {record.y})."))
        if record.size_rank is None:
            problems.append(InvalidValueError(f"Invalid city size '{record.size_label}' at ({record.x}, {record.y})."))
    elif not MIN_PERCENTAGE <= record.value <= MAX_PERCENTAGE:
        name = "cloud cover" if record.kind is SourceKind.CLOUD_COVER else "atmospheric pressure"
        problems.append(InvalidValueError(f"Invalid {name} value {record.value} at ({record.x}, {record.y})."))
    return problems


def apply_record(record: Record, grid: GridStore, registry: CityRegistry) -> bool:
    """
    Write a parsed record into the grid and registry.

    Percentages are stored exactly as given, even when validate_record
    flagged them. City records with a negative id are not applied.

    Returns:
        True if the grid was modified
    """
    if record.kind is SourceKind.CITY_LOCATION:
        if record.city_id < 0:
            return False
        grid.set_city(record.col, record.row, record.city_id)
        size_label = record.size_label if record.size_rank is not None else None
        registry.register(record.city_id, record.x, record.y, size_label)
    elif record.kind is SourceKind.CLOUD_COVER:
        grid.set_cloud_cover(record.col, record.row, float(record.value))
    else:
        grid.set_pressure(record.col, record.row, float(record.value))
    return True


def process_line(line: str, kind: SourceKind, grid: GridStore, registry: CityRegistry) -> List[InvalidValueError]:
    """
    Parse, validate and apply one line.

    Returns the non-fatal value problems; malformed and out of bounds lines
    raise before anything is written.
    """
    record = parse_record(line, kind, grid.bounds)
    if record is None:
        return []
    problems = validate_record(record)
    apply_record(record, grid, registry)
    return problems
