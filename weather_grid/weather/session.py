"""
Ingestion session: one loaded configuration with its grid and cities.
"""
from typing import List, Optional

from tqdm import tqdm

from weather_grid.city_registry import CityRegistry
from weather_grid.common import get_logger
from weather_grid.errors import (
    ConfigError,
    FileOpenError,
    MalformedRecordError,
    OutOfBoundsError,
    WeatherGridError,
)
from weather_grid.grid_store import GridBounds, GridStore
from weather_grid.score_system.aggregator import aggregate_cities
from weather_grid.score_system.forecast import forecast_summary
from weather_grid.weather.config import (
    CITY_LOCATION_FILE,
    CLOUD_COVER_FILE,
    PRESSURE_FILE,
    SHOW_PROGRESS,
)
from weather_grid.weather.config_parser import GridConfig, read_config
from weather_grid.weather.record_parser import SourceKind, process_line

logger = get_logger(__name__)


class WeatherSession:
    """
    Owns the Grid Store and City Registry for one configuration file.
    Every call to load() discards the previous grid and cities.
    """

    def __init__(self):
        self.config: Optional[GridConfig] = None
        self.grid: Optional[GridStore] = None
        self.registry = CityRegistry()
        self.errors: List[WeatherGridError] = []
        self.processed = False

    def report(self, error: WeatherGridError) -> None:
        self.errors.append(error)
        print(f"Error: {error}")

    def load(self, config_path: str) -> None:
        """
        Read a configuration file and every data file it lists.

        Raises:
            FileOpenError: if the configuration file itself cannot be opened;
                the current grid is left untouched in that case
        """
        config = read_config(config_path)

        self.config = config
        self.registry = CityRegistry()
        self.errors = []
        self.processed = False
        grid_errors = list(config.errors)
        try:
            self.grid = GridStore(config.bounds)
        except MemoryError:
            grid_errors.append(ConfigError(f"Not enough memory for a {config.bounds.width}x"
                                           f"{config.bounds.height} grid, using 0-0"))
            self.grid = GridStore(GridBounds())

        bounds = self.grid.bounds
        print(f"Reading in GridX_IdxRange: {bounds.x_min}-{bounds.x_max} ... done!")
        print(f"Reading in GridY_IdxRange: {bounds.y_min}-{bounds.y_max} ... done!")
        for error in grid_errors:
            self.report(error)

        print()
        print("Storing data from input file:")
        sources = [
            (config.city_path, SourceKind.CITY_LOCATION, CITY_LOCATION_FILE),
            (config.cloud_path, SourceKind.CLOUD_COVER, CLOUD_COVER_FILE),
            (config.pressure_path, SourceKind.PRESSURE, PRESSURE_FILE),
        ]
        for path, kind, name in sources:
            if path is None:
                continue
            if self.ingest_file(path, kind) is not None:
                print(f"{name}...done")

        aggregate_cities(self.registry, self.grid)
        self.processed = True
        logger.info("Loaded %s: %s", config_path, self.grid.get_statistics())
        print()
        print("All records successfully stored. Going back to main menu ...")

    def ingest_file(self, file_path: str, kind: SourceKind) -> Optional[int]:
        """
        Apply every line of one data file to the current grid.

        Returns:
            Number of lines applied, or None if the file could not be opened
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            self.report(FileOpenError(file_path, getattr(e, "strerror", None) or str(e)))
            return None

        applied = 0
        for line_number, line in enumerate(
            tqdm(lines, desc=kind.value, disable=not SHOW_PROGRESS), 1
        ):
            try:
                problems = process_line(line, kind, self.grid, self.registry)
            except (MalformedRecordError, OutOfBoundsError) as e:
                logger.debug("%s:%d skipped", file_path, line_number)
                self.report(e)
                continue
            for problem in problems:
                self.report(problem)
            if line.strip():
                applied += 1
        return applied

    def summary(self):
        return forecast_summary(self.registry)
