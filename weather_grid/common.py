import logging

from weather_grid.weather.config import LOG_FILE, LOG_FORMAT, LOG_LEVEL


def setup_logging(level=LOG_LEVEL, filename=LOG_FILE):
    """Configure the root logger once for the menu and web entry points."""
    logging.basicConfig(
        filename=filename,
        filemode="a",
        format=LOG_FORMAT,
        level=level,
    )


def get_logger(name):
    return logging.getLogger(name)
