"""
Error types raised while reading configuration and weather data files.
All of them are recoverable: the caller reports the message and moves on.
"""


class WeatherGridError(Exception):
    """Base class for every error raised by weather_grid."""


class FileOpenError(WeatherGridError):
    """A configuration or data file is missing or unreadable."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Unable to open file {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ConfigError(WeatherGridError):
    """A configuration line could not be understood."""


class MalformedRecordError(WeatherGridError):
    """A data line is missing delimiters or has non-numeric fields."""


class OutOfBoundsError(WeatherGridError):
    """A record points outside the configured grid."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"Coordinates ({x}, {y}) are out of bounds.")


class InvalidValueError(WeatherGridError):
    """A field parsed fine but its value is outside the accepted range."""
