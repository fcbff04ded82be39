import pytest

from weather_grid.weather.session import WeatherSession

SCENARIO_CONFIG = """// grid ranges
GridX_IdxRange=0-4
GridY_IdxRange=0-4

// data files
citylocation.txt
cloudcover.txt
pressure.txt
"""

SCENARIO_CITIES = """[2, 2]-7-Mid_City
"""

SCENARIO_CLOUD = """[2, 2]-80
[0, 0]-150
"""

SCENARIO_PRESSURE = """[2, 2]-50
[1, 2]-60
[3, 2]-40
[2, 1]-50
[2, 3]-50
[1, 1]-0
[3, 3]-0
[1, 3]-0
[3, 1]-0
"""


def write_files(directory, config=SCENARIO_CONFIG, cities=SCENARIO_CITIES,
                cloud=SCENARIO_CLOUD, pressure=SCENARIO_PRESSURE):
    """Write a configuration and its data files, skipping any passed as None."""
    for name, text in [('citylocation.txt', cities), ('cloudcover.txt', cloud), ('pressure.txt', pressure)]:
        if text is not None:
            (directory / name).write_text(text)
    config_path = directory / 'config.txt'
    config_path.write_text(config)
    return config_path


@pytest.fixture
def scenario_config(tmp_path):
    return write_files(tmp_path)


@pytest.fixture
def loaded_session(scenario_config):
    session = WeatherSession()
    session.load(str(scenario_config))
    return session


@pytest.fixture
def make_config(tmp_path):
    """Factory: make_config(cities=..., pressure=None, ...) -> config path."""
    def _make(**files):
        return write_files(tmp_path, **files)
    return _make
