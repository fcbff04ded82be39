#!/usr/bin/env python3
"""
Weather Information Processing System

Interactive menu over standard input/output:
1. Read and process a configuration file
2-6. Display the city, cloud cover and pressure maps
7. Show the weather forecast summary
8. Export the cloud cover and pressure maps as an image
9. Exit
"""
import sys

from weather_grid.common import get_logger, setup_logging
from weather_grid.errors import FileOpenError
from weather_grid.map.plot import save_weather_maps
from weather_grid.map.render import MapKind, MapLayout, render_map, render_summary
from weather_grid.weather.session import WeatherSession

logger = get_logger(__name__)

MAP_CHOICES = {
    "2": MapKind.CITY,
    "3": MapKind.CLOUD_INDEX,
    "4": MapKind.CLOUD_LMH,
    "5": MapKind.PRESSURE_INDEX,
    "6": MapKind.PRESSURE_LMH,
}

MENU_TEXT = """--------------------------------------------------
 Welcome to Weather Information Processing System
1.\tRead and Process configuration file
2.\tDisplay City Map
3.\tDisplay Cloud Coverage Map (Cloudiness Index)
4.\tDisplay Cloud Coverage Map (LMH Symbol)
5.\tDisplay Atmospheric Pressure Coverage Map (Pressure Index)
6.\tDisplay Atmospheric Pressure Coverage Map (LMH Symbol)
7.\tShow Weather Forecast Summary
8.\tExport Coverage Maps as Image
9.\tExit"""


def prompt_to_enter():
    try:
        input("\nPress <Enter> to go back to main menu ... ")
    except EOFError:
        pass


def load_configuration(session: WeatherSession, file_name: str) -> bool:
    try:
        session.load(file_name)
    except FileOpenError as e:
        logger.debug("Config not loaded: %s", e)
        print("Error: Unable to open file! Please try again!")
        return False
    return True


def run_menu(session: WeatherSession = None) -> WeatherSession:
    """Loop until the user exits or stdin is closed."""
    session = session or WeatherSession()
    layout = None

    while True:
        print(MENU_TEXT)
        try:
            choice = input("Please enter your choice (1-9): ").strip()
        except EOFError:
            print("\nExiting...")
            break

        if choice == "1":
            try:
                file_name = input("Please enter file name: ").strip()
            except EOFError:
                print("\nExiting...")
                break
            if load_configuration(session, file_name):
                layout = MapLayout.from_bounds(session.grid.bounds)
        elif choice in MAP_CHOICES or choice in ("7", "8"):
            if not session.processed:
                print("Error: You must read and process the file first (Option 1)!")
                continue
            if choice in MAP_CHOICES:
                kind = MAP_CHOICES[choice]
                print(kind.title)
                print(render_map(session.grid, kind, layout))
            elif choice == "7":
                print("Weather Forecast Summary")
                print(render_summary(session.registry))
            else:
                save_weather_maps(session.grid)
            prompt_to_enter()
        elif choice == "9":
            print("Exiting...")
            break
        else:
            print("Invalid choice. Please try again.")

    return session


def main():
    """Console entry point. An optional argument names a configuration file to load first."""
    setup_logging()
    session = WeatherSession()
    if len(sys.argv) > 1:
        load_configuration(session, sys.argv[1])
    run_menu(session)


if __name__ == "__main__":
    main()
