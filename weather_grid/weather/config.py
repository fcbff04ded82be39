# config.py

# Data files named in the configuration file
CITY_LOCATION_FILE = "citylocation.txt"
CLOUD_COVER_FILE = "cloudcover.txt"
PRESSURE_FILE = "pressure.txt"

# Configuration file keys
GRID_PREFIX = "Grid"
GRID_X_KEY = "GridX_IdxRange"
GRID_Y_KEY = "GridY_IdxRange"
COMMENT_PREFIXES = ("//", "#")

# Largest grid accepted from a configuration file
MAX_GRID_CELLS = 1_000_000

# Percentage fields (cloud cover, pressure)
MIN_PERCENTAGE = 0
MAX_PERCENTAGE = 100

# City size label -> severity rank
CITY_SIZE_RANKS = {
    "Small_City": 1,
    "Mid_City": 2,
    "Big_City": 3,
}

# Low / Medium / High thresholds
LOW_THRESHOLD = 35
MEDIUM_THRESHOLD = 65

# Rain probability (%) keyed by (pressure symbol, cloud cover symbol)
RAIN_PROBABILITY = {
    ("L", "H"): 90,
    ("L", "M"): 80,
    ("L", "L"): 70,
    ("M", "H"): 60,
    ("M", "M"): 50,
    ("M", "L"): 40,
    ("H", "H"): 30,
    ("H", "M"): 20,
    ("H", "L"): 10,
}

# Logging
LOG_FILE = None  # None logs to stderr
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(name)s::%(levelname)s - %(message)s"

# Output
MAP_IMAGE_FILE = "weather_maps.png"
SHOW_PROGRESS = False  # tqdm progress bars while reading data files

# Web view
WEB_HOST = "127.0.0.1"
WEB_PORT = 5000
