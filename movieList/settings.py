from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Optional overrides; every value has a working default
load_dotenv(BASE_DIR / "settings.env")

MOVIES_URL      = os.getenv(
    "MOVIES_URL",
    "https://raw.githubusercontent.com/RyanHemrick/star_wars_movie_app/master/movies.json",
)
POSTER_BASE_URL = os.getenv(
    "POSTER_BASE_URL",
    "https://raw.githubusercontent.com/RyanHemrick/star_wars_app/master/public/images/",
)

try:
    REQUEST_TIMEOUT = float(os.getenv("MOVIES_TIMEOUT", "10"))
except ValueError:
    raise EnvironmentError("MOVIES_TIMEOUT in .env must be a number of seconds")

# File paths
LOG_PATH = Path(os.getenv("MOVIES_LOG_PATH", BASE_DIR / "movie_list_debug.log"))

# UI constants
WINDOW_TITLE  = "Movies"
ALERT_MESSAGE = "Sorry, something went wrong. :("
ACCENT_COLOR  = "#3b82f6"
POSTER_SIZE   = 64
