import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Days between consecutive ladder events
LADDER_DAY_INTERVAL_DAYS = int(os.getenv("LADDER_DAY_INTERVAL_DAYS", "7"))

# How long a ladder day stays "next" after it started (it is being played)
LADDER_DAY_DISPLAY_HOURS = int(os.getenv("LADDER_DAY_DISPLAY_HOURS", "24"))

ROSTER_SIZE = 4
MIN_TEAMS = 4
ROUND_COUNT = 2

LADDER_MODES: List[str] = ["SZ", "TC", "RM", "CB"]

LADDER_STAGES: List[str] = [
    "The Reef",
    "Musselforge Fitness",
    "Starfish Mainstage",
    "Humpback Pump Track",
    "Inkblot Art Academy",
    "Sturgeon Shipyard",
    "Manta Maria",
    "Snapper Canal",
    "Blackbelly Skatepark",
    "MakoMart",
    "Shellendorf Institute",
    "Goby Arena",
    "Piranha Pit",
    "Camp Triggerfish",
    "Wahoo World",
    "New Albacore Hotel",
    "Ancho-V Games",
    "Skipper Pavilion",
]

# Seconds a SQLite connection waits on a locked database before failing
SQLITE_BUSY_TIMEOUT = float(os.getenv("SQLITE_BUSY_TIMEOUT", "15"))
