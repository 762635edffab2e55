# data.py

from pathlib import Path
from typing import Dict, List
import string

# Movies on offer and their flat per-seat price.
MOVIES: Dict[str, Dict] = {
    "Mufasa": {
        "id": "mufasa",
        "price": 300,
    },
    "Pushpa-2": {
        "id": "pushpa_2",
        "price": 330,
    },
    "Ganguva": {
        "id": "ganguva",
        "price": 200,
    },
}

ROWS: List[str] = list(string.ascii_uppercase)  # A–Z
NUM_COLUMNS: int = 32                           # 1–32

GST_RATE: float = 0.18

BASE_DIR = Path(__file__).resolve().parent
RESERVATIONS_DIR = BASE_DIR / "reservations"
TICKETS_DIR = BASE_DIR / "tickets"

LANGUAGE: str = "en"
LOG_LEVEL: str = "WARNING"


def get_movie_titles() -> List[str]:
    return list(MOVIES.keys())


def get_movie_id(title: str) -> str:
    info = MOVIES.get(title)
    if not info:
        return ""
    return info["id"]


def get_movie_price(title: str) -> int:
    info = MOVIES.get(title)
    if not info:
        return 0
    return info["price"]
