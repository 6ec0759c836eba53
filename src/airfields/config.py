"""Runtime configuration: data locations and defaults."""

import os
from pathlib import Path
from typing import Optional

DATA_DIR_ENV = "AIRFIELDS_DATA_DIR"
DEFAULT_DATA_DIR = Path("data")

DEFAULT_REPORT_SIZE = 10

COUNTRIES_FILE = "countries.csv"
AIRPORTS_FILE = "airports.csv"
RUNWAYS_FILE = "runways.csv"
DATASET_FILES = (COUNTRIES_FILE, AIRPORTS_FILE, RUNWAYS_FILE)

DATASET_BASE_URL = "https://davidmegginson.github.io/ourairports-data"


def data_dir(override: Optional[str] = None) -> Path:
    """Resolve the data directory: explicit override, then env var, then ./data."""
    if override:
        return Path(override)
    env = os.environ.get(DATA_DIR_ENV, "").strip()
    if env:
        return Path(env)
    return DEFAULT_DATA_DIR
