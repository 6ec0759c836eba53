"""Airfield service - owns the current Index and answers queries and reports."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from airfields.config import DEFAULT_REPORT_SIZE, data_dir
from airfields.lookup.models import AirportCountReport, CountryMatch
from airfields.lookup.query import QueryEngine
from airfields.lookup.reports import ReportEngine
from airfields.reference.index import Index
from airfields.reference.loader import load_directory
from airfields.reference.models import Country

logger = logging.getLogger(__name__)


class AirfieldService:
    """Query and report facade over one immutable Index at a time.

    reload() builds a new Index and swaps it in only once the build succeeds,
    so readers holding the old one keep a consistent snapshot and a failed
    reload leaves the previous Index in place.
    """

    def __init__(self, index: Optional[Index] = None, data_path: Optional[Path] = None):
        self._index = index
        self._data_path = Path(data_path) if data_path else data_dir()

    @classmethod
    def from_directory(cls, path: Optional[Path] = None) -> "AirfieldService":
        """Create a service and load the three CSV files from path."""
        service = cls(data_path=path)
        service.reload()
        return service

    @property
    def index(self) -> Optional[Index]:
        return self._index

    def reload(self, path: Optional[Path] = None) -> Index:
        """Load a fresh Index from path (default: the configured data directory)."""
        path = Path(path) if path else self._data_path
        index = load_directory(path)
        self._index = index
        self._data_path = path
        logger.info(
            "Serving %d countries, %d airports, %d runways",
            len(index.countries),
            len(index.airports),
            len(index.runways),
        )
        return index

    def lookup_country(self, text: str) -> List[CountryMatch]:
        return QueryEngine(self._index).lookup_country(text)

    def top_bottom_airport_counts(self, n: int = DEFAULT_REPORT_SIZE) -> AirportCountReport:
        return ReportEngine(self._index).top_bottom_airport_counts(n)

    def surface_types_by_country(self) -> Dict[Country, Dict[str, int]]:
        return ReportEngine(self._index).surface_types_by_country()

    def top_runway_identifiers(self, n: int = DEFAULT_REPORT_SIZE, end: str = "le") -> List[Tuple[str, int]]:
        return ReportEngine(self._index).top_runway_identifiers(n, end)

    def queries(self) -> QueryEngine:
        """QueryEngine bound to the current Index."""
        return QueryEngine(self._index)

    def reports(self) -> ReportEngine:
        """ReportEngine bound to the current Index."""
        return ReportEngine(self._index)
