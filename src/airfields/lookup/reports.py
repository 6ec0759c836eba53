"""Aggregate reports over a loaded Index."""

from collections import Counter
from typing import Dict, List, Optional, Tuple

import pandas as pd

from airfields.config import DEFAULT_REPORT_SIZE
from airfields.lookup.models import AirportCountReport
from airfields.reference.index import Index, require_index
from airfields.reference.models import Country, Runway

UNKNOWN_SURFACE = "unknown"

RUNWAY_ENDS = ("le", "he")


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"Report size must be non-negative, got {n}")


def surface_key(runway: Runway) -> str:
    """Surface category for a runway; blank surfaces become 'unknown'."""
    return runway.surface.strip() or UNKNOWN_SURFACE


class ReportEngine:
    """Computes airport count, surface type and runway identifier reports.

    All reports include countries without airports or runways.
    """

    def __init__(self, index: Optional[Index]):
        self._index = index

    def airport_counts(self) -> List[Tuple[Country, int]]:
        """Airport count for every country, in load order."""
        index = require_index(self._index)
        return [(c, len(index.airports_of(c))) for c in index.countries]

    def top_bottom_airport_counts(self, n: int = DEFAULT_REPORT_SIZE) -> AirportCountReport:
        """Top n countries by airport count (descending) and bottom n (ascending).

        Ties are broken by country name. With n or fewer countries per side a
        country can appear in both lists.
        """
        _check_size(n)
        counts = self.airport_counts()
        top = sorted(counts, key=lambda e: (-e[1], e[0].name, e[0].code))
        bottom = sorted(counts, key=lambda e: (e[1], e[0].name, e[0].code))
        return AirportCountReport(top=top[:n], bottom=bottom[:n])

    def surface_types_by_country(self) -> Dict[Country, Dict[str, int]]:
        """Runway count per surface type for every country."""
        index = require_index(self._index)
        result: Dict[Country, Dict[str, int]] = {}
        for country in index.countries:
            surfaces: Counter[str] = Counter()
            for airport in index.airports_of(country):
                for runway in index.runways_of(airport):
                    surfaces[surface_key(runway)] += 1
            result[country] = dict(sorted(surfaces.items(), key=lambda e: (-e[1], e[0])))
        return result

    def top_runway_identifiers(
        self, n: int = DEFAULT_REPORT_SIZE, end: str = "le"
    ) -> List[Tuple[str, int]]:
        """Most common runway identifiers, by count then identifier.

        end selects the low ('le') or high ('he') end identifier. Blank
        identifiers are not counted.
        """
        _check_size(n)
        if end not in RUNWAY_ENDS:
            raise ValueError(f"Invalid runway end: {end}. Expected one of {', '.join(RUNWAY_ENDS)}")
        index = require_index(self._index)

        attr = f"{end}_ident"
        idents: Counter[str] = Counter()
        for runway in index.runways:
            ident = getattr(runway, attr).strip()
            if ident:
                idents[ident] += 1
        return sorted(idents.items(), key=lambda e: (-e[1], e[0]))[:n]

    def airport_counts_frame(self, n: int = DEFAULT_REPORT_SIZE) -> pd.DataFrame:
        return self.top_bottom_airport_counts(n).to_dataframe()

    def surface_types_frame(self) -> pd.DataFrame:
        """Long-format surface report: one row per (country, surface)."""
        rows = []
        for country, surfaces in self.surface_types_by_country().items():
            if not surfaces:
                rows.append(
                    {"country_code": country.code, "country_name": country.name, "surface": None, "runways": 0}
                )
            for surface, count in surfaces.items():
                rows.append(
                    {"country_code": country.code, "country_name": country.name, "surface": surface, "runways": count}
                )
        return pd.DataFrame(rows, columns=["country_code", "country_name", "surface", "runways"])

    def runway_identifiers_frame(self, n: int = DEFAULT_REPORT_SIZE, end: str = "le") -> pd.DataFrame:
        rows = [{"ident": i, "runways": c} for i, c in self.top_runway_identifiers(n, end)]
        return pd.DataFrame(rows, columns=["ident", "runways"])
