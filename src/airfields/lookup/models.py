"""Result models for country lookups and reports."""

from dataclasses import dataclass, field
from typing import List, Tuple

from airfields.reference.models import Airport, Country, Runway

MATCH_COLUMNS = [
    "country_code",
    "country_name",
    "airport_ident",
    "airport_type",
    "airport_name",
    "runway_id",
    "surface",
    "le_ident",
    "he_ident",
    "length_ft",
    "width_ft",
]


@dataclass(frozen=True)
class AirportMatch:
    """An airport with all of its runways (possibly none)."""

    airport: Airport
    runways: Tuple[Runway, ...] = ()


@dataclass(frozen=True)
class CountryMatch:
    """A matched country with all of its airports (possibly none)."""

    country: Country
    airports: Tuple[AirportMatch, ...] = ()

    @property
    def runway_count(self) -> int:
        return sum(len(a.runways) for a in self.airports)

    def rows(self) -> List[dict]:
        """Flatten to one row per runway. Parents without children keep a row."""
        base = {"country_code": self.country.code, "country_name": self.country.name}
        if not self.airports:
            return [dict.fromkeys(MATCH_COLUMNS) | base]

        rows = []
        for match in self.airports:
            airport = {
                **base,
                "airport_ident": match.airport.ident,
                "airport_type": match.airport.type,
                "airport_name": match.airport.name,
            }
            if not match.runways:
                rows.append(dict.fromkeys(MATCH_COLUMNS) | airport)
                continue
            for r in match.runways:
                rows.append(
                    {
                        **airport,
                        "runway_id": r.id,
                        "surface": r.surface,
                        "le_ident": r.le_ident,
                        "he_ident": r.he_ident,
                        "length_ft": r.length_ft,
                        "width_ft": r.width_ft,
                    }
                )
        return rows

    def to_dataframe(self):
        """Convert to pandas DataFrame."""
        import pandas as pd

        return pd.DataFrame(self.rows(), columns=MATCH_COLUMNS)


@dataclass
class AirportCountReport:
    """Countries with the most and the fewest airports."""

    top: List[Tuple[Country, int]] = field(default_factory=list)
    bottom: List[Tuple[Country, int]] = field(default_factory=list)

    def to_dataframe(self):
        """Convert to pandas DataFrame with a 'rank' column of 'top' or 'bottom'."""
        import pandas as pd

        rows = [
            {"rank": label, "country_code": c.code, "country_name": c.name, "airports": n}
            for label, entries in (("top", self.top), ("bottom", self.bottom))
            for c, n in entries
        ]
        return pd.DataFrame(rows, columns=["rank", "country_code", "country_name", "airports"])
