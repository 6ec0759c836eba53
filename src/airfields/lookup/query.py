"""Fuzzy country lookup with nested airports and runways."""

from typing import List, Optional, Sequence

from airfields.lookup.models import MATCH_COLUMNS, AirportMatch, CountryMatch
from airfields.reference.index import Index, normalize, require_index
from airfields.reference.models import Country


class QueryEngine:
    """Resolves free-text country queries against an Index."""

    def __init__(self, index: Optional[Index]):
        self._index = index

    def lookup_country(self, text: str) -> List[CountryMatch]:
        """Find countries by code or by partial name.

        An exact code match (case-insensitive) wins outright. Otherwise every
        country whose name contains the text is returned, prefix matches
        first, then by name. Blank text or no match gives an empty list.
        """
        index = require_index(self._index)
        query = normalize(text or "")
        if not query:
            return []

        country = index.country(query)
        if country is not None:
            return [self._assemble(index, country)]

        matched = [c for c in index.candidates(query) if query in normalize(c.name)]
        matched.sort(key=lambda c: (not normalize(c.name).startswith(query), c.name, c.code))
        return [self._assemble(index, c) for c in matched]

    def lookup_country_frame(self, text: str):
        """lookup_country() flattened into a DataFrame, one row per runway."""
        return matches_to_dataframe(self.lookup_country(text))

    def _assemble(self, index: Index, country: Country) -> CountryMatch:
        return CountryMatch(
            country=country,
            airports=tuple(
                AirportMatch(airport=a, runways=index.runways_of(a))
                for a in index.airports_of(country)
            ),
        )


def matches_to_dataframe(matches: Sequence[CountryMatch]):
    """Concatenate the flattened rows of several matches into one DataFrame."""
    import pandas as pd

    rows = [row for m in matches for row in m.rows()]
    return pd.DataFrame(rows, columns=MATCH_COLUMNS)
