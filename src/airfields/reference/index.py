"""Read-only lookup structures derived from loaded entities."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Set, Tuple

from airfields.reference.errors import PreconditionError
from airfields.reference.models import Airport, Country, Runway

logger = logging.getLogger(__name__)

# Longest name n-gram kept in by_name_token.
TOKEN_SIZE = 3

_NO_COUNTRIES: FrozenSet[Country] = frozenset()


def normalize(text: str) -> str:
    """Normalize free text or a name for matching: trimmed and lower-cased."""
    return text.strip().lower()


def name_tokens(name: str) -> Set[str]:
    """All substrings of the normalized name up to TOKEN_SIZE characters long."""
    s = normalize(name)
    tokens = set()
    for size in range(1, TOKEN_SIZE + 1):
        for i in range(len(s) - size + 1):
            tokens.add(s[i : i + size])
    return tokens


@dataclass(frozen=True, eq=False)
class Index:
    """Immutable snapshot of one load. Build with build_index()."""

    countries: Tuple[Country, ...]
    airports: Tuple[Airport, ...]
    runways: Tuple[Runway, ...]
    by_code: Mapping[str, Country]
    by_name_token: Mapping[str, FrozenSet[Country]]
    airports_by_country: Mapping[str, Tuple[Airport, ...]]
    runways_by_airport: Mapping[int, Tuple[Runway, ...]]

    @property
    def is_empty(self) -> bool:
        return not self.countries

    def country(self, code: str) -> Optional[Country]:
        """Look up a country by code, case-insensitively."""
        if not code:
            return None
        return self.by_code.get(code.strip().upper())

    def airports_of(self, country: Country) -> Tuple[Airport, ...]:
        return self.airports_by_country.get(country.code, ())

    def runways_of(self, airport: Airport) -> Tuple[Runway, ...]:
        return self.runways_by_airport.get(airport.id, ())

    def candidates(self, fragment: str) -> FrozenSet[Country]:
        """Countries whose name may contain fragment.

        Exact for fragments up to TOKEN_SIZE characters; for longer fragments
        the result is a superset and callers must confirm the substring.
        """
        s = normalize(fragment)
        if not s:
            return _NO_COUNTRIES
        if len(s) <= TOKEN_SIZE:
            return self.by_name_token.get(s, _NO_COUNTRIES)

        result: Optional[FrozenSet[Country]] = None
        for i in range(len(s) - TOKEN_SIZE + 1):
            found = self.by_name_token.get(s[i : i + TOKEN_SIZE], _NO_COUNTRIES)
            result = found if result is None else result & found
            if not result:
                return _NO_COUNTRIES
        return result or _NO_COUNTRIES


def build_index(
    countries: Tuple[Country, ...],
    airports: Tuple[Airport, ...],
    runways: Tuple[Runway, ...],
) -> Index:
    """Build the Index. Entities must already be validated by the loader.

    Every country gets an airports_by_country entry and every airport a
    runways_by_airport entry, even when empty.
    """
    by_code: Dict[str, Country] = {}
    tokens: Dict[str, Set[Country]] = {}
    airports_by_code: Dict[str, List[Airport]] = {}
    for country in countries:
        by_code[country.code.upper()] = country
        airports_by_code[country.code.upper()] = []
        for token in name_tokens(country.name):
            tokens.setdefault(token, set()).add(country)

    for airport in airports:
        if airport.country_code:
            airports_by_code[airport.country_code.upper()].append(airport)

    runways_by_airport: Dict[int, List[Runway]] = {a.id: [] for a in airports}
    for runway in runways:
        runways_by_airport[runway.airport_id].append(runway)

    index = Index(
        countries=tuple(countries),
        airports=tuple(airports),
        runways=tuple(runways),
        by_code=MappingProxyType(by_code),
        by_name_token=MappingProxyType({t: frozenset(cs) for t, cs in tokens.items()}),
        airports_by_country=MappingProxyType(
            {c.code: tuple(airports_by_code[c.code.upper()]) for c in countries}
        ),
        runways_by_airport=MappingProxyType(
            {airport_id: tuple(rs) for airport_id, rs in runways_by_airport.items()}
        ),
    )
    logger.debug(
        "Built index: %d countries, %d airports, %d runways, %d name tokens",
        len(countries),
        len(airports),
        len(runways),
        len(index.by_name_token),
    )
    return index


def require_index(index: Optional[Index]) -> Index:
    """Return index, or raise PreconditionError if it is missing or empty."""
    if index is None:
        raise PreconditionError("no index loaded")
    if index.is_empty:
        raise PreconditionError("index holds no countries")
    return index
