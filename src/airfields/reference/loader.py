"""Parse the countries, airports and runways CSV sources into entities.

Loading is fail-fast: the first malformed row aborts the whole load with a
LoadError, and dangling foreign keys abort it with a ReferentialError. No
partially built Index is ever returned.
"""

import csv
import logging
import math
import re
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from airfields.config import AIRPORTS_FILE, COUNTRIES_FILE, RUNWAYS_FILE
from airfields.reference.errors import LoadError, ReferentialError
from airfields.reference.index import Index, build_index
from airfields.reference.models import Airport, Country, Runway

logger = logging.getLogger(__name__)

COUNTRIES = "countries"
AIRPORTS = "airports"
RUNWAYS = "runways"

COUNTRY_COLUMNS = ("id", "code", "name", "continent", "wikipedia_link", "keywords")
AIRPORT_COLUMNS = ("id", "ident", "type", "name", "iso_country")
RUNWAY_COLUMNS = ("id", "airport_ref", "le_ident", "he_ident", "surface", "length_ft", "width_ft")

_INT_RE = re.compile(r"^[+-]?\d+$")

T = TypeVar("T")


class _Row:
    """One CSV record with typed, column-name based field access."""

    def __init__(self, source: str, number: int, columns: Dict[str, int], fields: Sequence[str]):
        self.source = source
        self.number = number
        self._columns = columns
        self._fields = fields

    def error(self, reason: str) -> LoadError:
        return LoadError(self.source, self.number, reason)

    def text(self, name: str) -> str:
        index = self._columns.get(name)
        if index is None:
            return ""
        return self._fields[index].strip()

    def integer(self, name: str) -> int:
        value = self.optional_integer(name)
        if value is None:
            raise self.error(f"{name} is required")
        return value

    def optional_integer(self, name: str) -> Optional[int]:
        s = self.text(name)
        if not s:
            return None
        if not _INT_RE.match(s):
            raise self.error(f"{name} is not an integer: {s!r}")
        return int(s)

    def optional_float(self, name: str) -> Optional[float]:
        s = self.text(name)
        if not s:
            return None
        try:
            value = float(s)
        except ValueError as e:
            raise self.error(f"{name} is not a number: {s!r}") from e
        if not math.isfinite(value):
            raise self.error(f"{name} is not a finite number: {s!r}")
        return value

    def flag(self, name: str) -> bool:
        s = self.text(name)
        if s in ("", "0"):
            return False
        if s == "1":
            return True
        raise self.error(f"{name} is not a 0/1 flag: {s!r}")


def _read_rows(source: str, lines: Iterable[str], required: Sequence[str]) -> Iterator[_Row]:
    """Yield records after checking the header and each record's field count."""
    reader = csv.reader(lines, strict=True)
    try:
        header = next(reader)
    except StopIteration as e:
        raise LoadError(source, 1, "missing header row") from e
    except csv.Error as e:
        raise LoadError(source, 1, f"malformed header: {e}") from e
    except UnicodeDecodeError as e:
        raise LoadError(source, 1, f"invalid text encoding: {e}") from e

    header = [h.strip() for h in header]
    duplicated = sorted({h for h in header if header.count(h) > 1})
    if duplicated:
        raise LoadError(source, 1, f"duplicate column(s): {', '.join(duplicated)}")
    missing = [c for c in required if c not in header]
    if missing:
        raise LoadError(source, 1, f"missing column(s): {', '.join(missing)}")
    columns = {name: i for i, name in enumerate(header)}

    number = 1
    try:
        for number, fields in enumerate(reader, start=2):
            if not fields:
                continue
            if len(fields) != len(header):
                raise LoadError(
                    source, number, f"expected {len(header)} fields, got {len(fields)}"
                )
            yield _Row(source, number, columns, fields)
    except csv.Error as e:
        raise LoadError(source, number + 1, f"malformed quoting: {e}") from e
    except UnicodeDecodeError as e:
        raise LoadError(source, number + 1, f"invalid text encoding: {e}") from e


def _parse(
    source: str,
    lines: Iterable[str],
    required: Sequence[str],
    build: Callable[[_Row], T],
) -> List[Tuple[int, T]]:
    parsed = [(row.number, build(row)) for row in _read_rows(source, lines, required)]
    logger.info("Parsed %d %s", len(parsed), source)
    return parsed


def _split_keywords(value: str) -> Tuple[str, ...]:
    return tuple(k.strip() for k in value.split(",") if k.strip())


def _country(row: _Row) -> Country:
    code = row.text("code")
    if not code:
        raise row.error("code is required")
    return Country(
        id=row.integer("id"),
        code=code,
        name=row.text("name"),
        continent=row.text("continent"),
        wikipedia_link=row.text("wikipedia_link"),
        keywords=_split_keywords(row.text("keywords")),
    )


def _airport(row: _Row) -> Airport:
    return Airport(
        id=row.integer("id"),
        ident=row.text("ident"),
        type=row.text("type"),
        name=row.text("name"),
        country_code=row.text("iso_country"),
        latitude=row.optional_float("latitude_deg"),
        longitude=row.optional_float("longitude_deg"),
        municipality=row.text("municipality"),
        iata_code=row.text("iata_code"),
    )


def _runway(row: _Row) -> Runway:
    return Runway(
        id=row.integer("id"),
        airport_id=row.integer("airport_ref"),
        surface=row.text("surface"),
        le_ident=row.text("le_ident"),
        he_ident=row.text("he_ident"),
        length_ft=row.optional_integer("length_ft"),
        width_ft=row.optional_integer("width_ft"),
        lighted=row.flag("lighted"),
        closed=row.flag("closed"),
    )


def _check_unique(source: str, rows: List[Tuple[int, T]], key: Callable[[T], object], label: str) -> None:
    seen = set()
    for number, entity in rows:
        k = key(entity)
        if k in seen:
            raise LoadError(source, number, f"duplicate {label} {k!r}")
        seen.add(k)


def _parse_countries(lines: Iterable[str]) -> List[Tuple[int, Country]]:
    rows = _parse(COUNTRIES, lines, COUNTRY_COLUMNS, _country)
    _check_unique(COUNTRIES, rows, lambda c: c.code.upper(), "country code")
    return rows


def _parse_airports(lines: Iterable[str]) -> List[Tuple[int, Airport]]:
    rows = _parse(AIRPORTS, lines, AIRPORT_COLUMNS, _airport)
    _check_unique(AIRPORTS, rows, lambda a: a.id, "airport id")
    return rows


def _parse_runways(lines: Iterable[str]) -> List[Tuple[int, Runway]]:
    rows = _parse(RUNWAYS, lines, RUNWAY_COLUMNS, _runway)
    _check_unique(RUNWAYS, rows, lambda r: r.id, "runway id")
    return rows


def parse_countries(lines: Iterable[str]) -> Tuple[Country, ...]:
    """Parse countries.csv lines. Country codes must be unique (case-insensitive)."""
    return tuple(c for _, c in _parse_countries(lines))


def parse_airports(lines: Iterable[str]) -> Tuple[Airport, ...]:
    """Parse airports.csv lines. Airport ids must be unique."""
    return tuple(a for _, a in _parse_airports(lines))


def parse_runways(lines: Iterable[str]) -> Tuple[Runway, ...]:
    """Parse runways.csv lines. Runway ids must be unique."""
    return tuple(r for _, r in _parse_runways(lines))


def _check_references(
    country_rows: List[Tuple[int, Country]],
    airport_rows: List[Tuple[int, Airport]],
    runway_rows: List[Tuple[int, Runway]],
) -> None:
    codes = {c.code.upper() for _, c in country_rows}
    for number, airport in airport_rows:
        if airport.country_code and airport.country_code.upper() not in codes:
            raise ReferentialError(
                AIRPORTS,
                number,
                f"airport {airport.ident!r} references unknown country {airport.country_code!r}",
            )

    airport_ids = {a.id for _, a in airport_rows}
    for number, runway in runway_rows:
        if runway.airport_id not in airport_ids:
            raise ReferentialError(
                RUNWAYS,
                number,
                f"runway {runway.id} references unknown airport {runway.airport_id}",
            )


def load(
    countries_rows: Iterable[str],
    airports_rows: Iterable[str],
    runways_rows: Iterable[str],
) -> Index:
    """Parse and validate all three sources, then build the Index.

    Each source is an iterable of CSV text lines (an open file works) whose
    first record is the header. Raises LoadError or ReferentialError.
    """
    country_rows = _parse_countries(countries_rows)
    airport_rows = _parse_airports(airports_rows)
    runway_rows = _parse_runways(runways_rows)
    _check_references(country_rows, airport_rows, runway_rows)
    return build_index(
        tuple(c for _, c in country_rows),
        tuple(a for _, a in airport_rows),
        tuple(r for _, r in runway_rows),
    )


def load_directory(path: Path) -> Index:
    """Load countries.csv, airports.csv and runways.csv from a directory."""
    path = Path(path)
    with open(path / COUNTRIES_FILE, newline="", encoding="utf-8") as countries, open(
        path / AIRPORTS_FILE, newline="", encoding="utf-8"
    ) as airports, open(path / RUNWAYS_FILE, newline="", encoding="utf-8") as runways:
        index = load(countries, airports, runways)
    logger.info("Loaded airfield data from %s", path)
    return index
