"""Entities, CSV loading and the lookup index."""

from airfields.reference.errors import AirfieldsError, LoadError, PreconditionError, ReferentialError
from airfields.reference.index import Index, build_index, require_index
from airfields.reference.loader import load, load_directory, parse_airports, parse_countries, parse_runways
from airfields.reference.models import Airport, Country, Runway

__all__ = [
    "Airport",
    "AirfieldsError",
    "Country",
    "Index",
    "LoadError",
    "PreconditionError",
    "ReferentialError",
    "Runway",
    "build_index",
    "require_index",
    "load",
    "load_directory",
    "parse_airports",
    "parse_countries",
    "parse_runways",
]
