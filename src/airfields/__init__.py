"""Country, airport and runway lookups over OurAirports data."""

from airfields.lookup.query import QueryEngine
from airfields.lookup.reports import ReportEngine
from airfields.lookup.service import AirfieldService
from airfields.reference.errors import LoadError, PreconditionError, ReferentialError
from airfields.reference.index import Index
from airfields.reference.loader import load, load_directory

__all__ = [
    "AirfieldService",
    "Index",
    "LoadError",
    "PreconditionError",
    "QueryEngine",
    "ReferentialError",
    "ReportEngine",
    "load",
    "load_directory",
]
