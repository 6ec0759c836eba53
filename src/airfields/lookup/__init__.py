"""Country lookups and aggregate reports over a loaded Index."""

from airfields.lookup.models import AirportCountReport, AirportMatch, CountryMatch
from airfields.lookup.query import QueryEngine
from airfields.lookup.reports import ReportEngine
from airfields.lookup.service import AirfieldService

__all__ = [
    "AirfieldService",
    "AirportCountReport",
    "AirportMatch",
    "CountryMatch",
    "QueryEngine",
    "ReportEngine",
]
