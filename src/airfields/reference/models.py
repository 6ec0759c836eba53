"""Immutable entities parsed from the OurAirports datasets."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Country:
    """Country record (countries.csv)."""

    id: int
    code: str
    name: str
    continent: str = ""
    wikipedia_link: str = ""
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Airport:
    """Airport record (airports.csv). country_code may be empty."""

    id: int
    ident: str
    type: str
    name: str
    country_code: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    municipality: str = ""
    iata_code: str = ""


@dataclass(frozen=True)
class Runway:
    """Runway record (runways.csv)."""

    id: int
    airport_id: int
    surface: str = ""
    le_ident: str = ""
    he_ident: str = ""
    length_ft: Optional[int] = None
    width_ft: Optional[int] = None
    lighted: bool = False
    closed: bool = False
