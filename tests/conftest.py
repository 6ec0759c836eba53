"""Pytest configuration and fixtures."""

import io
import sys
import textwrap
from pathlib import Path

import pytest

# Ensure src and scripts are on path when running tests without installed package
root = Path(__file__).resolve().parent.parent
for path in (root / "src", root / "scripts"):
    if path.exists() and str(path) not in sys.path:
        sys.path.insert(0, str(path))

from airfields.reference.loader import load  # noqa: E402

COUNTRIES_CSV = """\
"id","code","name","continent","wikipedia_link","keywords"
302755,"ZW","Zimbabwe","AF","https://en.wikipedia.org/wiki/Zimbabwe",
302791,"US","United States","NA","https://en.wikipedia.org/wiki/United_States","America"
302672,"NL","Netherlands","EU","https://en.wikipedia.org/wiki/Netherlands","Holland"
302616,"NG","Nigeria","AF","https://en.wikipedia.org/wiki/Nigeria",
302615,"NE","Niger","AF","https://en.wikipedia.org/wiki/Niger",
302634,"GB","United Kingdom","EU","https://en.wikipedia.org/wiki/United_Kingdom","Great Britain, ""UK"", England"
"""

AIRPORTS_CSV = """\
"id","ident","type","name","latitude_deg","longitude_deg","continent","iso_country","municipality","iata_code"
3622,"KJFK","large_airport","John F Kennedy International Airport",40.63980103,-73.77890015,"NA","US","New York","JFK"
3484,"KLAX","large_airport","Los Angeles International Airport",33.942501,-118.407997,"NA","US","Los Angeles","LAX"
6523,"00A","heliport","Total RF Heliport",40.070985,-74.933689,"NA","US","Bensalem",""
2513,"EHAM","large_airport","Amsterdam Airport Schiphol",52.308601,4.76389,"EU","NL","Amsterdam","AMS"
2434,"EGLL","large_airport","London Heathrow Airport",51.4706,-0.461941,"EU","GB","London","LHR"
"""

RUNWAYS_CSV = """\
"id","airport_ref","airport_ident","length_ft","width_ft","surface","lighted","closed","le_ident","he_ident"
1,3622,"KJFK",14511,200,"ASP",1,0,"04L","22R"
2,3622,"KJFK",12079,200,"ASP",1,0,"13R","31L"
3,3622,"KJFK",10000,150,"CON",1,0,"04R","22L"
4,3484,"KLAX",12923,150,"CON",1,0,"06R","24L"
5,3484,"KLAX",11095,200,"",1,0,"07L","25R"
6,2513,"EHAM",11483,148,"ASP",1,0,"18R","36L"
7,2513,"EHAM",10827,148,"asp",1,0,"04","22"
8,2434,"EGLL",12799,164,"ASP",1,0,"09L","27R"
9,2434,"EGLL",12001,164,"ASP",1,0,"09R","27L"
10,2434,"EGLL",,,"GRS",0,1,"04L","22R"
11,2513,"EHAM",,,"",0,0,"","H1"
"""


def csv_source(text: str) -> io.StringIO:
    """File-like CSV source from (possibly indented) text."""
    return io.StringIO(textwrap.dedent(text))


@pytest.fixture
def index():
    """Index over the six-country sample dataset."""
    return load(csv_source(COUNTRIES_CSV), csv_source(AIRPORTS_CSV), csv_source(RUNWAYS_CSV))


@pytest.fixture
def zw_us_index():
    """Zimbabwe without airports, United States with three."""
    countries = """\
    id,code,name,continent,wikipedia_link,keywords
    1,ZW,Zimbabwe,AF,,
    2,US,United States,NA,,
    """
    airports = """\
    id,ident,type,name,iso_country
    10,KJFK,large_airport,John F Kennedy International Airport,US
    11,KLAX,large_airport,Los Angeles International Airport,US
    12,KORD,large_airport,Chicago O'Hare International Airport,US
    """
    runways = """\
    id,airport_ref,le_ident,he_ident,surface,length_ft,width_ft
    100,10,04L,22R,ASP,14511,200
    """
    return load(csv_source(countries), csv_source(airports), csv_source(runways))


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding the sample dataset as CSV files."""
    (tmp_path / "countries.csv").write_text(COUNTRIES_CSV, encoding="utf-8")
    (tmp_path / "airports.csv").write_text(AIRPORTS_CSV, encoding="utf-8")
    (tmp_path / "runways.csv").write_text(RUNWAYS_CSV, encoding="utf-8")
    return tmp_path
