"""
# Catalog

Sources of the country list the quiz draws from, and the validation every catalog goes through before a game starts.
"""

from typing import Iterable, Optional
from loguru import logger

import pytz
import json

from flaghunt.Classes.Country import Country

MINIMUM_CATALOG_SIZE = 4 # Target + 3 distractors

class CatalogError(ValueError):
    pass

DEFAULT_CATALOG: tuple[Country, ...] = (
    Country("ar", "Argentina"),
    Country("au", "Australia"),
    Country("at", "Austria"),
    Country("be", "Belgium"),
    Country("br", "Brazil"),
    Country("ca", "Canada"),
    Country("cl", "Chile"),
    Country("cn", "China"),
    Country("co", "Colombia"),
    Country("hr", "Croatia"),
    Country("cz", "Czechia"),
    Country("dk", "Denmark"),
    Country("eg", "Egypt"),
    Country("fi", "Finland"),
    Country("fr", "France"),
    Country("de", "Germany"),
    Country("gr", "Greece"),
    Country("in", "India"),
    Country("id", "Indonesia"),
    Country("ie", "Ireland"),
    Country("il", "Israel"),
    Country("it", "Italy"),
    Country("jm", "Jamaica"),
    Country("jp", "Japan"),
    Country("ke", "Kenya"),
    Country("mx", "Mexico"),
    Country("ma", "Morocco"),
    Country("nl", "Netherlands"),
    Country("nz", "New Zealand"),
    Country("ng", "Nigeria"),
    Country("no", "Norway"),
    Country("pe", "Peru"),
    Country("ph", "Philippines"),
    Country("pl", "Poland"),
    Country("pt", "Portugal"),
    Country("kr", "South Korea"),
    Country("za", "South Africa"),
    Country("es", "Spain"),
    Country("se", "Sweden"),
    Country("ch", "Switzerland"),
    Country("th", "Thailand"),
    Country("tr", "Turkey"),
    Country("ua", "Ukraine"),
    Country("gb", "United Kingdom"),
    Country("us", "United States"),
    Country("vn", "Vietnam"),
)

def validate_catalog(catalog: Iterable[Country]) -> tuple[Country, ...]:
    countries = tuple(catalog)
    codes = [country.code for country in countries]

    duplicates = sorted({code for code in codes if codes.count(code) > 1})
    if duplicates:
        raise CatalogError(f"Duplicate country codes in catalog: {', '.join(duplicates)}")

    if len(countries) < MINIMUM_CATALOG_SIZE:
        raise CatalogError(
            f"The catalog holds {len(countries)} countries, at least {MINIMUM_CATALOG_SIZE} are needed"
        )

    logger.debug("Validated catalog of {} countries", len(countries))
    return countries

def parse_catalog(entries: list[dict]) -> tuple[Country, ...]:
    countries: list[Country] = []

    for position, entry in enumerate(entries):
        try:
            code = str(entry["code"]).strip().lower()
            name = str(entry["name"]).strip()
        except (KeyError, TypeError):
            raise CatalogError(f"Catalog entry #{position + 1} needs both 'code' and 'name'")

        if not code or not name:
            raise CatalogError(f"Catalog entry #{position + 1} has an empty code or name")

        countries.append(Country(code, name))

    return validate_catalog(countries)

def load_catalog(path: str) -> tuple[Country, ...]:
    logger.info("Loading catalog from '{}'", path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            entries = json.load(f)
    except OSError as e:
        raise CatalogError(f"Could not read the catalog '{path}': {e}")
    except json.decoder.JSONDecodeError as e:
        raise CatalogError(f"The catalog '{path}' is not valid JSON: {e}")

    if not isinstance(entries, list):
        raise CatalogError(f"The catalog '{path}' must hold a JSON list of countries")

    return parse_catalog(entries)

def world_catalog() -> tuple[Country, ...]:
    """
    Every ISO 3166 country known to the tz database.
    """

    countries = [
        Country(code.lower(), name)
        for code, name in sorted(pytz.country_names.items(), key=lambda item: item[1])
    ]

    logger.debug("Built world catalog of {} countries from pytz", len(countries))
    return validate_catalog(countries)

def resolve_catalog(path: Optional[str], world: bool) -> tuple[Country, ...]:
    if path:
        return load_catalog(path)

    if world:
        return world_catalog()

    return validate_catalog(DEFAULT_CATALOG)
