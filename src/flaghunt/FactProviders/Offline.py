"""
# Offline

Facts assembled from bundled country data, for playing without an API key.
"""

from typing import Optional
from loguru import logger
from countryinfo import CountryInfo

import pytz

def timezone_count(code: str) -> int:
    try:
        return len(pytz.country_timezones[code.upper()])
    except KeyError:
        logger.trace("Country {} has no tz list in pytz", code)
        return 0

class OfflineFactProvider:
    def __init__(self, codes_by_name: Optional[dict[str, str]] = None) -> None:
        self.codes_by_name: dict[str, str] = codes_by_name or {}

    def fetch_fact(self, country_name: str, was_correct: bool) -> Optional[str]:
        sentences: list[str] = []

        try:
            country_info = CountryInfo(country_name)
            capital = country_info.capital()
            region = country_info.region()
            subregion = country_info.subregion()
            population = country_info.population()
        except Exception:
            logger.trace("CountryInfo lookup failed for {}", country_name)
        else:
            if capital:
                sentences.append(f"The capital of {country_name} is {capital}.")
            if subregion or region:
                sentences.append(f"It lies in {subregion or region}.")
            if population:
                sentences.append(f"Roughly {int(population):,} people live there.")

        code = self.codes_by_name.get(country_name)
        zones = timezone_count(code) if code else 0
        if zones > 1:
            sentences.append(f"It spans {zones} time zones.")

        if not sentences:
            logger.debug("No offline data about {}", country_name)
            return None

        opener = "Well spotted!" if was_correct else "Now you know."
        return " ".join([opener, *sentences])
