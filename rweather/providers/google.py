from __future__ import annotations

import logging
from typing import List, Optional

from .base import FeedProvider, UnresolvableLocation
from ..entities import CurrentConditions, ForecastConditions, ForecastInformation, GoogleWeather
from ..extract import Field, extract, extract_each, first, require


ICON_HOST = "http://google.com"

_PROBLEM = {"problem_cause": Field("weather/problem_cause", "data")}

_INFORMATION = {
    "city": Field("weather/forecast_information/city", "data"),
    "postal_code": Field("weather/forecast_information/postal_code", "data"),
    "forecast_date": Field("weather/forecast_information/forecast_date", "data"),
}

_CURRENT = {
    "condition": Field("weather/current_conditions/condition", "data"),
    "temp_f": Field("weather/current_conditions/temp_f", "data"),
    "temp_c": Field("weather/current_conditions/temp_c", "data"),
    "humidity": Field("weather/current_conditions/humidity", "data"),
    "icon": Field("weather/current_conditions/icon", "data"),
    "wind_condition": Field("weather/current_conditions/wind_condition", "data"),
}

_FORECAST_PATH = "weather/forecast_conditions"

_FORECAST = {
    "day_of_week": Field("day_of_week", "data"),
    "low": Field("low", "data"),
    "high": Field("high", "data"),
    "icon": Field("icon", "data"),
    "condition": Field("condition", "data"),
}


def icon_url(path: Optional[str]) -> Optional[str]:
    """Turn the feed's relative icon path into an absolute URL."""
    if not path:
        return None
    if path.startswith(("http://", "https://")):
        return path
    return ICON_HOST + path


class GoogleWeatherProvider(FeedProvider):
    """Attribute-based ``xml_api_reply`` weather feed."""

    base_url = "http://www.google.com/ig/api"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    def weather(self, address: str, language: str = "en") -> GoogleWeather:
        document = self.fetch_document(self.base_url, {"weather": address, "hl": language})

        if extract(document, _PROBLEM)["problem_cause"]:
            self._log.debug("problem_cause reported for %r", address)
            raise UnresolvableLocation("Couldn't determine this location!")

        info = extract(document, _INFORMATION)
        current = extract(document, _CURRENT)

        return GoogleWeather(
            forecast_information=ForecastInformation(
                city=require(info["city"], "missing city"),
                postal_code=first(info["postal_code"]),
                forecast_date=first(info["forecast_date"]),
            ),
            current_conditions=CurrentConditions(
                condition=require(current["condition"], "missing current condition"),
                temp_f=require(current["temp_f"], "missing temp_f"),
                temp_c=require(current["temp_c"], "missing temp_c"),
                humidity=require(current["humidity"], "missing humidity"),
                icon=icon_url(first(current["icon"])),
                wind_condition=first(current["wind_condition"]),
            ),
            forecast_conditions=tuple(self._forecast_days(document)),
        )

    # helpers ------------------------------------------------------------
    def _forecast_days(self, document) -> List[ForecastConditions]:
        days: List[ForecastConditions] = []
        for row in extract_each(document, _FORECAST_PATH, _FORECAST):
            row["icon"] = icon_url(row["icon"])
            days.append(ForecastConditions(**row))
        return days


__all__ = ["GoogleWeatherProvider", "ICON_HOST", "icon_url"]
