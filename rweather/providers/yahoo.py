from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .base import FeedProvider
from ..entities import (
    YahooAstronomy,
    YahooAtmosphere,
    YahooCondition,
    YahooForecast,
    YahooLocation,
    YahooUnits,
    YahooWeather,
    YahooWind,
)
from ..extract import Field, extract, first, require


NAMESPACES = {
    "yweather": "http://xml.weather.yahoo.com/ns/rss/1.0",
    "geo": "http://www.w3.org/2003/01/geo/wgs84_pos#",
}

_CHANNEL = "channel/yweather:"
_ITEM = "channel/item/yweather:"

_FIELDS = {
    "city": Field(_CHANNEL + "location", "city"),
    "region": Field(_CHANNEL + "location", "region"),
    "country": Field(_CHANNEL + "location", "country"),
    "latitude": Field("channel/item/geo:lat"),
    "longitude": Field("channel/item/geo:long"),
    "unit_temperature": Field(_CHANNEL + "units", "temperature"),
    "unit_distance": Field(_CHANNEL + "units", "distance"),
    "unit_pressure": Field(_CHANNEL + "units", "pressure"),
    "unit_speed": Field(_CHANNEL + "units", "speed"),
    "wind_chill": Field(_CHANNEL + "wind", "chill"),
    "wind_direction": Field(_CHANNEL + "wind", "direction"),
    "wind_speed": Field(_CHANNEL + "wind", "speed"),
    "humidity": Field(_CHANNEL + "atmosphere", "humidity"),
    "visibility": Field(_CHANNEL + "atmosphere", "visibility"),
    "pressure": Field(_CHANNEL + "atmosphere", "pressure"),
    "rising": Field(_CHANNEL + "atmosphere", "rising"),
    "sunrise": Field(_CHANNEL + "astronomy", "sunrise"),
    "sunset": Field(_CHANNEL + "astronomy", "sunset"),
    "condition_text": Field(_ITEM + "condition", "text"),
    "condition_code": Field(_ITEM + "condition", "code"),
    "condition_temp": Field(_ITEM + "condition", "temp"),
    "condition_date": Field(_ITEM + "condition", "date"),
}

_FORECAST_ATTRIBUTES = ("day", "date", "low", "high", "text", "code")


class YahooWeatherProvider(FeedProvider):
    """Yahoo ``forecastrss`` feed with ``yweather:`` extension elements."""

    base_url = "http://weather.yahooapis.com/forecastrss"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    def weather(self, location_id: str, units: str = "") -> YahooWeather:
        """Fetch the feed for a postal code or Yahoo location code.

        ``units="metric"`` requests Celsius/km/mb; anything else leaves the
        feed's imperial default.
        """
        params = {"p": location_id}
        if units == "metric":
            params["u"] = "c"
        document = self.fetch_document(self.base_url, params)
        values = extract(document, _FIELDS, NAMESPACES)

        return YahooWeather(
            location=YahooLocation(
                city=first(values["city"]),
                region=first(values["region"]),
                country=first(values["country"]),
                latitude=first(values["latitude"]),
                longitude=first(values["longitude"]),
            ),
            units=YahooUnits(
                temperature=first(values["unit_temperature"]),
                distance=first(values["unit_distance"]),
                pressure=first(values["unit_pressure"]),
                speed=first(values["unit_speed"]),
            ),
            wind=YahooWind(
                chill=first(values["wind_chill"]),
                direction=first(values["wind_direction"]),
                speed=first(values["wind_speed"]),
            ),
            atmosphere=YahooAtmosphere(
                humidity=first(values["humidity"]),
                visibility=first(values["visibility"]),
                pressure=first(values["pressure"]),
                rising=first(values["rising"]),
            ),
            astronomy=YahooAstronomy(
                sunrise=first(values["sunrise"]),
                sunset=first(values["sunset"]),
            ),
            condition=YahooCondition(
                text=require(values["condition_text"], "no data returned"),
                code=first(values["condition_code"]),
                temp=first(values["condition_temp"]),
                date=first(values["condition_date"]),
            ),
            forecast=tuple(self._forecast(document)),
        )

    def _forecast(self, document) -> List[YahooForecast]:
        # one element per day, so read attributes element by element
        days: List[YahooForecast] = []
        for element in document.findall(_ITEM + "forecast", NAMESPACES):
            attrs: Dict[str, Optional[str]] = {
                name: element.get(name) or None for name in _FORECAST_ATTRIBUTES
            }
            days.append(YahooForecast(**attrs))
        return days


__all__ = ["NAMESPACES", "YahooWeatherProvider"]
