"""Function-style entry points, one per feed.

Each call builds a :class:`WeatherService` from the environment unless one
is passed in, so no state is kept between calls.

>>> from rweather.api import get_weather_from_noaa
>>> get_weather_from_noaa("KJFK", message=True)  # doctest: +SKIP
"""
from __future__ import annotations

from typing import List, Optional, Union

from .entities import City, Country, GoogleWeather, NoaaObservation, YahooWeather
from .services.weather import WeatherService
from .summary import summarize


def get_weather_from_google(
    address: str,
    language: Optional[str] = None,
    message: bool = False,
    *,
    service: Optional[WeatherService] = None,
) -> GoogleWeather:
    """Forecast information, current conditions and a 3-day forecast.

    ``address`` may be a street address, a postal code, ``"city,state"``,
    ``"city,country"`` or an encoded lat/long; it is sent as-is.
    """
    return (service or WeatherService()).get_google(address, language, message)


def get_weather_from_yahoo(
    location_id: str,
    units: Optional[str] = None,
    message: bool = False,
    *,
    service: Optional[WeatherService] = None,
) -> YahooWeather:
    return (service or WeatherService()).get_yahoo(location_id, units, message)


def get_weather_from_noaa(
    station_id: str,
    message: bool = False,
    *,
    service: Optional[WeatherService] = None,
) -> NoaaObservation:
    return (service or WeatherService()).get_noaa(station_id, message)


def get_countries_list(
    country: Optional[str] = None,
    language: Optional[str] = None,
    *,
    service: Optional[WeatherService] = None,
) -> Union[List[Country], List[City]]:
    """Countries with their ISO codes, or the cities of ``country``."""
    return (service or WeatherService()).get_directory(country, language)


__all__ = [
    "get_countries_list",
    "get_weather_from_google",
    "get_weather_from_noaa",
    "get_weather_from_yahoo",
    "summarize",
]
