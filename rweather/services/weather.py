from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO, Union

import requests

from ..entities import City, Country, GoogleWeather, NoaaObservation, YahooWeather
from ..providers.base import RequestConfig
from ..providers.directory import DirectoryProvider
from ..providers.google import GoogleWeatherProvider
from ..providers.noaa import NoaaWeatherProvider
from ..providers.yahoo import YahooWeatherProvider
from ..settings import Settings
from ..summary import summarize


class WeatherService:
    """One entry point per feed.

    With ``message=True`` the narrative is written to ``stream`` and the
    record is still returned.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        session: Optional[requests.Session] = None,
        stream: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        self._stream = stream
        self._log = logger or logging.getLogger(self.__class__.__name__)
        session = session or requests.Session()
        config = RequestConfig(timeout=self.settings.timeout)
        self.google = GoogleWeatherProvider(self.settings.google_url, session=session, request_config=config)
        self.yahoo = YahooWeatherProvider(self.settings.yahoo_url, session=session, request_config=config)
        self.noaa = NoaaWeatherProvider(self.settings.noaa_url, session=session, request_config=config)
        self.directory = DirectoryProvider(self.settings.directory_url, session=session, request_config=config)

    # Public API ---------------------------------------------------------
    def get_google(self, address: str, language: Optional[str] = None, message: bool = False) -> GoogleWeather:
        record = self.google.weather(address, language or self.settings.language)
        return self._emit(record, message)

    def get_yahoo(self, location_id: str, units: Optional[str] = None, message: bool = False) -> YahooWeather:
        record = self.yahoo.weather(location_id, self.settings.units if units is None else units)
        return self._emit(record, message)

    def get_noaa(self, station_id: str, message: bool = False) -> NoaaObservation:
        record = self.noaa.observation(station_id)
        return self._emit(record, message)

    def get_directory(
        self, country: Optional[str] = None, language: Optional[str] = None
    ) -> Union[List[Country], List[City]]:
        language = language or self.settings.language
        if country:
            return self.directory.cities(country, language)
        return self.directory.countries(language)

    # Helpers ------------------------------------------------------------
    def _emit(self, record, message: bool):
        if message:
            narrative = summarize(record)
            self._log.debug("Narrative for %s: %r", record.__class__.__name__, narrative)
            (self._stream or sys.stdout).write(narrative)
        return record


__all__ = ["WeatherService"]
