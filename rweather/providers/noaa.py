from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from .base import EmptyMandatoryField, FeedProvider
from ..entities import NoaaObservation
from ..extract import Field, extract, first, require


_FIELDS = {
    name: Field(name)
    for name in (
        "station_id",
        "location",
        "latitude",
        "longitude",
        "observation_time",
        "weather",
        "temp_f",
        "temp_c",
        "relative_humidity",
        "wind_string",
        "pressure_string",
        "icon_url_base",
        "icon_url_name",
    )
}


class NoaaWeatherProvider(FeedProvider):
    """National Weather Service ``current_obs`` station feed.

    Observation only: the feed carries no forecast.
    """

    base_url = "http://w1.weather.gov/xml/current_obs"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")
        self._log = logging.getLogger(self.__class__.__name__)

    def observation(self, station_id: str) -> NoaaObservation:
        station = quote(station_id.strip().upper(), safe="")
        url = f"{self.base_url}/{station}.xml"
        document = self.fetch_document(url)
        values = extract(document, _FIELDS)

        location = require(values["location"], "unknown station")
        temp_f = first(values["temp_f"])
        temp_c = first(values["temp_c"])
        if temp_f is None and temp_c is None:
            raise EmptyMandatoryField("missing temperature")

        icon = None
        base, name = first(values["icon_url_base"]), first(values["icon_url_name"])
        if base and name:
            icon = base + name

        return NoaaObservation(
            station_id=first(values["station_id"]),
            location=location,
            latitude=first(values["latitude"]),
            longitude=first(values["longitude"]),
            observation_time=first(values["observation_time"]),
            weather=require(values["weather"], "missing weather"),
            temp_f=temp_f,
            temp_c=temp_c,
            relative_humidity=first(values["relative_humidity"]),
            wind_string=first(values["wind_string"]),
            pressure_string=first(values["pressure_string"]),
            icon=icon,
        )


__all__ = ["NoaaWeatherProvider"]
