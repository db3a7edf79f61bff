from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SummaryFields:
    """The subset of a weather record the narrative is built from.

    ``humidity`` is already formatted for display (``"Humidity: 40%"``).
    ``precipitation_hints`` holds the condition texts and icon references
    scanned for rain or storms.
    """

    place: str
    condition: str
    temp_c: Optional[str]
    temp_f: Optional[str]
    humidity: Optional[str]
    next_condition: Optional[str] = None
    precipitation_hints: Tuple[str, ...] = ()


def _humidity_label(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not value.endswith("%"):
        value = f"{value}%"
    return f"Humidity: {value}"


def _hints(*values: Optional[str]) -> Tuple[str, ...]:
    return tuple(value for value in values if value)


# Google ----------------------------------------------------------------
@dataclass(frozen=True)
class ForecastInformation:
    city: str
    postal_code: Optional[str]
    forecast_date: Optional[str]


@dataclass(frozen=True)
class CurrentConditions:
    condition: str
    temp_f: str
    temp_c: str
    humidity: str
    icon: Optional[str]
    wind_condition: Optional[str]


@dataclass(frozen=True)
class ForecastConditions:
    day_of_week: Optional[str]
    low: Optional[str]
    high: Optional[str]
    icon: Optional[str]
    condition: Optional[str]


@dataclass(frozen=True)
class GoogleWeather:
    forecast_information: ForecastInformation
    current_conditions: CurrentConditions
    forecast_conditions: Tuple[ForecastConditions, ...]

    def summary_fields(self) -> SummaryFields:
        current = self.current_conditions
        upcoming = self.forecast_conditions[0] if self.forecast_conditions else None
        return SummaryFields(
            place=self.forecast_information.city,
            condition=current.condition,
            temp_c=current.temp_c,
            temp_f=current.temp_f,
            # the feed already labels it, e.g. "Humidity: 56%"
            humidity=current.humidity,
            next_condition=upcoming.condition if upcoming else None,
            precipitation_hints=_hints(
                current.condition,
                current.icon,
                upcoming.condition if upcoming else None,
                upcoming.icon if upcoming else None,
            ),
        )


# Yahoo -----------------------------------------------------------------
@dataclass(frozen=True)
class YahooLocation:
    city: Optional[str]
    region: Optional[str]
    country: Optional[str]
    latitude: Optional[str] = None
    longitude: Optional[str] = None


@dataclass(frozen=True)
class YahooUnits:
    temperature: Optional[str]
    distance: Optional[str]
    pressure: Optional[str]
    speed: Optional[str]


@dataclass(frozen=True)
class YahooWind:
    chill: Optional[str]
    direction: Optional[str]
    speed: Optional[str]


@dataclass(frozen=True)
class YahooAtmosphere:
    humidity: Optional[str]
    visibility: Optional[str]
    pressure: Optional[str]
    rising: Optional[str]


@dataclass(frozen=True)
class YahooAstronomy:
    sunrise: Optional[str]
    sunset: Optional[str]


@dataclass(frozen=True)
class YahooCondition:
    text: str
    code: Optional[str]
    temp: Optional[str]
    date: Optional[str]


@dataclass(frozen=True)
class YahooForecast:
    day: Optional[str]
    date: Optional[str]
    low: Optional[str]
    high: Optional[str]
    text: Optional[str]
    code: Optional[str] = None


@dataclass(frozen=True)
class YahooWeather:
    location: YahooLocation
    units: YahooUnits
    wind: YahooWind
    atmosphere: YahooAtmosphere
    astronomy: YahooAstronomy
    condition: YahooCondition
    forecast: Tuple[YahooForecast, ...]

    @property
    def place(self) -> str:
        parts = [part for part in (self.location.city, self.location.region) if part]
        return ", ".join(parts)

    def summary_fields(self) -> SummaryFields:
        upcoming = self.forecast[0] if self.forecast else None
        celsius = (self.units.temperature or "").upper() == "C"
        return SummaryFields(
            place=self.place,
            condition=self.condition.text,
            temp_c=self.condition.temp if celsius else None,
            temp_f=None if celsius else self.condition.temp,
            humidity=_humidity_label(self.atmosphere.humidity),
            next_condition=upcoming.text if upcoming else None,
            precipitation_hints=_hints(self.condition.text, upcoming.text if upcoming else None),
        )


# NOAA ------------------------------------------------------------------
@dataclass(frozen=True)
class NoaaObservation:
    station_id: Optional[str]
    location: str
    latitude: Optional[str]
    longitude: Optional[str]
    observation_time: Optional[str]
    weather: str
    temp_f: Optional[str]
    temp_c: Optional[str]
    relative_humidity: Optional[str]
    wind_string: Optional[str]
    pressure_string: Optional[str]
    icon: Optional[str] = None

    def summary_fields(self) -> SummaryFields:
        return SummaryFields(
            place=self.location,
            condition=self.weather,
            temp_c=self.temp_c,
            temp_f=self.temp_f,
            humidity=_humidity_label(self.relative_humidity),
            precipitation_hints=_hints(self.weather, self.icon),
        )


# Directory -------------------------------------------------------------
@dataclass(frozen=True)
class Country:
    name: str
    iso_code: str


@dataclass(frozen=True)
class City:
    """A city entry; coordinates are in millionths of a degree."""

    name: str
    latitude_e6: Optional[str]
    longitude_e6: Optional[str]

    @property
    def latitude(self) -> Optional[float]:
        return _from_e6(self.latitude_e6)

    @property
    def longitude(self) -> Optional[float]:
        return _from_e6(self.longitude_e6)


def _from_e6(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    return float(value) / 1e6


__all__ = [
    "City",
    "Country",
    "CurrentConditions",
    "ForecastConditions",
    "ForecastInformation",
    "GoogleWeather",
    "NoaaObservation",
    "SummaryFields",
    "YahooAstronomy",
    "YahooAtmosphere",
    "YahooCondition",
    "YahooForecast",
    "YahooLocation",
    "YahooUnits",
    "YahooWeather",
    "YahooWind",
]
