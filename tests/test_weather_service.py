from __future__ import annotations

import io

import pytest
import responses

from rweather.api import get_countries_list, get_weather_from_google, get_weather_from_noaa, get_weather_from_yahoo
from rweather.entities import City, Country, NoaaObservation
from rweather.providers.base import UnresolvableLocation
from rweather.services.weather import WeatherService
from rweather.settings import ConfigurationError, Settings

from feeds import CITIES, COUNTRIES, GOOGLE_TRIESTE, GOOGLE_UNKNOWN, GOOGLE_URL, NOAA_KJFK, YAHOO_SUNNYVALE, YAHOO_TRIESTE_METRIC


KJFK_NARRATIVE = (
    "Weather summary for New York, NY, John F. Kennedy International Airport:\n"
    "The weather in New York, NY, John F. Kennedy International Airport is fair. "
    "The temperature is currently 15.0°C (59°F).\n"
    "If you're going outside i'd wrap up warm. Humidity: 40%. \n"
)


def test_noaa_message_prints_and_returns_record(service, stream):
    with responses.RequestsMock() as rsps:
        rsps.add("GET", "http://noaa.test/xml/current_obs/KJFK.xml", body=NOAA_KJFK, status=200)

        record = get_weather_from_noaa("KJFK", message=True, service=service)

    assert isinstance(record, NoaaObservation)
    assert stream.getvalue() == KJFK_NARRATIVE


def test_no_message_keeps_stream_empty(service, stream):
    with responses.RequestsMock() as rsps:
        rsps.add("GET", "http://noaa.test/xml/current_obs/KJFK.xml", body=NOAA_KJFK, status=200)

        record = get_weather_from_noaa("KJFK", service=service)

    assert record.weather == "Fair"
    assert stream.getvalue() == ""


def test_google_message(service, stream):
    with responses.RequestsMock() as rsps:
        rsps.add("GET", "http://google.test/ig/api", body=GOOGLE_TRIESTE, status=200)

        record = get_weather_from_google("Trieste", message=True, service=service)

    assert record.forecast_information.city == "Trieste, Friuli-Venezia Giulia"
    assert stream.getvalue() == (
        "Weather summary for Trieste, Friuli-Venezia Giulia:\n"
        "The weather in Trieste, Friuli-Venezia Giulia is partly cloudy. "
        "But the forecast says chance of rain. "
        "The temperature is currently 18°C (64°F).\n"
        "If you're going outside i'd wrap up warm. Humidity: 56%. "
        "But don't forget to take an umbrella!\n"
    )


def test_google_unknown_location_prints_nothing(service, stream):
    with responses.RequestsMock() as rsps:
        rsps.add("GET", "http://google.test/ig/api", body=GOOGLE_UNKNOWN, status=200)

        with pytest.raises(UnresolvableLocation):
            get_weather_from_google("Atlantis", message=True, service=service)

    assert stream.getvalue() == ""


def test_yahoo_fahrenheit_narrative(service, stream):
    with responses.RequestsMock() as rsps:
        rsps.add("GET", "http://yahoo.test/forecastrss", body=YAHOO_SUNNYVALE, status=200)

        get_weather_from_yahoo("94089", message=True, service=service)

    assert stream.getvalue() == (
        "Weather summary for Sunnyvale, CA:\n"
        "The weather in Sunnyvale, CA is mostly cloudy. "
        "The temperature is currently 57°F.\n"
        "If you're going outside i'd wrap up warm. Humidity: 93%. \n"
    )


def test_yahoo_celsius_narrative(service, stream):
    with responses.RequestsMock() as rsps:
        rsps.add("GET", "http://yahoo.test/forecastrss", body=YAHOO_TRIESTE_METRIC, status=200)

        get_weather_from_yahoo("ITXX0080", units="metric", message=True, service=service)

        assert rsps.calls[0].request.url.endswith("p=ITXX0080&u=c")

    assert stream.getvalue() == (
        "Weather summary for Trieste, FVG:\n"
        "The weather in Trieste, FVG is light rain. But the forecast says rain. "
        "The temperature is currently 19°C.\n"
        "If you're going outside i'd wrap up warm. Humidity: 87%. But don't forget to take an umbrella!\n"
    )


def test_yahoo_celsius_threshold(service, stream):
    body = YAHOO_TRIESTE_METRIC.replace('temp="19"', 'temp="20"')
    with responses.RequestsMock() as rsps:
        rsps.add("GET", "http://yahoo.test/forecastrss", body=body, status=200)

        get_weather_from_yahoo("ITXX0080", units="metric", message=True, service=service)

    assert "The temperature is currently 20°C.\nYou should be ok without warm clothes today. " in stream.getvalue()


def test_language_defaults_from_settings(stream):
    settings = Settings(google_url=GOOGLE_URL, language="it")
    service = WeatherService(settings, stream=stream)
    with responses.RequestsMock() as rsps:
        rsps.add("GET", "http://google.test/ig/api", body=GOOGLE_TRIESTE, status=200)

        service.get_google("Trieste")

        assert rsps.calls[0].request.url.endswith("hl=it")


def test_directory_modes(service):
    with responses.RequestsMock() as rsps:
        rsps.add("GET", "http://google.test/ig/countries", body=COUNTRIES, status=200)
        rsps.add("GET", "http://google.test/ig/cities", body=CITIES, status=200)

        countries = get_countries_list(service=service)
        cities = get_countries_list("IT", service=service)

    assert all(isinstance(item, Country) for item in countries)
    assert [country.iso_code for country in countries] == ["IT", "AT", "SI"]
    assert all(isinstance(item, City) for item in cities)
    assert [city.name for city in cities] == ["Rome", "Trieste"]


def test_settings_from_env():
    settings = Settings.from_env(
        {
            "RWEATHER_NOAA_URL": "http://mirror.test/obs",
            "RWEATHER_TIMEOUT": "2.5",
            "RWEATHER_UNITS": "metric",
        }
    )

    assert settings.noaa_url == "http://mirror.test/obs"
    assert settings.timeout == 2.5
    assert settings.units == "metric"
    assert settings.language == "en"


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_settings_rejects_bad_timeout(value):
    with pytest.raises(ConfigurationError):
        Settings.from_env({"RWEATHER_TIMEOUT": value})


def test_service_reads_environment(monkeypatch):
    monkeypatch.setenv("RWEATHER_LANGUAGE", "de")
    service = WeatherService(stream=io.StringIO())
    assert service.settings.language == "de"
