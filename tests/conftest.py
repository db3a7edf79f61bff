from __future__ import annotations

import io

import pytest

from requests_mock import Mocker

from rweather.services.weather import WeatherService
from rweather.settings import Settings


TEST_SETTINGS = Settings(
    google_url="http://google.test/ig/api",
    yahoo_url="http://yahoo.test/forecastrss",
    noaa_url="http://noaa.test/xml/current_obs",
    directory_url="http://google.test/ig",
    timeout=1.0,
)


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def service(stream):
    return WeatherService(TEST_SETTINGS, stream=stream)
