"""Runtime configuration read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


class ConfigurationError(RuntimeError):
    """Raised when an environment variable holds an unusable value."""


def env(name: str, default: str | None = None, environ: Optional[Mapping[str, str]] = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    source = os.environ if environ is None else environ
    value = source.get(name, default)
    if value is None:
        raise ConfigurationError(f"Environment variable {name} is required")
    return value


@dataclass(frozen=True)
class Settings:
    google_url: str = "http://www.google.com/ig/api"
    yahoo_url: str = "http://weather.yahooapis.com/forecastrss"
    noaa_url: str = "http://w1.weather.gov/xml/current_obs"
    directory_url: str = "http://www.google.com/ig"
    timeout: float = 10.0
    language: str = "en"
    units: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        defaults = cls()
        raw_timeout = env("RWEATHER_TIMEOUT", str(defaults.timeout), environ)
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(f"RWEATHER_TIMEOUT must be a number, got {raw_timeout!r}") from exc
        if timeout <= 0:
            raise ConfigurationError("RWEATHER_TIMEOUT must be positive")
        return cls(
            google_url=env("RWEATHER_GOOGLE_URL", defaults.google_url, environ),
            yahoo_url=env("RWEATHER_YAHOO_URL", defaults.yahoo_url, environ),
            noaa_url=env("RWEATHER_NOAA_URL", defaults.noaa_url, environ),
            directory_url=env("RWEATHER_DIRECTORY_URL", defaults.directory_url, environ),
            timeout=timeout,
            language=env("RWEATHER_LANGUAGE", defaults.language, environ),
            units=env("RWEATHER_UNITS", defaults.units, environ),
        )


__all__ = ["ConfigurationError", "Settings", "env"]
