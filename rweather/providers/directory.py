from __future__ import annotations

import logging
from typing import List, Optional

from .base import FeedProvider
from ..entities import City, Country
from ..extract import Field, extract_each


_COUNTRIES = {
    "name": Field("name", "data"),
    "iso_code": Field("iso_code", "data"),
}

_CITIES = {
    "name": Field("name", "data"),
    "latitude_e6": Field("latitude_e6", "data"),
    "longitude_e6": Field("longitude_e6", "data"),
}


class DirectoryProvider(FeedProvider):
    """Country and city listings published next to the weather feed."""

    base_url = "http://www.google.com/ig"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")
        self._log = logging.getLogger(self.__class__.__name__)

    def countries(self, language: str = "en") -> List[Country]:
        document = self.fetch_document(
            f"{self.base_url}/countries", {"output": "xml", "hl": language}
        )
        return [
            Country(name=row["name"], iso_code=row["iso_code"])
            for row in extract_each(document, "countries/country", _COUNTRIES)
            if row["name"] and row["iso_code"]
        ]

    def cities(self, country: str, language: str = "en") -> List[City]:
        document = self.fetch_document(
            f"{self.base_url}/cities",
            {"output": "xml", "hl": language, "country": country.lower()},
        )
        return [
            City(**row)
            for row in extract_each(document, "cities/city", _CITIES)
            if row["name"]
        ]


__all__ = ["DirectoryProvider"]
