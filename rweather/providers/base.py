from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import quote, urlencode
from xml.etree import ElementTree

import requests
from requests import Response


class FetchError(RuntimeError):
    """Raised when a feed cannot be downloaded or parsed."""


class QuotaExceeded(FetchError):
    """Raised when a provider reports a quota/usage limit issue."""


class ProviderError(RuntimeError):
    """Base provider error."""


class UnresolvableLocation(ProviderError):
    """The feed explicitly reports that the location cannot be resolved."""


class EmptyMandatoryField(ProviderError):
    """A field the feed always carries came back empty."""


@dataclass
class RequestConfig:
    timeout: float = 10.0


class FeedProvider:
    """Base class for providers that serve XML/RSS documents over HTTP."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def fetch_document(self, url: str, params: Optional[Mapping[str, str]] = None) -> ElementTree.Element:
        """Download ``url`` and return the root element of the parsed feed.

        Query values are percent-encoded (spaces become ``%20``) and appended
        in the given order.
        """
        query = urlencode(params, quote_via=quote, safe="") if params else None
        response = self._request("GET", url, params=query)
        try:
            return ElementTree.fromstring(response.content)
        except ElementTree.ParseError as exc:
            self._log.error("Malformed XML from %s", response.url, exc_info=exc)
            raise FetchError(f"malformed XML: {exc}") from exc

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded("quota exceeded")
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:200])
            raise FetchError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        self._log.debug("%s %s params=%s", method, url, kwargs.get("params"))
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise FetchError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise FetchError("request failed") from exc
        return self._handle_response(response)


__all__ = [
    "EmptyMandatoryField",
    "FeedProvider",
    "FetchError",
    "ProviderError",
    "QuotaExceeded",
    "RequestConfig",
    "UnresolvableLocation",
]
