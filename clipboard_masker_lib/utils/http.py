"""
Thin wrapper around ``requests`` that adds logging,
retries and unified error handling.

The :class:`HttpRequester` class is used by the client to talk to a running
clipboard‑masker REST service.  It centralises:

* construction of absolute URLs from a base URL,
* automatic inclusion of a bearer token,
* a configurable retry policy via ``urllib3.Retry``,
* conversion of HTTP error codes into the library‑specific exception hierarchy
  (:class:`AuthenticationError`, :class:`RateLimitError`,
  :class:`PatternNotFoundError`, :class:`SettingsValidationError`,
  :class:`ClipboardMaskerError`).
"""

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from clipboard_masker_lib.exceptions import (
    AuthenticationError,
    ClipboardMaskerError,
    PatternNotFoundError,
    RateLimitError,
    SettingsValidationError,
)


class HttpRequester:
    """
    Helper for making HTTP calls with built‑in retries and error translation.

    Parameters
    ----------
    base_url : str
        Base URL of the remote service (e.g. ``"http://localhost:8082"``).
        A trailing slash is stripped automatically.
    token : str | None
        Bearer token used for ``Authorization`` header; if empty, no header
        is added.
    timeout : int, default ``10``
        Per‑request timeout in seconds.
    retries : int, default ``2``
        Number of retry attempts for transient failures.  The back‑off
        factor is ``0.5`` seconds.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: int = 10,
        retries: int = 2,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

        self.logger = logger or logging.getLogger(__name__)

        retry_strategy = Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def _full_url(self, path: str) -> str:
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    @staticmethod
    def _handle_response(resp: requests.Response) -> requests.Response:
        """
        Translate HTTP error codes into library‑specific exceptions.

        Raises
        ------
        AuthenticationError
            For ``401``/``403``.
        RateLimitError
            For ``429``.
        SettingsValidationError
            For ``400``.
        PatternNotFoundError
            For ``404``.
        ClipboardMaskerError
            For any other 4xx/5xx status.
        """
        if resp.status_code in (401, 403):
            raise AuthenticationError("Invalid or missing token")
        if resp.status_code == 429:
            raise RateLimitError("Rate limit exceeded")
        if resp.status_code == 400:
            raise SettingsValidationError(resp.text)
        if resp.status_code == 404:
            raise PatternNotFoundError(resp.text)
        if 400 <= resp.status_code < 600:
            raise ClipboardMaskerError(f"HTTP {resp.status_code}: {resp.text}")
        return resp

    def request(
        self, method: str, path: str, json: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        url = self._full_url(path)
        self.logger.debug("%s %s | payload=%s", method, url, json)
        try:
            resp = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ClipboardMaskerError(f"Cannot reach {url}: {exc}") from exc
        return self._handle_response(resp)

    def get(self, path: str) -> requests.Response:
        return self.request("GET", path)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self.request("POST", path, json=json)
