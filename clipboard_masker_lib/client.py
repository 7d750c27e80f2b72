import logging
from typing import Any, Dict, Optional, Union

from clipboard_masker_lib.constants import CLIENT_TIMEOUT, DEFAULT_API_PREFIX
from clipboard_masker_lib.data_models.masking import CleanLinkModel, TransformTextModel
from clipboard_masker_lib.data_models.settings import Configuration
from clipboard_masker_lib.exceptions import ClipboardMaskerError
from clipboard_masker_lib.utils.http import HttpRequester


class ClipboardMaskerClient:
    """
    Client of the clipboard‑masker REST service.

    Parameters
    ----------
    api : str
        Service root, e.g. ``"http://localhost:8082"``.
    prefix : str
        Endpoint prefix the service was started with.
    """

    def __init__(
        self,
        api: str,
        token: Optional[str] = None,
        prefix: str = DEFAULT_API_PREFIX,
        timeout: int = CLIENT_TIMEOUT,
        retries: int = 2,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = api.rstrip("/")
        self.prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""
        self.logger = logger or logging.getLogger(__name__)
        self.http = HttpRequester(
            base_url=self.base_url,
            token=token,
            timeout=timeout,
            retries=retries,
            logger=self.logger,
        )

    # ------------------------------------------------------------------ #
    def transform(self, payload: Union[str, Dict[str, Any], TransformTextModel]) -> str:
        if isinstance(payload, str):
            payload = TransformTextModel(text=payload)
        if isinstance(payload, TransformTextModel):
            payload = payload.model_dump()
        return self._json("POST", "/transform", payload)["text"]

    # ------------------------------------------------------------------ #
    def clean_link(self, url: str, hop_limit: Optional[int] = None) -> str:
        payload = CleanLinkModel(url=url, hop_limit=hop_limit).model_dump(
            exclude_none=True
        )
        return self._json("POST", "/clean_link", payload)["url"]

    # ------------------------------------------------------------------ #
    def get_settings(self) -> Configuration:
        return Configuration.model_validate(self._json("GET", "/settings"))

    # ------------------------------------------------------------------ #
    def _json(
        self, method: str, path: str, payload: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        resp = self.http.request(method, f"{self.prefix}{path}", json=payload)
        try:
            return resp.json()
        except ValueError as exc:
            raise ClipboardMaskerError(f"Invalid response format: {exc}")
