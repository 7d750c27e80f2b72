"""
Clipboard‑agnostic masking session.

The session holds the state a clipboard integration needs around
:meth:`Anonymizer.transform` without touching any clipboard itself:

* how many times content was masked,
* the last original content (so it can be restored),
* the last content the session produced, so that observing its own output
  again is a no‑op rather than a transform→observe→transform loop.
"""

import logging
import threading
from typing import Callable, Optional

from clipboard_masker_lib.anonymizer.core.anonymizer import Anonymizer
from clipboard_masker_lib.data_models.masking import MaskingResult
from clipboard_masker_lib.data_models.settings import Configuration

logger = logging.getLogger(__name__)


class MaskingSession:
    """
    Parameters
    ----------
    config_provider : Callable[[], Configuration]
        Returns the settings snapshot to use for the next call, e.g.
        ``SettingsStore.snapshot``.
    anonymizer : Anonymizer | None
        Engine instance; a default one is created when omitted.
    """

    def __init__(
        self,
        config_provider: Callable[[], Configuration] = Configuration,
        anonymizer: Optional[Anonymizer] = None,
    ):
        self._config_provider = config_provider
        self._anonymizer = anonymizer or Anonymizer()
        self._lock = threading.Lock()

        self.mask_count = 0
        self.last_masked_content: Optional[str] = None
        self._last_output: Optional[str] = None

    def process(self, content: str) -> MaskingResult:
        """
        Transform freshly observed *content*.

        The caller writes ``result.output`` back only when ``result.changed``.
        """
        with self._lock:
            if self._last_output is not None and content == self._last_output:
                return MaskingResult(input=content, output=content)

            result = self._anonymizer.mask(content, self._config_provider())
            if result.changed:
                self.mask_count += 1
                self.last_masked_content = content
                self._last_output = result.output
                logger.info("Masked clipboard content (#%d)", self.mask_count)
            return result

    def restore_last(self) -> Optional[str]:
        """
        Return the content that was masked last, ``None`` if there is none.

        The returned text is remembered as the session's own output, so
        writing it back to the clipboard does not get it masked again.
        """
        with self._lock:
            if self.last_masked_content is None:
                return None
            self._last_output = self.last_masked_content
            return self.last_masked_content

    def reset(self) -> None:
        with self._lock:
            self.mask_count = 0
            self.last_masked_content = None
            self._last_output = None
