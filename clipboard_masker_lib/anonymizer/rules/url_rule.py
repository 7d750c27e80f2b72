"""
Rule that masks web URLs.
"""

from clipboard_masker_lib.anonymizer.rules.base_rule import BaseRule


class UrlRule(BaseRule):
    """
    Detects HTTP/HTTPS URLs and replaces them with ``[URL]``.

    Everything up to the next whitespace character belongs to the URL,
    including trailing punctuation.
    """

    _URL_REGEX = r"https?://[^\s]+"
    _URL_WHOLE_REGEX = r"^https?://[^\s]+$"

    def __init__(self):
        super().__init__(
            regex=self._URL_REGEX,
            anchored_regex=self._URL_WHOLE_REGEX,
            placeholder="[URL]",
            enable_flag="mask_urls",
        )
