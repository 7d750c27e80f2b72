"""
Rule that masks US Social Security numbers.
"""

from clipboard_masker_lib.anonymizer.rules.base_rule import BaseRule


class SsnRule(BaseRule):
    """
    Detects ``123-45-6789`` shaped numbers and replaces them with ``[SSN]``.
    """

    _SSN_REGEX = r"\b\d{3}-\d{2}-\d{4}\b"
    _SSN_WHOLE_REGEX = r"^\d{3}-\d{2}-\d{4}$"

    def __init__(self):
        super().__init__(
            regex=self._SSN_REGEX,
            anchored_regex=self._SSN_WHOLE_REGEX,
            placeholder="[SSN]",
            enable_flag="mask_ssn",
        )
