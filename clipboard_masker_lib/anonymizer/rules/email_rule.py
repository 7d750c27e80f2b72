"""
Rule that masks e‑mail addresses.
"""

from clipboard_masker_lib.anonymizer.rules.base_rule import BaseRule


class EmailRule(BaseRule):
    """
    Detects e‑mail addresses and replaces them with ``[EMAIL]``.
    """

    _EMAIL_REGEX = r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"
    _EMAIL_WHOLE_REGEX = r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"

    def __init__(self):
        super().__init__(
            regex=self._EMAIL_REGEX,
            anchored_regex=self._EMAIL_WHOLE_REGEX,
            placeholder="[EMAIL]",
            enable_flag="mask_emails",
        )
