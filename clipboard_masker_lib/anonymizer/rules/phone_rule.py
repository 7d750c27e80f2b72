"""
Rule that masks phone numbers.
"""

from clipboard_masker_lib.anonymizer.rules.base_rule import BaseRule


class PhoneRule(BaseRule):
    """
    Detects North American phone numbers and replaces them with ``[PHONE]``.
    """

    # Matches:
    # 555-123-4567, (555)123-4567, 555.123.4567, 5551234567, +1-555-123-4567
    _PHONE_REGEX = (
        r"\b(?:\+?1[-.]?)?\(?([0-9]{3})\)?[-.]?([0-9]{3})[-.]?([0-9]{4})\b"
    )
    _PHONE_WHOLE_REGEX = (
        r"^(?:\+?1[-.]?)?\(?([0-9]{3})\)?[-.]?([0-9]{3})[-.]?([0-9]{4})$"
    )

    def __init__(self):
        super().__init__(
            regex=self._PHONE_REGEX,
            anchored_regex=self._PHONE_WHOLE_REGEX,
            placeholder="[PHONE]",
            enable_flag="mask_phone_numbers",
        )
