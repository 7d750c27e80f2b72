"""
Rule that masks payment card numbers.
"""

from clipboard_masker_lib.anonymizer.rules.base_rule import BaseRule


class CreditCardRule(BaseRule):
    """
    Detects 13‑16 digit sequences (optionally separated by single spaces or
    hyphens) and replaces them with ``[CARD_NUMBER]``.

    No Luhn check is performed.  The rule runs after :class:`PhoneRule`, so a
    ten digit sequence is already ``[PHONE]`` by the time it gets here.
    """

    _CARD_REGEX = r"\b(?:\d[ -]?){13,16}\b"
    _CARD_WHOLE_REGEX = r"^(?:\d[ -]?){13,16}$"

    def __init__(self):
        super().__init__(
            regex=self._CARD_REGEX,
            anchored_regex=self._CARD_WHOLE_REGEX,
            placeholder="[CARD_NUMBER]",
            enable_flag="mask_credit_cards",
        )
