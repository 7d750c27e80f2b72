"""
Rule that masks IPv4 addresses.
"""

from clipboard_masker_lib.anonymizer.rules.base_rule import BaseRule


class IpRule(BaseRule):
    """
    Detects dotted IPv4 addresses and replaces them with ``[IP_ADDRESS]``.

    Octets are not range checked, ``999.1.1.1`` is masked as well.
    """

    _IP_REGEX = r"\b(?:\d{1,3}\.){3}\d{1,3}\b"
    _IP_WHOLE_REGEX = r"^(?:\d{1,3}\.){3}\d{1,3}$"

    def __init__(self):
        super().__init__(
            regex=self._IP_REGEX,
            anchored_regex=self._IP_WHOLE_REGEX,
            placeholder="[IP_ADDRESS]",
            enable_flag="mask_ip_addresses",
        )
