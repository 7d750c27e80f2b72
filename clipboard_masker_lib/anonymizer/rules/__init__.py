"""
Package that contains concrete masking rule implementations.
"""

from clipboard_masker_lib.anonymizer.rules.ip_rule import IpRule
from clipboard_masker_lib.anonymizer.rules.url_rule import UrlRule
from clipboard_masker_lib.anonymizer.rules.ssn_rule import SsnRule
from clipboard_masker_lib.anonymizer.rules.phone_rule import PhoneRule
from clipboard_masker_lib.anonymizer.rules.email_rule import EmailRule
from clipboard_masker_lib.anonymizer.rules.name_rule import NameRule, COMMON_NAMES
from clipboard_masker_lib.anonymizer.rules.credit_card_rule import CreditCardRule
from clipboard_masker_lib.anonymizer.rules.custom_pattern_rule import (
    CustomPatternRule,
)

__all__ = [
    "IpRule",
    "UrlRule",
    "SsnRule",
    "PhoneRule",
    "EmailRule",
    "NameRule",
    "COMMON_NAMES",
    "CreditCardRule",
    "CustomPatternRule",
]
