"""
Top‑level package for the anonymizer.

The public API consists of:
- Anonymizer / transform (core)
- MaskRuleI (interface)
- MaskingSession (clipboard‑agnostic monitor state)
- Concrete rule implementations (IpRule, EmailRule, PhoneRule, …)
"""

from clipboard_masker_lib.anonymizer.core import Anonymizer, MaskRuleI, transform
from clipboard_masker_lib.anonymizer.session import MaskingSession

__all__ = ["Anonymizer", "MaskRuleI", "MaskingSession", "transform"]
