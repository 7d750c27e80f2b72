from clipboard_masker_lib.anonymizer.core.anonymizer import Anonymizer, transform
from clipboard_masker_lib.anonymizer.core.rule_interface import MaskRuleI

__all__ = ["Anonymizer", "MaskRuleI", "transform"]
