from clipboard_masker_lib.anonymizer import Anonymizer, MaskingSession, transform
from clipboard_masker_lib.client import ClipboardMaskerClient
from clipboard_masker_lib.data_models import Configuration, CustomPattern, MaskingResult
from clipboard_masker_lib.exceptions import (
    AuthenticationError,
    ClipboardMaskerError,
    InvalidPatternError,
    PatternNotFoundError,
    RateLimitError,
    SettingsValidationError,
)
from clipboard_masker_lib.link_cleaner import LinkCleaner, clean
from clipboard_masker_lib.settings_store import SettingsStore

__all__ = [
    "Anonymizer",
    "MaskingSession",
    "transform",
    "LinkCleaner",
    "clean",
    "Configuration",
    "CustomPattern",
    "MaskingResult",
    "SettingsStore",
    "ClipboardMaskerClient",
    "ClipboardMaskerError",
    "SettingsValidationError",
    "PatternNotFoundError",
    "InvalidPatternError",
    "AuthenticationError",
    "RateLimitError",
]
