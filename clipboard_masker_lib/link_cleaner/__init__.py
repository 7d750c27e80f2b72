"""
URL sanitiser: redirector unwrapping and tracking‑parameter stripping.
"""

from clipboard_masker_lib.link_cleaner.link_cleaner import LinkCleaner, clean

__all__ = ["LinkCleaner", "clean"]
