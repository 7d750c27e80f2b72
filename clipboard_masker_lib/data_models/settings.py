"""
Settings model definitions.

:class:`Configuration` is the immutable snapshot handed to the anonymizer on
every call.  Field names are snake_case in Python; the persisted (and REST)
representation uses the camelCase aliases, so a stored settings file keeps
the key names of the original application (``maskIPAddresses``,
``customPatterns`` …).

Defaults are applied once, here, and nowhere else.
"""

import uuid
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _new_pattern_id() -> str:
    return uuid.uuid4().hex


class CustomPattern(BaseModel):
    """
    User defined masking rule.

    Attributes
    ----------
    id : str
        Opaque unique identifier; the only identity key used by
        update/remove operations.
    name : str
        Display name.
    pattern : str
        Regular expression.  Used unanchored for substitution and anchored
        (``^pattern$``) for whole‑value classification.
    replacement : str
        Replacement template (``$1`` style group references).
    is_enabled : bool
        Disabled patterns take part in neither pass.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=_new_pattern_id)
    name: str
    pattern: str
    replacement: str
    is_enabled: bool = Field(default=True, alias="isEnabled")


class Configuration(BaseModel):
    """
    Enabled/disabled state of every rule category plus user supplied lists.

    Attributes
    ----------
    mask_ip_addresses, mask_emails, mask_phone_numbers, mask_credit_cards,
    mask_ssn, mask_names : bool, default True
        Toggle the corresponding built‑in rule.
    mask_urls : bool, default False
        Replace URLs found inside a larger text with ``[URL]``.  A bare URL
        is never masked.
    clean_copied_links : bool, default True
        A bare URL is sanitised by the link cleaner.
    custom_names : Tuple[str, ...]
        Additional lowercase names, unique, in insertion order.
    custom_patterns : Tuple[CustomPattern, ...]
        User rules, applied in list order after the built‑in ones.
    start_on_launch : bool, default True
        Only read by the clipboard integration.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mask_ip_addresses: bool = Field(default=True, alias="maskIPAddresses")
    mask_emails: bool = Field(default=True, alias="maskEmails")
    mask_phone_numbers: bool = Field(default=True, alias="maskPhoneNumbers")
    mask_credit_cards: bool = Field(default=True, alias="maskCreditCards")
    mask_ssn: bool = Field(default=True, alias="maskSSN")
    mask_names: bool = Field(default=True, alias="maskNames")
    mask_urls: bool = Field(default=False, alias="maskURLs")
    clean_copied_links: bool = Field(default=True, alias="cleanCopiedLinks")
    custom_names: Tuple[str, ...] = Field(default=(), alias="customNames")
    custom_patterns: Tuple[CustomPattern, ...] = Field(
        default=(), alias="customPatterns"
    )
    start_on_launch: bool = Field(default=True, alias="startOnLaunch")

    @field_validator("custom_names")
    @classmethod
    def _normalize_names(cls, names: Tuple[str, ...]) -> Tuple[str, ...]:
        unique = []
        for name in names:
            name = name.lower()
            if name and name not in unique:
                unique.append(name)
        return tuple(unique)

    def to_storage(self) -> dict:
        """Return the JSON‑ready, camelCase representation."""
        return self.model_dump(mode="json", by_alias=True)


TOGGLE_FIELDS = tuple(
    name
    for name, field in Configuration.model_fields.items()
    if field.annotation is bool
)
