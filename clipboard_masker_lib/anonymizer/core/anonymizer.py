"""
Anonymizer module
=================

Provides the :class:`Anonymizer` class – the orchestration layer that turns a
raw string plus a :class:`Configuration` snapshot into its masked form.

A call runs two passes:

* **Whole‑value bypass** – the trimmed input is tested against every enabled
  rule with anchored matching.  A string that *is* a single entity (an
  address, a phone number, a name …) is the user's own data and is returned
  untouched; a bare URL is only ever cleaned by the
  :class:`~clipboard_masker_lib.link_cleaner.LinkCleaner`.
* **In‑place substitution** – every enabled rule rewrites its matches in the
  original text, in the fixed order of :meth:`Anonymizer.active_rules`.
  Later rules see the output of earlier ones, so the order is part of the
  contract.

The public API supports plain text via :meth:`Anonymizer.transform` and
nested ``dict``/``list`` payloads via :meth:`Anonymizer.transform_payload`.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

from clipboard_masker_lib.anonymizer.core.rule_interface import MaskRuleI
from clipboard_masker_lib.anonymizer.rules import (
    IpRule,
    UrlRule,
    SsnRule,
    NameRule,
    PhoneRule,
    EmailRule,
    CreditCardRule,
    CustomPatternRule,
)
from clipboard_masker_lib.data_models.masking import MaskingResult
from clipboard_masker_lib.data_models.settings import Configuration, CustomPattern
from clipboard_masker_lib.exceptions import InvalidPatternError
from clipboard_masker_lib.link_cleaner import LinkCleaner

logger = logging.getLogger(__name__)


@lru_cache(maxsize=64)
def _custom_name_rule(names: Tuple[str, ...]) -> NameRule:
    return NameRule(names)


class Anonymizer:
    """
    Applies the configured masking rules to text.

    Attributes
    ----------
    ALL_ANONYMIZER_RULES : List[MaskRuleI]
        Built‑in rule table in substitution order.  Each entry is switched
        on by the configuration field named in its ``enable_flag``.
    URL_RULE : UrlRule
        URL recognition.  It leads the bypass pass but is substituted only
        after the name rules, and only when ``mask_urls`` is set.
    link_cleaner : LinkCleaner
        Used for bare URLs when ``clean_copied_links`` is set.
    """

    ALL_ANONYMIZER_RULES: List[MaskRuleI] = [
        IpRule(),
        EmailRule(),
        PhoneRule(),
        CreditCardRule(),
        SsnRule(),
        NameRule(),
    ]

    URL_RULE = UrlRule()

    def __init__(self, link_cleaner: Optional[LinkCleaner] = None):
        self.link_cleaner = link_cleaner or LinkCleaner()

    def transform(self, text: str, config: Optional[Configuration] = None) -> str:
        """
        Return *text* masked according to *config*.

        Never raises: broken custom patterns are skipped and text no rule
        applies to is returned as is.

        Parameters
        ----------
        text : str
            Raw input, typically the clipboard content.
        config : Configuration | None
            Settings snapshot; defaults are used when omitted.

        Returns
        -------
        str
            The transformed text, or *text* itself when nothing applied.
        """
        config = config or Configuration()
        rules = self.active_rules(config)

        bypass = self._whole_value(text, config, rules)
        if bypass is not None:
            return bypass

        for rule in rules:
            text = rule.apply(text)
        return text

    def mask(self, text: str, config: Optional[Configuration] = None) -> MaskingResult:
        """
        Same as :meth:`transform` but wrapped in a :class:`MaskingResult`.
        """
        return MaskingResult(input=text, output=self.transform(text, config))

    def transform_payload(
        self, payload: Dict | str | List | Any, config: Optional[Configuration] = None
    ):
        """
        Recursively transform a payload of arbitrary type.

        * ``str`` – processed by :meth:`transform`.
        * ``dict`` – keys and values are transformed recursively.
        * ``list`` – each element is transformed recursively.
        * any other type – returned unchanged.
        """
        if type(payload) is str:
            return self.transform(payload, config)
        elif type(payload) is dict:
            return {
                self.transform_payload(k, config): self.transform_payload(v, config)
                for k, v in payload.items()
            }
        elif type(payload) is list:
            return [self.transform_payload(e, config) for e in payload]
        return payload

    def active_rules(self, config: Configuration) -> List[MaskRuleI]:
        """
        Build the ordered rule list enabled by *config*.

        Order: IP, e‑mail, phone, card, SSN, built‑in names, custom names,
        URL, custom patterns (list order).
        """
        rules = [r for r in self.ALL_ANONYMIZER_RULES if getattr(config, r.enable_flag)]

        if config.mask_names and config.custom_names:
            rules.append(_custom_name_rule(config.custom_names))

        if config.mask_urls:
            rules.append(self.URL_RULE)

        for custom_pattern in config.custom_patterns:
            rule = self._custom_rule(custom_pattern)
            if rule is not None:
                rules.append(rule)
        return rules

    @staticmethod
    def _custom_rule(custom_pattern: CustomPattern) -> Optional[CustomPatternRule]:
        if not custom_pattern.is_enabled:
            return None
        try:
            return CustomPatternRule(custom_pattern)
        except InvalidPatternError as exc:
            logger.warning("Skipping custom pattern %r: %s", custom_pattern.name, exc)
            return None

    def _whole_value(
        self, text: str, config: Configuration, rules: List[MaskRuleI]
    ) -> Optional[str]:
        """
        Return the bypass result for *text*, ``None`` when it must be masked.
        """
        trimmed = text.strip()
        is_url = self.URL_RULE.matches_whole(trimmed)

        if config.clean_copied_links and is_url:
            cleaned = self.link_cleaner.clean(trimmed)
            if cleaned == trimmed:
                return text
            leading = text[: len(text) - len(text.lstrip())]
            trailing = text[len(text.rstrip()) :]
            return leading + cleaned + trailing

        if config.mask_urls and is_url:
            return text

        for rule in rules:
            if rule is self.URL_RULE:
                continue
            if rule.matches_whole(trimmed):
                return text
        return None


_DEFAULT_ANONYMIZER = Anonymizer()


def transform(text: str, config: Optional[Configuration] = None) -> str:
    """
    Module level shortcut for :meth:`Anonymizer.transform`.
    """
    return _DEFAULT_ANONYMIZER.transform(text, config)
