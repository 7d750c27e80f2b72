"""
Rule that masks first names from a literal allow‑list.

There is no inference involved: only names present in the list are masked,
case‑insensitively and on word boundaries.
"""

import re
from typing import Iterable, List, Tuple

from clipboard_masker_lib.anonymizer.core.rule_interface import MaskRuleI


COMMON_NAMES: Tuple[str, ...] = (
    "mohammad",
    "mike",
    "john",
    "ahmad",
    "qusai",
    "lana",
    "ismail",
    "bob",
    "alice",
    "diana",
)


class NameRule(MaskRuleI):
    """
    Replaces every listed name with ``[NAME]``.

    Names are substituted one after another in list order, each one as an
    escaped literal wrapped in ``\\b`` boundaries.

    Parameters
    ----------
    names : Iterable[str]
        Names to mask.  Blank entries are ignored.
    """

    enable_flag = "mask_names"
    placeholder = "[NAME]"

    def __init__(self, names: Iterable[str] = COMMON_NAMES):
        self.names: Tuple[str, ...] = tuple(n for n in names if n)
        self._compiled: List[re.Pattern] = []
        self._compiled_anchored: List[re.Pattern] = []
        for name in self.names:
            literal = re.escape(name)
            self._compiled.append(re.compile(rf"\b{literal}\b", re.IGNORECASE))
            self._compiled_anchored.append(
                re.compile(rf"^{literal}$", re.IGNORECASE)
            )

    def matches_whole(self, text: str) -> bool:
        return any(p.search(text) for p in self._compiled_anchored)

    def apply(self, text: str) -> str:
        for pattern in self._compiled:
            text = pattern.sub(self.placeholder, text)
        return text

    def __repr__(self) -> str:
        return f"NameRule(names={list(self.names)!r})"
