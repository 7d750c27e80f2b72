"""
Generic regex based rule.
"""

import re
from typing import Optional

from clipboard_masker_lib.anonymizer.core.rule_interface import MaskRuleI


class BaseRule(MaskRuleI):
    """
    Rule driven by a pair of regular expressions.

    Parameters
    ----------
    regex : str
        Unanchored pattern used by the substitution pass.
    anchored_regex : str
        Pattern used for whole‑value classification.  It carries its own
        ``^``/``$`` anchors, the built‑in rules keep both forms verbatim.
    placeholder : str
        Replacement inserted for every match.
    flags : int
        ``re`` flags shared by both patterns.
    enable_flag : str | None
        Configuration field that toggles the rule.
    """

    def __init__(
        self,
        regex: str,
        anchored_regex: str,
        placeholder: str,
        flags: int = 0,
        enable_flag: Optional[str] = None,
    ):
        self.regex = regex
        self.anchored_regex = anchored_regex
        self.placeholder = placeholder
        self.enable_flag = enable_flag

        self._compiled = re.compile(regex, flags)
        self._compiled_anchored = re.compile(anchored_regex, flags)

    def matches_whole(self, text: str) -> bool:
        return self._compiled_anchored.search(text) is not None

    def apply(self, text: str) -> str:
        return self._compiled.sub(self._replacement, text)

    def _replacement(self, match: re.Match) -> str:
        return self.placeholder

    def __repr__(self) -> str:
        return f"{type(self).__name__}(placeholder={self.placeholder!r})"
