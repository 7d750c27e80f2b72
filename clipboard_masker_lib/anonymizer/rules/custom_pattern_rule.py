"""
Rule built from a user supplied :class:`CustomPattern`.

The replacement string follows the ``$N`` template syntax: ``$0`` … ``$9``
insert a capture group, a backslash escapes the next character and all other
characters are copied literally.  Python's ``\\1`` syntax is therefore *not*
interpreted, which keeps user input such as ``C:\\temp`` from blowing up the
substitution.
"""

import re
from functools import lru_cache
from typing import Tuple

from clipboard_masker_lib.anonymizer.core.rule_interface import MaskRuleI
from clipboard_masker_lib.data_models.settings import CustomPattern
from clipboard_masker_lib.exceptions import InvalidPatternError


# Global inline flags, e.g. ``(?i)`` – Python only accepts them at the very
# start of an expression, so they have to precede the ``^`` anchor.
_LEADING_FLAGS = re.compile(r"^(?:\(\?[aiLmsux]+\))+")
_TEMPLATE_TOKEN = re.compile(r"\\(.)|\$(\d)", re.DOTALL)


def anchor(pattern: str) -> str:
    """
    Return the whole‑value form ``^pattern$`` of *pattern*.
    """
    flags = _LEADING_FLAGS.match(pattern)
    prefix = flags.group(0) if flags else ""
    return f"{prefix}^{pattern[len(prefix):]}$"


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Tuple[re.Pattern, re.Pattern]:
    """
    Compile the unanchored and anchored forms of *pattern*.

    Raises
    ------
    InvalidPatternError
        When either form is not a valid regular expression.
    """
    try:
        return re.compile(pattern), re.compile(anchor(pattern))
    except (re.error, OverflowError, RecursionError) as exc:
        raise InvalidPatternError(f"Invalid pattern {pattern!r}: {exc}") from exc


def expand_template(template: str, match: re.Match) -> str:
    """
    Expand ``$N`` group references of *template* against *match*.

    A reference to a group the pattern does not define is kept literally;
    a group that did not participate in the match expands to ``""``.
    """

    def _token(token: re.Match) -> str:
        escaped, group = token.group(1), token.group(2)
        if escaped is not None:
            return escaped
        index = int(group)
        if index > (match.re.groups or 0):
            return token.group(0)
        return match.group(index) or ""

    return _TEMPLATE_TOKEN.sub(_token, template)


class CustomPatternRule(MaskRuleI):
    """
    Substitutes matches of a user pattern with its replacement template.

    Parameters
    ----------
    custom_pattern : CustomPattern
        Source definition.

    Raises
    ------
    InvalidPatternError
        If ``custom_pattern.pattern`` does not compile.
    """

    def __init__(self, custom_pattern: CustomPattern):
        self.custom_pattern = custom_pattern
        self.replacement = custom_pattern.replacement
        self._compiled, self._compiled_anchored = compile_pattern(
            custom_pattern.pattern
        )

    def matches_whole(self, text: str) -> bool:
        return self._compiled_anchored.search(text) is not None

    def apply(self, text: str) -> str:
        return self._compiled.sub(
            lambda m: expand_template(self.replacement, m), text
        )

    def __repr__(self) -> str:
        return (
            f"CustomPatternRule(name={self.custom_pattern.name!r}, "
            f"pattern={self.custom_pattern.pattern!r})"
        )
