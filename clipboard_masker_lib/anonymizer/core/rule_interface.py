"""
Definition of the rule interface that every masking rule must implement.
"""

from abc import ABC, abstractmethod
from typing import Optional


class MaskRuleI(ABC):
    """
    Abstract base class for all masking rules.

    A rule takes part in two passes of the anonymizer:

    * :meth:`matches_whole` – whole‑value classification of the trimmed
      input (anchored matching).
    * :meth:`apply` – in‑place substitution over the full text.

    ``enable_flag`` names the :class:`Configuration` field that switches the
    rule on; ``None`` means the rule is always active once constructed.
    """

    enable_flag: Optional[str] = None

    @abstractmethod
    def matches_whole(self, text: str) -> bool:
        """
        Return ``True`` when *text* as a whole is a single entity of this rule.
        """
        raise NotImplementedError

    @abstractmethod
    def apply(self, text: str) -> str:
        """
        Apply the rule to *text* and return the transformed string.

        Parameters
        ----------
        text: str
            The input text to be processed.

        Returns
        -------
        str
            The text after the rule has been applied.
        """
        raise NotImplementedError
