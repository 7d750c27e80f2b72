"""
LinkCleaner module
==================

Normalises a single URL:

1. unwraps known redirector links (``t.co``, ``l.facebook.com``, Google
   redirects, URL Defense …) by following the destination stored in their
   query string, recursively, at most ``hop_limit`` times;
2. drops tracking query parameters (``utm_*``, ``fbclid``, ``gclid`` …);
3. strips AMP path suffixes and the ``amp`` query parameter;
4. drops tracking segments of the fragment.

Kept query and fragment segments are copied with their original encoding,
and a URL nothing applies to is returned exactly as given.  The cleaner never
raises; anything it cannot parse comes back unchanged.
"""

import logging
from typing import List, NamedTuple, Optional
from urllib.parse import SplitResult, unquote, urlsplit, urlunsplit

from clipboard_masker_lib.constants import DEFAULT_HOP_LIMIT
from clipboard_masker_lib.link_cleaner.tracking import (
    AMP_PARAM,
    LINK_KEYS,
    REDIRECTOR_HOSTS,
    is_tracking_key,
)

logger = logging.getLogger(__name__)


class _QueryItem(NamedTuple):
    raw: str
    name: str
    value: Optional[str]


def _query_items(query: str) -> List[_QueryItem]:
    if not query:
        return []
    items = []
    for raw in query.split("&"):
        name, sep, value = raw.partition("=")
        items.append(_QueryItem(raw, unquote(name), unquote(value) if sep else None))
    return items


class LinkCleaner:
    """
    Stateless URL sanitiser.

    Parameters
    ----------
    hop_limit : int
        Default number of nested redirector unwraps used by :meth:`clean`
        when the call does not pass its own limit.
    """

    def __init__(self, hop_limit: int = DEFAULT_HOP_LIMIT):
        self.hop_limit = hop_limit

    def clean(self, url: str, hop_limit: Optional[int] = None) -> str:
        """
        Return the cleaned form of *url*.

        Parameters
        ----------
        url : str
            Absolute ``scheme://host/...`` URL.
        hop_limit : int | None
            Remaining redirector unwraps.  A negative value returns *url*
            untouched, which is what ends the recursion on cyclic or overly
            deep wrapper chains.

        Returns
        -------
        str
            The cleaned URL, or *url* itself when it cannot be parsed or
            nothing had to be removed.
        """
        if hop_limit is None:
            hop_limit = self.hop_limit
        if hop_limit < 0:
            return url

        try:
            parts = urlsplit(url)
            host = parts.hostname
        except ValueError:
            return url
        if not parts.scheme or not host:
            return url

        items = _query_items(parts.query)

        if host in REDIRECTOR_HOSTS and items:
            target = self._redirect_target(items)
            if target is not None:
                logger.debug("Unwrapping %s redirect (hops left %d)", host, hop_limit)
                return self.clean(target, hop_limit - 1)

        return self._strip(url, parts, items)

    @staticmethod
    def _redirect_target(items: List[_QueryItem]) -> Optional[str]:
        for key in LINK_KEYS:
            item = next((i for i in items if i.name.lower() == key), None)
            if item is not None and item.value and item.value.startswith("http"):
                return item.value
        return None

    def _strip(self, url: str, parts: SplitResult, items: List[_QueryItem]) -> str:
        kept = [
            i
            for i in items
            if not is_tracking_key(i.name) and i.name.lower() != AMP_PARAM
        ]
        query = "&".join(i.raw for i in kept)

        path = parts.path
        if path.endswith("/amp/"):
            path = path[: -len("amp/")]
        elif path.endswith("/amp"):
            path = path[: -len("amp")]

        fragment = parts.fragment
        if fragment:
            segments = [s for s in fragment.split("&") if s]
            kept_segments = [
                s for s in segments if not is_tracking_key(unquote(s.split("=", 1)[0]))
            ]
            if len(kept_segments) != len(segments):
                fragment = "&".join(kept_segments)

        if (
            len(kept) == len(items)
            and path == parts.path
            and fragment == parts.fragment
        ):
            return url

        try:
            cleaned = urlunsplit((parts.scheme, parts.netloc, path, query, fragment))
        except ValueError:
            return url

        logger.debug("Cleaned link %s -> %s", url, cleaned)
        return cleaned


_DEFAULT_CLEANER = LinkCleaner()


def clean(url: str, hop_limit: int = DEFAULT_HOP_LIMIT) -> str:
    """
    Module level shortcut for :meth:`LinkCleaner.clean`.
    """
    return _DEFAULT_CLEANER.clean(url, hop_limit=hop_limit)
