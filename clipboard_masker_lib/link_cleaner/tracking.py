"""
Static tables used by the link cleaner.
"""

from typing import FrozenSet, Tuple

# Services that forward to a URL carried in their own query string
REDIRECTOR_HOSTS: FrozenSet[str] = frozenset(
    {
        "www.google.com",
        "google.com",
        "www.googleadservices.com",
        "l.facebook.com",
        "lm.facebook.com",
        "l.messenger.com",
        "l.instagram.com",
        "t.co",
        "lnkd.in",
        "link.medium.com",
        "news.ycombinator.com",
        "r.search.yahoo.com",
        "out.reddit.com",
        "urldefense.com",
        "www.urldefense.com",
        "protect-us.mimecast.com",
        "slack-redir.net",
        "away.vk.com",
    }
)

# Query keys that may hold the wrapped destination; the first hit wins
LINK_KEYS: Tuple[str, ...] = (
    "url",
    "u",
    "q",
    "target",
    "dest",
    "destination",
    "to",
    "redirect",
    "redir",
    "r",
    "link",
    "l",
)

TRACKING_PREFIXES: Tuple[str, ...] = ("utm_", "hsa_")

# Compared against lower‑cased parameter names
TRACKING_PARAMS: FrozenSet[str] = frozenset(
    name.lower()
    for name in (
        "fbclid",
        "gclid",
        "gbraid",
        "wbraid",
        "dclid",
        "yclid",
        "msclkid",
        "mc_cid",
        "mc_eid",
        "igshid",
        "mkt_tok",
        "vero_conv",
        "vero_id",
        "gclsrc",
        "spm",
        "ref",
        "trk",
        "trkCampaign",
        "oly_enc_id",
        "oly_anon_id",
        "_hsmi",
        "_hsenc",
        "si",
    )
)

AMP_PARAM = "amp"


def is_tracking_key(name: str) -> bool:
    """
    Return ``True`` for analytics/attribution keys that are safe to drop.
    """
    name = name.lower()
    return name in TRACKING_PARAMS or name.startswith(TRACKING_PREFIXES)
