"""Unit tests for the link cleaner."""

from urllib.parse import quote

import pytest

from clipboard_masker_lib.link_cleaner import LinkCleaner, clean


def _wrap(url, host="t.co", key="u"):
    return f"https://{host}/?{key}={quote(url, safe='')}"


def test_unwraps_redirector_and_strips_tracking():
    url = "https://t.co/?u=https%3A%2F%2Fexample.com%2Fpage%3Futm_source%3Dx"
    assert clean(url, 2) == "https://example.com/page"


@pytest.mark.parametrize(
    "url, expected",
    [
        (
            "https://example.com/a?id=7&utm_source=x&fbclid=abc",
            "https://example.com/a?id=7",
        ),
        ("https://example.com/a?UTM_Medium=x&Ref=abc", "https://example.com/a"),
        ("https://example.com/a?hsa_acc=1&keep=1", "https://example.com/a?keep=1"),
        ("https://example.com/a?trkCampaign=x&a=1", "https://example.com/a?a=1"),
        ("https://example.com/a?si=xyz", "https://example.com/a"),
        ("https://example.com/s?q=a%20b&utm_source=x", "https://example.com/s?q=a%20b"),
    ],
)
def test_tracking_parameters(url, expected):
    assert clean(url) == expected


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/news/story/amp/", "https://example.com/news/story/"),
        ("https://example.com/story/amp", "https://example.com/story/"),
        ("https://example.com/page?amp=1&x=2", "https://example.com/page?x=2"),
        ("https://example.com/page?AMP", "https://example.com/page"),
        ("https://example.com/example", "https://example.com/example"),
    ],
)
def test_amp_artifacts(url, expected):
    assert clean(url) == expected


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/p#utm_source=x&section=2", "https://example.com/p#section=2"),
        ("https://example.com/p#utm_source=x&fbclid", "https://example.com/p"),
        ("https://example.com/p#intro", "https://example.com/p#intro"),
    ],
)
def test_fragment(url, expected):
    assert clean(url) == expected


def test_google_redirect():
    url = (
        "https://www.google.com/url?sa=t&url="
        "https%3A%2F%2Fexample.com%2Farticle%3Ffbclid%3D1"
    )
    assert clean(url) == "https://example.com/article"


def test_nested_redirectors():
    target = "https://example.com/x?utm_source=a"
    google = _wrap(target, host="www.google.com", key="q")
    facebook = _wrap(google, host="l.facebook.com")
    assert clean(facebook) == "https://example.com/x"


def test_hop_limit_stops_unwrapping():
    w0 = "https://example.com/?utm_source=x"
    w1 = _wrap(w0)
    w2 = _wrap(w1)
    w3 = _wrap(w2)
    w4 = _wrap(w3)
    # three unwraps, then the remaining wrapper is returned as is
    assert clean(w4, 2) == w1
    assert clean(w4, 0) == w3
    # the innermost URL is reached with no hops left and is not cleaned
    assert clean(w3, 2) == w0
    assert clean(w2, 2) == "https://example.com/"


def test_negative_hop_limit_returns_input():
    url = "https://example.com/?utm_source=x"
    assert clean(url, -1) == url


def test_link_key_order():
    url = "https://t.co/?l=https%3A%2F%2Fa.com%2F&url=https%3A%2F%2Fb.com%2F"
    assert clean(url) == "https://b.com/"


def test_link_key_case_insensitive():
    assert clean("https://lnkd.in/x?U=https%3A%2F%2Fb.com%2F") == "https://b.com/"


def test_non_http_value_not_unwrapped():
    url = "https://www.google.com/search?q=cats"
    assert clean(url) == url


def test_unknown_host_not_unwrapped():
    url = "https://example.com/?url=https%3A%2F%2Fb.com%2F"
    assert clean(url) == url


@pytest.mark.parametrize(
    "url",
    [
        "not a url",
        "https://[::1",
        "",
        "https://example.com/a?b=1&c=2#top",
        "https://example.com/?",
    ],
)
def test_untouched(url):
    assert clean(url) == url


def test_cleaner_default_hop_limit():
    w3 = _wrap(_wrap(_wrap("https://example.com/")))
    assert LinkCleaner(hop_limit=0).clean(w3) == _wrap(_wrap("https://example.com/"))
    assert LinkCleaner(hop_limit=0).clean(w3, hop_limit=5) == "https://example.com/"
