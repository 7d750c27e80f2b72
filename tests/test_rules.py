"""Unit tests for the individual masking rules."""

import pytest

from clipboard_masker_lib.anonymizer.rules import (
    CreditCardRule,
    CustomPatternRule,
    EmailRule,
    IpRule,
    NameRule,
    PhoneRule,
    SsnRule,
    UrlRule,
)
from clipboard_masker_lib.anonymizer.rules.custom_pattern_rule import (
    anchor,
    compile_pattern,
)
from clipboard_masker_lib.data_models.settings import CustomPattern
from clipboard_masker_lib.exceptions import InvalidPatternError


@pytest.mark.parametrize(
    "rule, whole, text, expected",
    [
        (IpRule(), "10.0.0.1", "host 10.0.0.1 up", "host [IP_ADDRESS] up"),
        (EmailRule(), "a.b+c@mail.example.org", "to x@y.io!", "to [EMAIL]!"),
        (PhoneRule(), "(555)123-4567", "tel 555.123.4567", "tel [PHONE]"),
        (PhoneRule(), "+1-555-123-4567", "tel +1-555-123-4567.", "tel +[PHONE]."),
        (CreditCardRule(), "4111 1111 1111 1111", "cc 4111111111111111", "cc [CARD_NUMBER]"),
        (SsnRule(), "123-45-6789", "ssn 123-45-6789", "ssn [SSN]"),
        (UrlRule(), "http://example.com/a?b=c", "see https://x.io/p, ok", "see [URL] ok"),
    ],
)
def test_builtin_rule(rule, whole, text, expected):
    assert rule.matches_whole(whole)
    assert rule.apply(text) == expected


def test_builtin_rules_do_not_match_whole_inside_text():
    assert not IpRule().matches_whole("ip 10.0.0.1")
    assert not EmailRule().matches_whole("a@b.com and more")
    assert not SsnRule().matches_whole("123-45-67890")
    assert not UrlRule().matches_whole("https://a.com b")


def test_ip_rule_does_not_validate_octets():
    assert IpRule().apply("999.999.1.1") == "[IP_ADDRESS]"


def test_placeholders_do_not_rematch():
    text = "[IP_ADDRESS] [EMAIL] [PHONE] [CARD_NUMBER] [SSN] [NAME] [URL]"
    for rule in (IpRule(), EmailRule(), PhoneRule(), CreditCardRule(), SsnRule(), NameRule(), UrlRule()):
        assert rule.apply(text) == text


class TestNameRule:
    def test_case_insensitive_word_boundary(self):
        rule = NameRule()
        assert rule.apply("Hi JOHN, meet Johnny") == "Hi [NAME], meet Johnny"

    def test_whole_value(self):
        rule = NameRule()
        assert rule.matches_whole("Alice")
        assert not rule.matches_whole("alice bob")

    def test_custom_names_are_literal(self):
        rule = NameRule(["a.b"])
        assert rule.apply("a.b says hi") == "[NAME] says hi"
        assert rule.apply("axb says hi") == "axb says hi"

    def test_blank_names_ignored(self):
        assert NameRule(["", "zed"]).names == ("zed",)


class TestCustomPatternRule:
    def test_anchor(self):
        assert anchor(r"\bfoo\b") == r"^\bfoo\b$"
        assert anchor("a|b") == "^a|b$"
        assert anchor("(?i)secret") == "(?i)^secret$"

    def test_invalid_pattern_raises(self):
        with pytest.raises(InvalidPatternError):
            compile_pattern("(unclosed")

    def test_group_references(self):
        rule = CustomPatternRule(
            CustomPattern(name="id", pattern=r"id=(\d+)", replacement="id=<$1>")
        )
        assert rule.apply("x id=42") == "x id=<42>"

    def test_backslash_escapes_and_missing_group(self):
        rule = CustomPatternRule(
            CustomPattern(name="s", pattern="secret", replacement=r"[\$9 $9]")
        )
        assert rule.apply("my secret") == "my [$9 $9]"

    def test_python_group_syntax_is_literal(self):
        rule = CustomPatternRule(
            CustomPattern(name="p", pattern="(tmp)", replacement=r"C:\\\1")
        )
        assert rule.apply("tmp") == "C:\\1"

    def test_inline_flags(self):
        rule = CustomPatternRule(
            CustomPattern(name="s", pattern="(?i)secret", replacement="[S]")
        )
        assert rule.apply("my SECRET") == "my [S]"
        assert rule.matches_whole("Secret")
