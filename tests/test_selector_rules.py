from selectorforge.selector_rules import (
    css_attribute_literal,
    escape_css_identifier,
    normalize_space,
    xpath_literal,
)


def test_xpath_literal_prefers_single_quotes() -> None:
    assert xpath_literal("Submit") == "'Submit'"
    assert xpath_literal('Hello "World"') == "'Hello \"World\"'"


def test_xpath_literal_switches_to_double_quotes_for_apostrophe() -> None:
    assert xpath_literal("It's") == '"It\'s"'


def test_xpath_literal_uses_concat_when_both_quotes_present() -> None:
    assert xpath_literal('It\'s "x"') == "concat('It',\"'\",'s \"x\"')"
    assert xpath_literal("'a\"") == "concat('',\"'\",'a\"')"
    assert xpath_literal("a'b'c\"") == "concat('a',\"'\",'b',\"'\",'c\"')"


def test_css_attribute_literal_escapes_backslash_before_quote() -> None:
    assert css_attribute_literal("plain") == '"plain"'
    assert css_attribute_literal('a"b\\c') == '"a\\"b\\\\c"'


def test_escape_css_identifier_keeps_safe_identifiers() -> None:
    assert escape_css_identifier("user_name-1") == "user_name-1"
    assert escape_css_identifier("héllo") == "héllo"


def test_escape_css_identifier_escapes_leading_digits_and_punctuation() -> None:
    assert escape_css_identifier("1abc") == "\\31 abc"
    assert escape_css_identifier("-1x") == "-\\31 x"
    assert escape_css_identifier("-") == "\\-"
    assert escape_css_identifier("a.b:c") == "a\\.b\\:c"
    assert escape_css_identifier("a b") == "a\\ b"
    assert escape_css_identifier("tab\there") == "tab\\9 here"


def test_normalize_space_collapses_whitespace() -> None:
    assert normalize_space("  Save \n\t changes ") == "Save changes"
    assert normalize_space(None) == ""
