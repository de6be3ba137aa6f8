from __future__ import annotations

import re

MAX_INSPECTED_ELEMENTS = 100
MAX_TEXT_LENGTH = 50

NO_TEST_IDS_FOUND = "No data-test* attributes found"

TEST_ID_ATTRIBUTES = (
    "data-testid",
    "data-cy",
    "data-qa",
    "data-test",
)

STABLE_ATTRIBUTES = (
    "name",
    "placeholder",
    "type",
    "role",
    "aria-label",
    "alt",
    "href",
    "src",
)

SKIPPED_TAGS = frozenset({"html", "head", "body", "script", "style", "meta", "title"})
LABELABLE_TAGS = frozenset({"input", "textarea", "select"})
TEXT_TAGS = frozenset({"button", "a", "div", "span", "h1", "h2", "h3", "p", "legend"})
FALLBACK_PATH_TAGS = frozenset({"input", "button", "a", "select", "textarea"})


def normalize_space(value: str | None) -> str:
    if not value:
        return ""
    return re.sub(r"\s+", " ", str(value)).strip()


def xpath_literal(value: str) -> str:
    """Quote ``value`` as an XPath 1.0 string literal.

    XPath 1.0 has no escape sequence inside literals, so a value holding
    both quote kinds is spliced together with ``concat()``.
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    pieces = value.split("'")
    quoted = [f"'{piece}'" for piece in pieces]
    return "concat(" + ",\"'\",".join(quoted) + ")"


def css_attribute_literal(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def escape_css_identifier(value: str) -> str:
    """Escape ``value`` for use as a CSS identifier (CSSOM ``CSS.escape``)."""
    escaped: list[str] = []
    for index, char in enumerate(value):
        code = ord(char)
        if code == 0:
            escaped.append("\ufffd")
        elif 0x01 <= code <= 0x1F or code == 0x7F:
            escaped.append(f"\\{code:x} ")
        elif index == 0 and "0" <= char <= "9":
            escaped.append(f"\\{code:x} ")
        elif index == 1 and "0" <= char <= "9" and value[0] == "-":
            escaped.append(f"\\{code:x} ")
        elif index == 0 and char == "-" and len(value) == 1:
            escaped.append("\\-")
        elif code >= 0x80 or char in ("-", "_") or (char.isascii() and char.isalnum()):
            escaped.append(char)
        else:
            escaped.append(f"\\{char}")
    return "".join(escaped)
