from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from .models import MarkupParseError
from .selector_rules import normalize_space


def parse_markup(markup: str) -> BeautifulSoup:
    """Parse an HTML snippet the lenient way a browser would.

    The html5lib tree builder follows the HTML5 parsing algorithm, so
    fragments get the same ``html``/``head``/``body`` scaffolding and
    implied elements such as ``tbody`` that ``DOMParser`` produces.
    Attribute values are kept as raw strings, so ``class`` or ``rel`` are
    never split into lists.
    """
    try:
        return BeautifulSoup(markup, "html5lib", multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise MarkupParseError(f"Markup could not be parsed: {exc}") from exc


def iter_elements(soup: BeautifulSoup) -> Iterator[Tag]:
    for node in soup.descendants:
        if isinstance(node, Tag):
            yield node


def tag_name(element: Tag) -> str:
    return (element.name or "").lower()


def attr(element: Tag, key: str) -> str | None:
    value = element.get(key)
    if value is None:
        return None
    return value or None


def text_content(element: Tag) -> str:
    return normalize_space(element.get_text())


def is_leaf(element: Tag) -> bool:
    return element.find(True, recursive=False) is None


def parent_element(element: Tag) -> Tag | None:
    parent = element.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return None
    return parent


def previous_element_sibling(element: Tag) -> Tag | None:
    for sibling in element.previous_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def find_label_for(soup: BeautifulSoup, id_value: str) -> Tag | None:
    return soup.find("label", attrs={"for": id_value})


def enclosing_label(element: Tag) -> Tag | None:
    return element.find_parent("label")


def same_tag_position(element: Tag) -> int:
    """Return the 1-based index of ``element`` among same-tag siblings.

    Raises ``LookupError`` when the element is not among its parent's
    children.
    """
    parent = element.parent
    if parent is None:
        raise LookupError(f"<{tag_name(element)}> has no parent")
    position = 0
    for sibling in parent.children:
        if not isinstance(sibling, Tag):
            continue
        if sibling is element:
            return position + 1
        if sibling.name == element.name:
            position += 1
    raise LookupError(f"<{tag_name(element)}> is missing from its parent's children")
