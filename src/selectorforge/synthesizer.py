from __future__ import annotations

from dataclasses import dataclass, field
import logging

from bs4 import BeautifulSoup
from bs4.element import Tag

from .markup_parser import (
    attr,
    enclosing_label,
    find_label_for,
    is_leaf,
    iter_elements,
    parent_element,
    parse_markup,
    previous_element_sibling,
    same_tag_position,
    tag_name,
    text_content,
)
from .models import EmptyMarkupError, SelectorResultSet
from .selector_rules import (
    FALLBACK_PATH_TAGS,
    LABELABLE_TAGS,
    MAX_INSPECTED_ELEMENTS,
    MAX_TEXT_LENGTH,
    NO_TEST_IDS_FOUND,
    SKIPPED_TAGS,
    STABLE_ATTRIBUTES,
    TEST_ID_ATTRIBUTES,
    TEXT_TAGS,
    css_attribute_literal,
    escape_css_identifier,
    xpath_literal,
)
from .validation import validate_markup

logger = logging.getLogger("selectorforge.synthesizer")


@dataclass(slots=True)
class OrderedUnique:
    items: list[str] = field(default_factory=list)
    _seen: set[str] = field(default_factory=set)

    def add(self, value: str) -> None:
        if value in self._seen:
            return
        self._seen.add(value)
        self.items.append(value)

    def __bool__(self) -> bool:
        return bool(self.items)


@dataclass(slots=True)
class SelectorAccumulator:
    xpath: OrderedUnique = field(default_factory=OrderedUnique)
    css: OrderedUnique = field(default_factory=OrderedUnique)
    test_ids: OrderedUnique = field(default_factory=OrderedUnique)

    def freeze(self, inspected_count: int, truncated: bool) -> SelectorResultSet:
        test_ids = tuple(self.test_ids.items) if self.test_ids else (NO_TEST_IDS_FOUND,)
        return SelectorResultSet(
            xpath=tuple(self.xpath.items),
            css=tuple(self.css.items),
            test_ids=test_ids,
            inspected_count=inspected_count,
            truncated=truncated,
        )


class ElementRules:
    """Applies the rule cascade to one element, highest confidence first."""

    def __init__(self, soup: BeautifulSoup, element: Tag, out: SelectorAccumulator) -> None:
        self.soup = soup
        self.element = element
        self.tag = tag_name(element)
        self.out = out

    def apply(self) -> None:
        self._add_test_id_selectors()
        self._add_id_selectors()
        if self.tag in LABELABLE_TAGS:
            self._add_label_selectors()
        if self.tag in TEXT_TAGS:
            self._add_text_selectors()
        self._add_stable_attribute_selectors()
        if self.tag in FALLBACK_PATH_TAGS:
            self._add_absolute_path()

    def _add_test_id_selectors(self) -> None:
        for name in TEST_ID_ATTRIBUTES:
            value = attr(self.element, name)
            if not value:
                continue
            css = f"{self.tag}[{name}={css_attribute_literal(value)}]"
            self.out.xpath.add(f"//{self.tag}[@{name}={xpath_literal(value)}]")
            self.out.css.add(css)
            self.out.test_ids.add(css)

    def _add_id_selectors(self) -> None:
        id_value = attr(self.element, "id")
        if not id_value:
            return
        self.out.xpath.add(f"//{self.tag}[@id={xpath_literal(id_value)}]")
        self.out.css.add(f"{self.tag}#{escape_css_identifier(id_value)}")

    def _add_label_selectors(self) -> None:
        id_value = attr(self.element, "id")
        if id_value:
            linked = find_label_for(self.soup, id_value)
            label_text = text_content(linked) if linked is not None else ""
            if label_text:
                self.out.xpath.add(
                    f"//{self.tag}[@id=//label[normalize-space(text())={xpath_literal(label_text)}]/@for]"
                )

        parent_label = enclosing_label(self.element)
        label_text = text_content(parent_label) if parent_label is not None else ""
        if label_text:
            self.out.xpath.add(f"//label[normalize-space(text())={xpath_literal(label_text)}]//{self.tag}")
            self.out.css.add(f"label:has({self.tag})")

        sibling = previous_element_sibling(self.element)
        if sibling is not None and tag_name(sibling) == "label":
            label_text = text_content(sibling)
            if label_text:
                self.out.xpath.add(
                    f"//label[normalize-space(text())={xpath_literal(label_text)}]/following-sibling::{self.tag}"
                )

    def _add_text_selectors(self) -> None:
        if not is_leaf(self.element):
            return
        text = text_content(self.element)
        if not text or len(text) >= MAX_TEXT_LENGTH:
            return
        literal = xpath_literal(text)
        self.out.xpath.add(f"//{self.tag}[normalize-space(text())={literal}]")
        self.out.xpath.add(f"//{self.tag}[contains(normalize-space(text()), {literal})]")

    def _add_stable_attribute_selectors(self) -> None:
        for name in STABLE_ATTRIBUTES:
            value = attr(self.element, name)
            if not value:
                continue
            self.out.xpath.add(f"//{self.tag}[@{name}={xpath_literal(value)}]")
            self.out.css.add(f"{self.tag}[{name}={css_attribute_literal(value)}]")

    def _add_absolute_path(self) -> None:
        try:
            path = absolute_xpath(self.element)
        except LookupError as exc:
            logger.debug("Skipping absolute path for <%s>: %s", self.tag, exc)
            return
        self.out.xpath.add(path)


def absolute_xpath(element: Tag) -> str:
    """Build a positional XPath such as ``/html/body/div[1]/button[2]``.

    The walk stops early at the first node carrying an id, or at the
    document's ``html``/``body`` element.
    """
    segments: list[str] = []
    current: Tag | None = element
    prefix = ""
    while current is not None:
        tag = tag_name(current)
        id_value = attr(current, "id")
        if id_value:
            prefix = f"//*[@id={xpath_literal(id_value)}]"
            break
        if tag == "html":
            prefix = "/html"
            break
        if tag == "body":
            prefix = "/html/body"
            break
        parent = parent_element(current)
        if parent is None:
            prefix = f"/{tag}"
            break
        segments.append(f"{tag}[{same_tag_position(current)}]")
        current = parent

    if not segments:
        return prefix
    return prefix + "/" + "/".join(reversed(segments))


def synthesize(markup: str) -> SelectorResultSet:
    """Generate XPath, CSS and test-id selectors for every element in ``markup``.

    Raises ``EmptyMarkupError`` for blank input and ``MarkupParseError`` when
    the parser rejects the markup. Identical input always yields an identical
    result set.
    """
    check = validate_markup(markup)
    if not check.ok:
        raise EmptyMarkupError(check.message)

    soup = parse_markup(markup)
    out = SelectorAccumulator()
    inspected = 0
    truncated = False
    for element in iter_elements(soup):
        if inspected >= MAX_INSPECTED_ELEMENTS:
            truncated = True
            break
        inspected += 1
        if tag_name(element) in SKIPPED_TAGS:
            continue
        ElementRules(soup, element, out).apply()

    if truncated:
        logger.debug("Stopped after %d elements; remaining elements were skipped.", inspected)
    return out.freeze(inspected, truncated)
