from __future__ import annotations

from typing import TYPE_CHECKING

from playwright.sync_api import Error as PlaywrightError

from .models import (
    SELECTOR_CATEGORIES,
    LocatorValidation,
    MarkupValidation,
    SelectorCategory,
    SelectorResultSet,
)
from .selector_rules import NO_TEST_IDS_FOUND

if TYPE_CHECKING:
    from playwright.sync_api import Page


def validate_markup(markup: str | None) -> MarkupValidation:
    if markup is None or not markup.strip():
        return MarkupValidation(False, "Please enter some HTML first")
    return MarkupValidation(True, "Markup accepted.")


def count_locator_matches(page: Page, category: SelectorCategory, selector: str) -> int:
    text = str(selector or "").strip()
    if not text:
        return 0

    try:
        if category == "xpath":
            return page.locator(f"xpath={text}").count()
        if category in {"css", "test_id"}:
            return len(page.query_selector_all(text))
    except PlaywrightError:
        return 0
    return 0


def validate_locator(page: Page, category: SelectorCategory, selector: str) -> LocatorValidation:
    match_count = count_locator_matches(page, category, selector)
    if match_count == 1:
        return LocatorValidation(category, selector, 1, True, "Locator is unique.")
    if match_count == 0:
        return LocatorValidation(category, selector, 0, False, "Locator matches nothing.")
    return LocatorValidation(category, selector, match_count, False, f"Locator matches {match_count} elements.")


def validate_result_set(page: Page, result: SelectorResultSet) -> list[LocatorValidation]:
    checks: list[LocatorValidation] = []
    for category in SELECTOR_CATEGORIES:
        for selector in result.selectors(category):
            if category == "test_id" and selector == NO_TEST_IDS_FOUND:
                continue
            checks.append(validate_locator(page, category, selector))
    return checks
