from playwright.sync_api import Error as PlaywrightError

from selectorforge.models import SelectorResultSet
from selectorforge.selector_rules import NO_TEST_IDS_FOUND
from selectorforge.validation import (
    count_locator_matches,
    validate_locator,
    validate_markup,
    validate_result_set,
)


class _FakeLocator:
    def __init__(self, count: int) -> None:
        self._count = count

    def count(self) -> int:
        return self._count


class _FakePage:
    def __init__(self, css_counts: dict[str, int], xpath_counts: dict[str, int]) -> None:
        self.css_counts = css_counts
        self.xpath_counts = xpath_counts
        self.queries: list[str] = []

    def query_selector_all(self, selector: str) -> list[object]:
        self.queries.append(selector)
        if selector == "label:has(":
            raise PlaywrightError("SyntaxError: not a valid selector")
        return [object()] * self.css_counts.get(selector, 0)

    def locator(self, selector: str) -> _FakeLocator:
        self.queries.append(selector)
        return _FakeLocator(self.xpath_counts.get(selector.removeprefix("xpath="), 0))


def test_validate_markup_rejects_blank_input() -> None:
    for markup in (None, "", "  \n\t"):
        result = validate_markup(markup)
        assert not result.ok
        assert result.message == "Please enter some HTML first"


def test_validate_markup_accepts_any_non_blank_text() -> None:
    result = validate_markup("<div>")
    assert result.ok


def test_count_locator_matches_routes_by_category() -> None:
    page = _FakePage({"input#user": 1}, {"//input[@id='user']": 2})

    assert count_locator_matches(page, "css", "input#user") == 1  # type: ignore[arg-type]
    assert count_locator_matches(page, "test_id", "input#user") == 1  # type: ignore[arg-type]
    assert count_locator_matches(page, "xpath", "//input[@id='user']") == 2  # type: ignore[arg-type]
    assert "xpath=//input[@id='user']" in page.queries


def test_count_locator_matches_treats_invalid_selector_as_no_match() -> None:
    page = _FakePage({}, {})
    assert count_locator_matches(page, "css", "label:has(") == 0  # type: ignore[arg-type]
    assert count_locator_matches(page, "css", "   ") == 0  # type: ignore[arg-type]


def test_validate_locator_messages() -> None:
    page = _FakePage({"a": 1, "b": 3}, {})

    unique = validate_locator(page, "css", "a")  # type: ignore[arg-type]
    many = validate_locator(page, "css", "b")  # type: ignore[arg-type]
    none = validate_locator(page, "css", "c")  # type: ignore[arg-type]

    assert unique.unique and unique.message == "Locator is unique."
    assert not many.unique and many.match_count == 3
    assert many.message == "Locator matches 3 elements."
    assert not none.unique and none.message == "Locator matches nothing."


def test_validate_result_set_skips_sentinel_and_keeps_category_order() -> None:
    result = SelectorResultSet(
        xpath=("//button[@name='go']",),
        css=('button[name="go"]',),
        test_ids=(NO_TEST_IDS_FOUND,),
    )
    page = _FakePage({'button[name="go"]': 1}, {"//button[@name='go']": 1})

    checks = validate_result_set(page, result)  # type: ignore[arg-type]

    assert [(item.category, item.selector) for item in checks] == [
        ("xpath", "//button[@name='go']"),
        ("css", 'button[name="go"]'),
    ]
    assert all(item.unique for item in checks)
