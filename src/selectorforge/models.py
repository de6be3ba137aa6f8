from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SelectorCategory = Literal["xpath", "css", "test_id"]

SELECTOR_CATEGORIES: tuple[SelectorCategory, ...] = ("xpath", "css", "test_id")


class SelectorForgeError(Exception):
    """Base class for errors reported back to the caller of ``synthesize``."""


class EmptyMarkupError(SelectorForgeError, ValueError):
    pass


class MarkupParseError(SelectorForgeError):
    pass


class BrowserUnavailableError(SelectorForgeError):
    pass


@dataclass(frozen=True, slots=True)
class SelectorResultSet:
    xpath: tuple[str, ...]
    css: tuple[str, ...]
    test_ids: tuple[str, ...]
    inspected_count: int = 0
    truncated: bool = False

    def selectors(self, category: SelectorCategory) -> tuple[str, ...]:
        if category == "xpath":
            return self.xpath
        if category == "css":
            return self.css
        if category == "test_id":
            return self.test_ids
        raise KeyError(category)


@dataclass(frozen=True, slots=True)
class MarkupValidation:
    ok: bool
    message: str


@dataclass(frozen=True, slots=True)
class LocatorValidation:
    category: SelectorCategory
    selector: str
    match_count: int
    unique: bool
    message: str
