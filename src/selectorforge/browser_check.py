from __future__ import annotations

import logging

from .models import BrowserUnavailableError, LocatorValidation, SelectorResultSet
from .validation import validate_result_set

_MISSING_BROWSER_ERROR_HINTS = (
    "executable doesn't exist",
    "executable does not exist",
    "download new browsers",
    "playwright install",
    "could not find browser",
    "failed to launch chromium because executable",
)

logger = logging.getLogger("selectorforge.browser_check")


def is_missing_browser_error(exc: Exception) -> bool:
    message = str(exc).lower()
    return any(hint in message for hint in _MISSING_BROWSER_ERROR_HINTS)


def check_selectors_in_browser(
    markup: str,
    result: SelectorResultSet,
    *,
    headless: bool = True,
) -> list[LocatorValidation]:
    """Render ``markup`` in Chromium and count what each selector matches."""
    from playwright.sync_api import Error as PlaywrightError
    from playwright.sync_api import sync_playwright

    try:
        with sync_playwright() as playwright:
            browser = playwright.chromium.launch(headless=headless)
            try:
                page = browser.new_page()
                page.set_content(markup)
                checks = validate_result_set(page, result)
            finally:
                browser.close()
    except PlaywrightError as exc:
        if is_missing_browser_error(exc):
            raise BrowserUnavailableError(
                "Chromium is not installed for Playwright. Run `playwright install chromium`."
            ) from exc
        raise

    unique = sum(1 for check in checks if check.unique)
    logger.info("Browser check finished: %d/%d selectors unique.", unique, len(checks))
    return checks
