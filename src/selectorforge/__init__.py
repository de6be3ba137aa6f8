"""Locator synthesis for pasted HTML snippets."""

from __future__ import annotations

from .models import (
    BrowserUnavailableError,
    EmptyMarkupError,
    MarkupParseError,
    SelectorForgeError,
    SelectorResultSet,
)
from .synthesizer import synthesize

__version__ = "0.1.0"

__all__ = [
    "BrowserUnavailableError",
    "EmptyMarkupError",
    "MarkupParseError",
    "SelectorForgeError",
    "SelectorResultSet",
    "synthesize",
]
