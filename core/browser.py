from __future__ import annotations
from typing import List

from core.exceptions import UnsupportedBrowserError

# canonical order, "all" expands to exactly this
SUPPORTED_BROWSERS = ("chrome", "edge", "firefox", "opera")
ALL_BROWSERS = "all"


def normalize_browser(name: str) -> str:
    b = (name or "").strip().lower()
    if b not in SUPPORTED_BROWSERS:
        raise UnsupportedBrowserError(b)
    return b


def all_browsers() -> List[str]:
    return list(SUPPORTED_BROWSERS)


def merge_browsers(selected: List[str], new: List[str]) -> None:
    """Appends browsers not selected yet, keeping first-seen order."""
    for b in new:
        if b not in selected:
            selected.append(b)
