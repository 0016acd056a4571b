"""
classify.py

Color category rules for card records.

A card's raw color string is reduced to a single category label:

- no colors      -> "C" (colorless)
- one color      -> the color code itself
- two or more    -> "Gold" (multicolor)

Single characters are passed through verbatim, so a malformed one-letter
value becomes its own category.
"""

from typing import Optional

COLOR_CODES = ("W", "U", "B", "R", "G")
COLORLESS = "C"
MULTICOLOR = "Gold"
COLOR_CATEGORIES = COLOR_CODES + (COLORLESS, MULTICOLOR)

FILTER_ALL = "all"
FILTER_OPTIONS = (FILTER_ALL,) + COLOR_CATEGORIES


def classify(colors: Optional[str]) -> str:
    """Return the color category for a raw color string."""
    colors = colors or ""
    if len(colors) == 0:
        return COLORLESS
    if len(colors) == 1:
        return colors
    return MULTICOLOR
