"""Map colors: the five entry-requirement categories and their legend."""

from enum import Enum
from typing import Any, Dict, Optional


class Color(str, Enum):
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    RED = "red"
    PURPLE = "purple"

    @classmethod
    def parse(cls, value: Any) -> Optional["Color"]:
        """Return the member for a label, or None for null/unrecognized labels."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


LEGEND: Dict[Color, Dict[str, str]] = {
    Color.GREEN: {"hex": "#34c759", "label": "No visa, no e-authorization, no vaccines"},
    Color.BLUE: {"hex": "#0a84ff", "label": "E-authorization required, no vaccines"},
    Color.YELLOW: {"hex": "#fbbf24", "label": "E-authorization + vaccines required"},
    Color.RED: {"hex": "#ef4444", "label": "Visa required, no vaccines"},
    Color.PURPLE: {"hex": "#a855f7", "label": "Visa required, vaccines required"},
}

# Swatch for countries the classifier could not place
UNCLASSIFIED_HEX = "#9ca3af"
UNCLASSIFIED_LABEL = "Insufficient information"


def swatch(color: Optional[Color]) -> str:
    if color is None:
        return UNCLASSIFIED_HEX
    return LEGEND[color]["hex"]


def label(color: Optional[Color]) -> str:
    if color is None:
        return UNCLASSIFIED_LABEL
    return LEGEND[color]["label"]
