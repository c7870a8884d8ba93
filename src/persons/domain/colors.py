"""Numeric color codes used in the CSV source and their display names."""

UNKNOWN_COLOR = "unknown"

COLORS: dict[int, str] = {
    1: "blau",
    2: "grün",
    3: "violett",
    4: "rot",
    5: "gelb",
    6: "türkis",
    7: "weiß",
}


def color_from_id(color_id: int) -> str:
    """Return the color name for a code, or "unknown" if the code is not mapped."""
    return COLORS.get(color_id, UNKNOWN_COLOR)
