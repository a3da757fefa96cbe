"""Length rules.

Length is counted in Unicode code points (len() of a str), so "é" and "日"
each count as one character regardless of their encoded byte size.
"""

from app.utils.input_checks import require_length, require_text


def is_min_length(field: str, value, requirement=None) -> bool:
    """isMinLength — passes when value has at least `requirement` characters."""
    text = require_text("isMinLength", value)
    return len(text) >= require_length("isMinLength", requirement)


def is_max_length(field: str, value, requirement=None) -> bool:
    """isMaxLength — passes when value has at most `requirement` characters."""
    text = require_text("isMaxLength", value)
    return len(text) <= require_length("isMaxLength", requirement)
