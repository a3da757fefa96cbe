"""Presence and equality rules."""

from app.utils.input_checks import require_text

# Characters stripped before the emptiness check: space, tab, LF, CR, NUL, VT.
TRIM_CHARS = " \t\n\r\0\x0b"

_MISSING = object()


def is_required(field: str, value, requirement=None) -> bool:
    """isRequired — fails when value is empty or only whitespace."""
    text = require_text("isRequired", value)
    return text.strip(TRIM_CHARS) != ""


def matches(field: str, value, requirement=None) -> bool:
    """matches — strict equality against `requirement`, used for confirmation fields.

    Values of different types never match, even when Python would consider
    them equal: matches("f", 1, 1.0) and matches("f", 1, True) are both False.
    The same holds inside containers, so [1] does not match [True] and
    {"a": 1} does not match {"a": 1.0}. Any value matches itself, including NaN.
    """
    return _strict_equal(value, requirement)


def _strict_equal(a, b) -> bool:
    """Equality that also requires identical types at every nesting level."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(_strict_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        if len(a) != len(b):
            return False
        for key, item in a.items():
            # Keys are looked up by ==, so confirm the matched key's type too.
            other_key = next((k for k in b if _strict_equal(k, key)), _MISSING)
            if other_key is _MISSING or not _strict_equal(item, b[other_key]):
                return False
        return True
    if isinstance(a, (set, frozenset)):
        return len(a) == len(b) and all(any(_strict_equal(x, y) for y in b) for x in a)
    return bool(a == b)
