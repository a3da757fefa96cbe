"""Character-class rules.

The empty string is treated differently across this family on purpose:
isAlphabetic, isAlphaNumeric and isDigit need at least one character, while
isName accepts "" (it is a pattern with a `*` quantifier).

Letters and digits are ASCII only. str.isalpha() alone would accept "é" and
str.isdigit() would accept "٣", so each check is paired with str.isascii().
"""

import re

from app.utils.input_checks import require_text

# Characters rejected by hasNoSpecialChars. Plain set membership, no regex class.
SPECIAL_CHARS = frozenset("'^£$%&*}{@#~><|=_+¬")

NAME_PATTERN = re.compile(r"[a-zA-Z ]*")


def has_no_special_chars(field: str, value, requirement=None) -> bool:
    """hasNoSpecialChars — fails if any character is in SPECIAL_CHARS."""
    text = require_text("hasNoSpecialChars", value)
    return SPECIAL_CHARS.isdisjoint(text)


def is_alphabetic(field: str, value, requirement=None) -> bool:
    """isAlphabetic — A-Z/a-z only once spaces are removed; "" and "   " fail."""
    text = require_text("isAlphabetic", value).replace(" ", "")
    return text.isascii() and text.isalpha()


def is_alpha_numeric(field: str, value, requirement=None) -> bool:
    """isAlphaNumeric — non-empty, ASCII letters and digits only."""
    text = require_text("isAlphaNumeric", value)
    return text.isascii() and text.isalnum()


def is_digit(field: str, value, requirement=None) -> bool:
    """isDigit — non-empty, 0-9 only."""
    text = require_text("isDigit", value)
    return text.isascii() and text.isdigit()


def is_name(field: str, value, requirement=None) -> bool:
    """isName — letters and spaces only; the empty string passes."""
    text = require_text("isName", value)
    return NAME_PATTERN.fullmatch(text) is not None
