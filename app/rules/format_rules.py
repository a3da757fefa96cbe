"""Structured-format rules (dates, email addresses, URLs).

Each rule takes (field, value, requirement) and returns a bool. The
requirement slot is unused by every rule in this module.

Notes on the patterns:
  - Digits are written [0-9] rather than \\d, which in Python also matches
    non-ASCII digits such as "٢".
  - Date patterns only check the lexical shape. "2021-02-31" passes;
    calendar validity is not this module's concern.
  - Date patterns use fullmatch, so a trailing newline is rejected.
  - isUrl is a substring search, not an anchored match: a URL embedded in
    a sentence passes.
"""

import re

from email_validator import EmailNotValidError, validate_email

from app.utils.input_checks import require_text

# YYYY-MM-DD, month 01-12, day 01-31
TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])-(0[1-9]|[1-2][0-9]|3[0-1])")

# YYYY-MM
YEAR_MONTH_PATTERN = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])")

# http(s)/ftp scheme or a bare "www." prefix, followed by URL characters,
# not ending in punctuation like "." or ",".
URL_PATTERN = re.compile(
    r"\b(?:(?:https?|ftp)://|www\.)"
    r"[-a-z0-9+&@#/%?=~_|!:,.;]*"
    r"[-a-z0-9+&@#/%=~_|]",
    re.IGNORECASE | re.ASCII,
)


def is_time_stamp(field: str, value, requirement=None) -> bool:
    """isTimeStamp — YYYY-MM-DD with zero-padded month and day."""
    text = require_text("isTimeStamp", value)
    return TIMESTAMP_PATTERN.fullmatch(text) is not None


def is_year_month(field: str, value, requirement=None) -> bool:
    """isYearMonth — YYYY-MM with zero-padded month."""
    text = require_text("isYearMonth", value)
    return YEAR_MONTH_PATTERN.fullmatch(text) is not None


def is_email(field: str, value, requirement=None) -> bool:
    """isEmail — syntactic address check delegated to email-validator.

    No DNS lookups are made and internationalized (SMTPUTF8) local parts are
    rejected. Quoted local parts such as "john doe"@example.com are accepted.
    The domain must contain at least one dot.
    """
    text = require_text("isEmail", value)
    try:
        validate_email(
            text,
            check_deliverability=False,
            allow_smtputf8=False,
            allow_quoted_local=True,
        )
    except EmailNotValidError:
        return False
    return True


def is_url(field: str, value, requirement=None) -> bool:
    """isUrl — true if an http(s)/ftp/www URL appears anywhere in value."""
    text = require_text("isUrl", value)
    return URL_PATTERN.search(text) is not None
