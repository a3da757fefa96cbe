from typing import Any, Optional

from pydantic import BaseModel


class EvaluateRequest(BaseModel):
    """A single rule evaluation submitted by a caller.

    `value` is any JSON value: most rules expect a string, `matches` compares
    it against `requirement` with strict type-aware equality.
    """

    field: str                         # e.g., "email", "password_confirmation"
    value: Any = None
    requirement: Optional[Any] = None  # e.g., 8 for isMinLength; unused by most rules


class EvaluateResponse(BaseModel):
    """Verdict for one rule on one field. No partial results, no error detail."""

    rule: str     # e.g., "isEmail"
    field: str
    passed: bool


class RuleListResponse(BaseModel):
    rules: list[str] = []
