from app.rules.errors import InvalidInputError


def require_text(rule_id: str, value) -> str:
    """Return value unchanged if it is a str, otherwise raise InvalidInputError.

    String rules never coerce: passing 123 to a length rule is a caller bug,
    not a failed validation.
    """
    if not isinstance(value, str):
        raise InvalidInputError(
            f"{rule_id} expects a string value, got {type(value).__name__}."
        )
    return value


def require_length(rule_id: str, requirement) -> int:
    """Return requirement if it is an int length bound (bool is rejected)."""
    if isinstance(requirement, bool) or not isinstance(requirement, int):
        raise InvalidInputError(
            f"{rule_id} expects an integer requirement, got {type(requirement).__name__}."
        )
    return requirement
