"""Exceptions raised by the rule engine.

A failing rule is a False verdict, not an exception. These are reserved for
caller mistakes (unknown rule names, wrongly typed input) and for Data Store
failures surfaced by the uniqueness rule.
"""


class RuleError(Exception):
    """Base class for every error raised by the rule engine."""


class UnknownRuleError(RuleError, LookupError):
    """Dispatch was asked for a rule name that is not registered."""

    def __init__(self, rule_name: str):
        super().__init__(f"Unknown validation rule '{rule_name}'.")
        self.rule_name = rule_name


class InvalidInputError(RuleError, TypeError):
    """A rule received input outside its contract (e.g. a non-string value)."""


class DataStoreError(RuleError):
    """Base class for failures reported by the Data Store collaborator."""


class StoreUnavailableError(DataStoreError):
    """The Data Store could not be reached."""


class QueryError(DataStoreError):
    """The Data Store was reached but the query failed."""
