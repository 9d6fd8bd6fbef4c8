"""
Custom exception hierarchy for tokensync.

Parse failures on token values are expected and are reported as ``None``
or empty results, never as exceptions. The types below cover programmer
errors: bad configuration, wrong input types and malformed rule tables.
"""


class TokenSyncError(Exception):
    """Base exception for all tokensync errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(TokenSyncError):
    """Raised when a parser configuration value is out of range."""

    def __init__(self, field: str, value: object, reason: str):
        super().__init__(
            f"Invalid configuration for '{field}': {reason}",
            details={"field": field, "value": value},
        )
        self.field = field
        self.value = value


# =============================================================================
# Input Exceptions
# =============================================================================


class InvalidInputError(TokenSyncError):
    """Raised when a public function receives input of the wrong type."""

    def __init__(self, argument: str, expected: str, received: object):
        received_type = type(received).__name__
        super().__init__(
            f"Expected {expected} for '{argument}', got {received_type}",
            details={"argument": argument, "expected": expected, "received": received_type},
        )
        self.argument = argument
        self.expected = expected


# =============================================================================
# Categorizer Exceptions
# =============================================================================


class CategorizerError(TokenSyncError):
    """Base exception for categorization rule table errors."""
    pass


class DuplicateRuleError(CategorizerError):
    """Raised when two categorization rules share a name."""

    def __init__(self, rule_name: str):
        super().__init__(
            f"Categorization rule '{rule_name}' is registered more than once",
            details={"rule_name": rule_name},
        )
        self.rule_name = rule_name
