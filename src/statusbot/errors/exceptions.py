"""
Core Error Classes

Custom exceptions for statusbot.
"""


class ContractViolation(Exception):
    """Raised when a recognizer or search response violates its contract."""
    pass


class UpstreamError(Exception):
    """Raised when an upstream service (recognizer or search index) fails."""
    pass


class ConfigurationError(Exception):
    """Raised when a client is used without the settings it needs."""
    pass
