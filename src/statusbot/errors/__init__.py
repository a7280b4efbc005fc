"""
Error classes for statusbot.
"""

from statusbot.errors.exceptions import (
    ConfigurationError,
    ContractViolation,
    UpstreamError,
)

__all__ = [
    "ConfigurationError",
    "ContractViolation",
    "UpstreamError",
]
