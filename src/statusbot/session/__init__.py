"""
Session Management Module

Redis-backed conversation state with an in-memory fallback.
"""

from statusbot.session.session_manager import (
    clear_session,
    get_session,
    save_session,
    validate_redis_connection,
)

__all__ = [
    "get_session",
    "save_session",
    "clear_session",
    "validate_redis_connection",
]
