"""
Session Manager

Redis-backed storage for per-conversation dialog state.

Session schema:
{
    "phase": "AWAITING_UTTERANCE" | "IN_FLOW",
    "flow": FlowInstance.to_dict() | None
}

Constraints:
- JSON serialization only (no pickles, no model objects)
- TTL: 20 minutes in Redis, 30 minutes in memory (reset on save)
- Keyed by conversation id; nothing is shared between conversations
"""

import json
import logging
import time
from typing import Any, Dict, Optional

import redis

from statusbot.config import get_settings

logger = logging.getLogger(__name__)

SESSION_TTL_SECONDS = 20 * 60
SESSION_KEY_PREFIX = "statusbot:session:"

# In-memory session store (used when REDIS_URL is not set or Redis fails)
_in_memory_sessions: Dict[str, Dict[str, Any]] = {}
SESSION_TTL_SECONDS_FALLBACK = 30 * 60


def _get_redis_client() -> Optional["redis.Redis"]:
    """Redis client for REDIS_URL, or None when Redis is not configured."""
    redis_url = get_settings().REDIS_URL
    if not redis_url:
        return None
    return redis.from_url(redis_url)


def _get_session_key(conversation_id: str) -> str:
    return f"{SESSION_KEY_PREFIX}{conversation_id}"


def validate_redis_connection() -> bool:
    """
    Round-trip a health-check key through Redis.

    Returns:
        True if Redis is configured and healthy, False if not configured

    Raises:
        redis.RedisError: If Redis is configured but unreachable
        RuntimeError: If the health-check key does not read back
    """
    client = _get_redis_client()
    if client is None:
        logger.info("REDIS_URL not set; using in-memory sessions")
        return False

    test_key = f"{SESSION_KEY_PREFIX}__health_check__"
    client.setex(test_key, 10, json.dumps({"test": True, "timestamp": time.time()}))
    retrieved = client.get(test_key)
    if not retrieved or json.loads(retrieved).get("test") is not True:
        raise RuntimeError("Redis health check failed - read returned invalid data")
    client.delete(test_key)
    logger.info("Redis connection validated")
    return True


def get_session(conversation_id: str) -> Optional[Dict[str, Any]]:
    """
    Retrieve session state for a conversation.

    Returns:
        Session state dictionary or None if not found/expired
    """
    redis_client = _get_redis_client()
    if redis_client:
        try:
            raw = redis_client.get(_get_session_key(conversation_id))
            if not raw:
                return None
            return json.loads(raw)
        except redis.RedisError as e:
            logger.warning(f"Redis read failed, using in-memory sessions: {e}")

    session_data = _in_memory_sessions.get(conversation_id)
    if session_data is None:
        return None
    if time.time() - session_data.get("_stored_at", 0) > SESSION_TTL_SECONDS_FALLBACK:
        del _in_memory_sessions[conversation_id]
        return None
    # Return session state without internal fields
    return {k: v for k, v in session_data.items() if not k.startswith("_")}


def save_session(conversation_id: str, session_state: Dict[str, Any]) -> None:
    """
    Save session state for a conversation. Resets the TTL.
    """
    redis_client = _get_redis_client()
    if redis_client:
        try:
            redis_client.setex(
                _get_session_key(conversation_id),
                SESSION_TTL_SECONDS,
                json.dumps(session_state),
            )
            return
        except redis.RedisError as e:
            logger.warning(f"Redis write failed, using in-memory sessions: {e}")

    session_data = dict(session_state)
    session_data["_stored_at"] = time.time()
    _in_memory_sessions[conversation_id] = session_data


def clear_session(conversation_id: str) -> None:
    redis_client = _get_redis_client()
    if redis_client:
        try:
            redis_client.delete(_get_session_key(conversation_id))
        except redis.RedisError as e:
            logger.warning(f"Redis delete failed: {e}")

    _in_memory_sessions.pop(conversation_id, None)
