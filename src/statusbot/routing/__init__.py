"""
Routing Layer

Maps a recognized utterance to what the conversation does next.
"""

from statusbot.routing.intent_router import (
    Route,
    RouteDecision,
    get_route,
    route_utterance,
    unconfigured_decision,
)

__all__ = [
    "Route",
    "RouteDecision",
    "get_route",
    "route_utterance",
    "unconfigured_decision",
]
