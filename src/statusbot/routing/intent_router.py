"""
Intent Router

Receives one utterance, optionally calls the recognizer, and either starts the
slot-filling flow with pre-populated slots or reports that the utterance was
not understood.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Protocol

from statusbot.contracts.slots import RecognizerResult, SlotSet
from statusbot.errors.exceptions import ContractViolation, UpstreamError
from statusbot.rendering import OutboundMessage, notice, render

logger = logging.getLogger(__name__)

STATUS_QUERY = "status_query"


class Recognizer(Protocol):
    """Anything that can classify an utterance (RecognizerClient in production)."""

    @property
    def is_configured(self) -> bool:
        ...

    def recognize(self, utterance: str) -> RecognizerResult:
        ...


class Route(str, Enum):
    BEGIN_FLOW = "BEGIN_FLOW"
    UNCONFIGURED = "UNCONFIGURED"
    NOT_UNDERSTOOD = "NOT_UNDERSTOOD"


@dataclass
class RouteDecision:
    route: Route
    slots: Optional[SlotSet] = None
    messages: List[OutboundMessage] = field(default_factory=list)
    intent: Optional[str] = None

    @property
    def starts_flow(self) -> bool:
        return self.route in (Route.BEGIN_FLOW, Route.UNCONFIGURED)


def intent_routes(status_intent_name: str) -> Dict[str, str]:
    """Intent label -> handler name."""
    return {status_intent_name: STATUS_QUERY}


def get_route(intent_name: str, status_intent_name: str) -> Optional[str]:
    """Handler name for an intent, or None if unsupported."""
    return intent_routes(status_intent_name).get(intent_name)


def unconfigured_decision(note: str = "recognizer_not_configured") -> RouteDecision:
    """Start the flow with nothing pre-filled, after one note."""
    return RouteDecision(
        route=Route.UNCONFIGURED,
        slots=SlotSet(),
        messages=[notice(render(note))],
    )


def route_utterance(
    utterance: str,
    recognizer: Recognizer,
    status_intent_name: str = "count"
) -> RouteDecision:
    """
    Decide what to do with one utterance.

    Args:
        utterance: User message text
        recognizer: Recognizer collaborator; never called when unconfigured
        status_intent_name: Top intent label that starts the status flow

    Returns:
        RouteDecision. BEGIN_FLOW carries no messages (the flow sends its own
        first prompt); UNCONFIGURED and NOT_UNDERSTOOD carry exactly one.
    """
    if not recognizer.is_configured:
        return unconfigured_decision()

    try:
        result = recognizer.recognize(utterance)
    except (UpstreamError, ContractViolation) as e:
        # No partial slots survive a failed recognition
        logger.error(f"Recognizer unavailable, continuing without it: {e}")
        return unconfigured_decision("recognizer_unavailable")

    if get_route(result.top_intent, status_intent_name) == STATUS_QUERY:
        slots = result.to_slot_set()
        logger.info(
            "Routing to status flow",
            extra={"prefilled": [k for k, v in slots.to_dict().items() if v]},
        )
        return RouteDecision(route=Route.BEGIN_FLOW, slots=slots, intent=result.top_intent)

    logger.warning(f"Unsupported intent: {result.top_intent}")
    return RouteDecision(
        route=Route.NOT_UNDERSTOOD,
        messages=[notice(render("not_understood", intent=result.top_intent))],
        intent=result.top_intent,
    )
