"""
Conversation Orchestrator

Runs one turn of a conversation: loads the conversation's session, routes a
fresh utterance or resumes the suspended flow, executes the search once the
flow is confirmed, and saves the session back.

Session phases:
    AWAITING_UTTERANCE  entry point; the next message is routed by intent
    IN_FLOW             a slot-filling flow is suspended waiting for a reply
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from statusbot.clients.recognizer_client import RecognizerClient
from statusbot.clients.search_client import SearchClient
from statusbot.config import Settings, get_settings
from statusbot.dialogs.slot_filling import FlowInstance, FlowTurn, begin_flow, continue_flow
from statusbot.errors.exceptions import ConfigurationError, ContractViolation, UpstreamError
from statusbot.logging_config import log_with_context
from statusbot.rendering import OutboundMessage, notice, prompt, render
from statusbot.routing.intent_router import Recognizer, Route, route_utterance, unconfigured_decision
from statusbot.search.execution import Searcher, execute_search, render_results
from statusbot.session import get_session, save_session

logger = logging.getLogger(__name__)

PHASE_AWAITING_UTTERANCE = "AWAITING_UTTERANCE"
PHASE_IN_FLOW = "IN_FLOW"


def _session(phase: str, flow: Optional[FlowInstance] = None) -> Dict[str, Any]:
    return {"phase": phase, "flow": flow.to_dict() if flow else None}


def _response(
    messages: List[OutboundMessage],
    outcome: Dict[str, Any],
    success: bool = True,
    error: Optional[str] = None,
    message: Optional[str] = None
) -> Dict[str, Any]:
    response: Dict[str, Any] = {
        "success": success,
        "messages": [m.to_dict() for m in messages],
        "outcome": outcome,
    }
    if error:
        response["error"] = error
        response["message"] = message
    return response


def _restart(
    conversation_id: str,
    recognizer: Recognizer,
    today: Optional[date]
) -> List[OutboundMessage]:
    """
    Return to the entry point after a flow ends.

    With a recognizer the user is asked what else they need; without one the
    next flow starts straight away, as it did the first time.
    """
    if recognizer.is_configured:
        save_session(conversation_id, _session(PHASE_AWAITING_UTTERANCE))
        return [prompt(render("continuation_prompt"))]

    decision = unconfigured_decision()
    turn = begin_flow(decision.slots, today)
    save_session(conversation_id, _session(PHASE_IN_FLOW, turn.instance))
    return decision.messages + turn.messages


def _complete_flow(
    conversation_id: str,
    turn: FlowTurn,
    messages: List[OutboundMessage],
    recognizer: Recognizer,
    searcher: Optional[Searcher],
    settings: Settings,
    today: Optional[date]
) -> Dict[str, Any]:
    if turn.result is None:
        log_with_context(logger, logging.INFO, "Flow ended without a result",
                         conversation_id=conversation_id)
        messages.extend(_restart(conversation_id, recognizer, today))
        return _response(messages, {"type": "CANCELLED"})

    slots = turn.result
    try:
        if searcher is None:
            with SearchClient(settings) as client:
                query, outcome = execute_search(slots, client)
        else:
            query, outcome = execute_search(slots, searcher)
    except (UpstreamError, ContractViolation, ConfigurationError) as e:
        logger.error(f"Search failed for conversation {conversation_id}: {str(e)}")
        messages.append(notice(render("search_unavailable")))
        messages.extend(_restart(conversation_id, recognizer, today))
        return _response(
            messages,
            {"type": "SEARCH_FAILED", "slots": slots.to_dict()},
            success=False,
            error="upstream_error",
            message=str(e),
        )

    messages.extend(render_results(slots, outcome))
    messages.extend(_restart(conversation_id, recognizer, today))
    return _response(messages, {
        "type": "RESULTS",
        "query": query,
        "slots": slots.to_dict(),
        "pass_count": outcome.pass_count,
        "fail_count": outcome.fail_count,
        "descriptions": outcome.descriptions,
    })


def handle_message(
    conversation_id: str,
    text: str,
    recognizer_client: Optional[Recognizer] = None,
    search_client: Optional[Searcher] = None,
    settings: Optional[Settings] = None,
    today: Optional[date] = None
) -> Dict[str, Any]:
    """
    Handle one user message in one conversation.

    Args:
        conversation_id: Conversation identifier supplied by the transport
        text: User message text
        recognizer_client: Recognizer (creates and closes a RecognizerClient if None)
        search_client: Searcher (creates and closes a SearchClient per search if None)
        settings: Settings (reads the environment if None)
        today: Reference date for relative date phrases

    Returns:
        Response dictionary with success, messages and outcome
    """
    settings = settings or get_settings()
    if recognizer_client is not None:
        return _handle_turn(
            conversation_id, text, recognizer_client, search_client, settings, today
        )

    with RecognizerClient(settings) as recognizer:
        return _handle_turn(
            conversation_id, text, recognizer, search_client, settings, today
        )


def _handle_turn(
    conversation_id: str,
    text: str,
    recognizer: Recognizer,
    search_client: Optional[Searcher],
    settings: Settings,
    today: Optional[date]
) -> Dict[str, Any]:
    session = get_session(conversation_id) or _session(PHASE_AWAITING_UTTERANCE)
    messages: List[OutboundMessage] = []

    if session.get("phase") == PHASE_IN_FLOW and session.get("flow"):
        turn = continue_flow(FlowInstance.from_dict(session["flow"]), text, today)
    else:
        decision = route_utterance(text, recognizer, settings.STATUS_INTENT_NAME)
        messages.extend(decision.messages)
        if decision.route == Route.NOT_UNDERSTOOD:
            save_session(conversation_id, _session(PHASE_AWAITING_UTTERANCE))
            return _response(messages, {"type": "NOT_UNDERSTOOD", "intent": decision.intent})
        turn = begin_flow(decision.slots, today)

    messages.extend(turn.messages)

    if not turn.done:
        save_session(conversation_id, _session(PHASE_IN_FLOW, turn.instance))
        log_with_context(logger, logging.DEBUG, "Flow suspended",
                         conversation_id=conversation_id, state=turn.instance.state.value)
        return _response(messages, {
            "type": "PROMPT",
            "state": turn.instance.state.value,
            "slots": turn.instance.slots.to_dict(),
        })

    return _complete_flow(
        conversation_id, turn, messages, recognizer, search_client, settings, today
    )
