"""
Tests for intent routing.
"""

from statusbot.contracts.slots import RecognizerResult, SlotSet
from statusbot.errors.exceptions import ContractViolation, UpstreamError
from statusbot.routing.intent_router import Route, get_route, intent_routes, route_utterance


def test_unconfigured_recognizer_is_never_called(unconfigured_recognizer):
    decision = route_utterance("show me alpha", unconfigured_recognizer)

    unconfigured_recognizer.recognize.assert_not_called()
    assert decision.route == Route.UNCONFIGURED
    assert decision.slots == SlotSet()
    assert len(decision.messages) == 1
    assert decision.messages[0].text.startswith("NOTE: the recognizer is not configured")
    assert decision.starts_flow is True


def test_status_intent_seeds_slots_from_entities(recognizer):
    recognizer.recognize.return_value = RecognizerResult(
        top_intent="count",
        entities={"Project": "Alpha", "Suite": "Smoke", "Item": "UI"},
    )

    decision = route_utterance("alpha smoke ui results", recognizer)

    recognizer.recognize.assert_called_once_with("alpha smoke ui results")
    assert decision.route == Route.BEGIN_FLOW
    assert decision.slots == SlotSet(project="Alpha", suite="Smoke", category="UI")
    assert decision.messages == []


def test_other_intent_is_not_understood(recognizer):
    recognizer.recognize.return_value = RecognizerResult(top_intent="None")

    decision = route_utterance("what's the weather", recognizer)

    assert decision.route == Route.NOT_UNDERSTOOD
    assert decision.slots is None
    assert [m.text for m in decision.messages] == [
        "Sorry, I didn't get that. Please try asking in a different way (intent was None)"
    ]
    assert decision.starts_flow is False


def test_status_intent_name_is_configurable(recognizer):
    recognizer.recognize.return_value = RecognizerResult(top_intent="StatusQuery")

    assert route_utterance("x", recognizer, "StatusQuery").route == Route.BEGIN_FLOW
    assert route_utterance("x", recognizer, "count").route == Route.NOT_UNDERSTOOD


def test_recognizer_failure_degrades_to_empty_flow(recognizer):
    recognizer.recognize.side_effect = UpstreamError("recognizer down")

    decision = route_utterance("alpha", recognizer)

    recognizer.recognize.assert_called_once()
    assert decision.route == Route.UNCONFIGURED
    assert decision.slots == SlotSet()
    assert [m.text for m in decision.messages] == [
        "NOTE: the recognizer could not be reached, so I will ask for each detail in turn."
    ]
    assert "CLU_ENDPOINT" not in decision.messages[0].text


def test_malformed_recognizer_response_degrades_to_empty_flow(recognizer):
    recognizer.recognize.side_effect = ContractViolation("no prediction")

    assert route_utterance("alpha", recognizer).route == Route.UNCONFIGURED


def test_get_route():
    assert get_route("count", "count") == "status_query"
    assert get_route("Cancel", "count") is None


def test_intent_routes_table_follows_status_label():
    assert intent_routes("count") == {"count": "status_query"}
    assert intent_routes("StatusQuery") == {"StatusQuery": "status_query"}
