"""
Tests for recognizer and search response contracts.
"""

import pytest

from statusbot.contracts.recognizer_contracts import parse_recognizer_response
from statusbot.contracts.search_contracts import parse_search_page
from statusbot.contracts.slots import SlotSet
from statusbot.errors.exceptions import ContractViolation


def _prediction(top_intent="count", entities=None):
    return {
        "kind": "ConversationResult",
        "result": {
            "query": "alpha smoke",
            "prediction": {
                "projectKind": "Conversation",
                "topIntent": top_intent,
                "intents": [
                    {"category": top_intent, "confidenceScore": 0.93},
                    {"category": "None", "confidenceScore": 0.02},
                ],
                "entities": entities or [],
            },
        },
    }


class TestRecognizerContract:

    def test_valid_response(self):
        result = parse_recognizer_response(_prediction(entities=[
            {"category": "Project", "text": "Alpha", "offset": 0, "length": 5},
            {"category": "Day", "text": "tomorrow", "offset": 6, "length": 8},
        ]))

        assert result.top_intent == "count"
        assert result.score == 0.93
        assert result.entities == {"Project": "Alpha", "Day": "tomorrow"}
        assert result.to_slot_set() == SlotSet(project="Alpha", date="tomorrow")

    def test_first_entity_per_category_wins(self):
        result = parse_recognizer_response(_prediction(entities=[
            {"category": "Suite", "text": "Smoke"},
            {"category": "Suite", "text": "Regression"},
        ]))

        assert result.entities == {"Suite": "Smoke"}

    def test_blank_entities_stay_empty(self):
        result = parse_recognizer_response(_prediction(entities=[
            {"category": "Status", "text": "  "},
        ]))

        assert result.to_slot_set() == SlotSet()

    @pytest.mark.parametrize("response", [
        None,
        {},
        {"result": {}},
        {"result": {"prediction": {"entities": []}}},
        {"result": {"prediction": {"topIntent": "count", "entities": {}}}},
        {"result": {"prediction": {"topIntent": "count", "entities": [{"text": "x"}]}}},
    ])
    def test_violations(self, response):
        with pytest.raises(ContractViolation):
            parse_recognizer_response(response)


class TestSearchContract:

    def test_page_with_continuation(self):
        records, next_page = parse_search_page({
            "@odata.count": 3,
            "value": [
                {"@search.score": 1.2, "project_name": "Alpha",
                 "suite_description": "Login", "executions_status": "Pass",
                 "executed_by": "ci"},
            ],
            "@search.nextPageParameters": {"search": "q", "skip": 50},
        })

        assert len(records) == 1
        assert records[0].suite_description == "Login"
        assert records[0].executions_status == "Pass"
        assert next_page == {"search": "q", "skip": 50}

    def test_last_page(self):
        records, next_page = parse_search_page({"value": []})

        assert records == []
        assert next_page is None

    def test_scalar_fields_are_stringified(self):
        records, _ = parse_search_page({"value": [{"suite_description": 42}]})

        assert records[0].suite_description == "42"

    @pytest.mark.parametrize("response", [
        [],
        {},
        {"value": "nope"},
        {"value": ["not a document"]},
        {"value": [{"suite_description": ["a", "b"]}]},
        {"value": [], "@search.nextPageParameters": "skip=50"},
    ])
    def test_violations(self, response):
        with pytest.raises(ContractViolation):
            parse_search_page(response)
