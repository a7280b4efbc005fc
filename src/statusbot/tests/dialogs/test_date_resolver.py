"""
Tests for the nested date resolution state machine.
"""

from datetime import date

import pytest

from statusbot.dialogs.date_resolver import (
    DateResolverInstance,
    DateResolverState,
    begin_date_resolution,
    continue_date_resolution,
)

TODAY = date(2024, 3, 1)


def _prompts(turn):
    return [m.text for m in turn.messages if m.expects_reply]


class TestBegin:

    def test_definite_date_passes_through_without_prompting(self):
        turn = begin_date_resolution("2024-03-04", TODAY)

        assert turn.done is True
        assert turn.resolved == "2024-03-04"
        assert turn.messages == []

    def test_definite_natural_date_is_normalized(self):
        turn = begin_date_resolution("March 4, 2024", TODAY)

        assert turn.done is True
        assert turn.resolved == "2024-03-04"

    @pytest.mark.parametrize("empty", [None, "", "   "])
    def test_empty_date_asks_for_a_date(self, empty):
        turn = begin_date_resolution(empty, TODAY)

        assert turn.done is False
        assert _prompts(turn) == ["What date would you like?"]

    def test_ambiguous_date_asks_for_a_specific_date(self):
        turn = begin_date_resolution("next Friday", TODAY)

        assert turn.done is False
        assert _prompts(turn) == ["Can you give me a more specific date?"]

    def test_unparseable_date_is_treated_as_ambiguous(self):
        turn = begin_date_resolution("after the release", TODAY)

        assert _prompts(turn) == ["Can you give me a more specific date?"]


class TestContinue:

    def test_relative_date_prompts_exactly_once_then_resolves(self):
        first = begin_date_resolution("next Friday", TODAY)
        second = continue_date_resolution(first.instance, "March 8, 2024", TODAY)

        assert len(_prompts(first)) == 1
        assert second.done is True
        assert second.messages == []
        assert second.resolved == "2024-03-08"

    def test_reply_can_be_a_range(self):
        first = begin_date_resolution(None, TODAY)
        second = continue_date_resolution(first.instance, "from 3/1/2024 to 3/5/2024", TODAY)

        assert second.resolved == "(2024-03-01,2024-03-05,P4D)"

    def test_relative_reply_is_resolved_against_today(self):
        first = begin_date_resolution(None, TODAY)
        second = continue_date_resolution(first.instance, "tomorrow", TODAY)

        assert second.resolved == "2024-03-02"

    @pytest.mark.parametrize("reply", ["next monday", "soon", ""])
    def test_ambiguous_reply_is_retried(self, reply):
        first = begin_date_resolution(None, TODAY)
        second = continue_date_resolution(first.instance, reply, TODAY)

        assert second.done is False
        assert _prompts(second) == [
            "I'm sorry, for best results, please enter the date including the month, day and year."
        ]
        assert second.instance.attempts == 1

    def test_resume_after_done_raises(self):
        with pytest.raises(ValueError):
            continue_date_resolution(
                DateResolverInstance(state=DateResolverState.DONE), "2024-03-04", TODAY
            )
