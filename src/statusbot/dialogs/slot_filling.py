"""
Slot-Filling Flow

Explicit state machine for collecting a SlotSet:

    ProjectStep -> SuiteStep -> StatusStep -> CategoryStep -> DateStep
        -> ConfirmStep -> Done

Each state is the step the flow is suspended at, waiting for a reply. A step
whose slot is already filled is skipped without prompting, so a slot is asked
for only when it is empty and never twice within one flow instance.

The transition functions are pure: they take a FlowInstance and a reply and
return a FlowTurn with a new instance, the outbound messages and, once the
flow is Done, the result (the confirmed SlotSet, or None when declined or
cancelled).
"""

import copy
import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from statusbot.contracts.slots import SlotSet
from statusbot.dialogs.date_resolver import (
    DateResolverInstance,
    begin_date_resolution,
    continue_date_resolution,
)
from statusbot.dialogs.interruptions import Interruption, detect_interruption
from statusbot.dialogs.timex import is_ambiguous, normalize_timex
from statusbot.rendering import OutboundMessage, notice, prompt, render

logger = logging.getLogger(__name__)


class FlowState(str, Enum):
    PROJECT = "ProjectStep"
    SUITE = "SuiteStep"
    STATUS = "StatusStep"
    CATEGORY = "CategoryStep"
    DATE = "DateStep"
    CONFIRM = "ConfirmStep"
    DONE = "Done"


STEP_ORDER: Tuple[FlowState, ...] = (
    FlowState.PROJECT,
    FlowState.SUITE,
    FlowState.STATUS,
    FlowState.CATEGORY,
    FlowState.DATE,
    FlowState.CONFIRM,
)

# Text steps: state -> (slot it fills, prompt template)
TEXT_STEPS: Dict[FlowState, Tuple[str, str]] = {
    FlowState.PROJECT: ("project", "project_prompt"),
    FlowState.SUITE: ("suite", "suite_prompt"),
    FlowState.STATUS: ("status", "status_prompt"),
    FlowState.CATEGORY: ("category", "category_prompt"),
}

YES_WORDS = {"yes", "y", "yeah", "yep", "sure", "ok", "okay", "correct", "right", "true"}
NO_WORDS = {"no", "n", "nope", "nah", "wrong", "false"}


@dataclass
class FlowInstance:
    state: FlowState = FlowState.PROJECT
    slots: SlotSet = field(default_factory=SlotSet)
    date_resolver: Optional[DateResolverInstance] = None
    pending_prompt: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "slots": self.slots.to_dict(),
            "date_resolver": self.date_resolver.to_dict() if self.date_resolver else None,
            "pending_prompt": self.pending_prompt,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlowInstance":
        resolver = data.get("date_resolver")
        return cls(
            state=FlowState(data["state"]),
            slots=SlotSet.from_dict(data.get("slots")),
            date_resolver=DateResolverInstance.from_dict(resolver) if resolver else None,
            pending_prompt=data.get("pending_prompt"),
        )


@dataclass
class FlowTurn:
    instance: FlowInstance
    messages: List[OutboundMessage] = field(default_factory=list)
    result: Optional[SlotSet] = None
    cancelled: bool = False

    @property
    def done(self) -> bool:
        return self.instance.state == FlowState.DONE


def parse_confirmation(reply: Optional[str]) -> Optional[bool]:
    """Yes/no reading of a confirmation reply; None when it is neither."""
    if not reply:
        return None
    words = reply.strip().lower().rstrip(".!").replace(",", " ").split()
    if not words:
        return None
    if words[0] in YES_WORDS:
        return True
    if words[0] in NO_WORDS:
        return False
    return None


def _suspend(instance: FlowInstance, state: FlowState, text: str,
             messages: List[OutboundMessage]) -> FlowTurn:
    instance.state = state
    instance.pending_prompt = text
    messages.append(prompt(text))
    return FlowTurn(instance=instance, messages=messages)


def _finish(instance: FlowInstance, result: Optional[SlotSet],
            messages: List[OutboundMessage]) -> FlowTurn:
    instance.state = FlowState.DONE
    instance.pending_prompt = None
    instance.date_resolver = None
    return FlowTurn(
        instance=instance,
        messages=messages,
        result=result,
        cancelled=result is None,
    )


def _advance(instance: FlowInstance, start: FlowState, messages: List[OutboundMessage],
             today: Optional[date]) -> FlowTurn:
    """Run steps from `start` until one needs a reply."""
    slots = instance.slots
    for step in STEP_ORDER[STEP_ORDER.index(start):]:
        if step in TEXT_STEPS:
            slot_name, template_key = TEXT_STEPS[step]
            if slots.is_empty(slot_name):
                return _suspend(instance, step, render(template_key, **slots.to_dict()), messages)
            continue

        if step == FlowState.DATE:
            if slots.is_empty("date") or is_ambiguous(slots.date, today):
                date_turn = begin_date_resolution(slots.date, today)
                instance.state = FlowState.DATE
                instance.date_resolver = date_turn.instance
                instance.pending_prompt = date_turn.instance.pending_prompt
                messages.extend(date_turn.messages)
                return FlowTurn(instance=instance, messages=messages)
            slots.date = normalize_timex(slots.date, today)
            continue

        return _suspend(instance, FlowState.CONFIRM, render("confirm_prompt", **slots.to_dict()), messages)

    raise ValueError(f"No step follows {start}")


def begin_flow(slots: Optional[SlotSet] = None, today: Optional[date] = None) -> FlowTurn:
    """
    Start a flow with an empty or partially pre-filled SlotSet.

    The caller's SlotSet is not mutated.
    """
    instance = FlowInstance(slots=copy.deepcopy(slots) if slots else SlotSet())
    logger.debug("Flow started with missing slots %s", instance.slots.missing())
    return _advance(instance, FlowState.PROJECT, [], today)


def continue_flow(instance: FlowInstance, reply: Optional[str],
                  today: Optional[date] = None) -> FlowTurn:
    """
    Resume a suspended flow with the user's reply.

    Raises:
        ValueError: If the flow has already completed
    """
    if instance.state == FlowState.DONE:
        raise ValueError("Flow has already completed")

    instance = copy.deepcopy(instance)
    messages: List[OutboundMessage] = []

    interruption = detect_interruption(reply)
    if interruption == Interruption.HELP:
        messages.append(notice(render("help")))
        if instance.pending_prompt:
            messages.append(prompt(instance.pending_prompt))
        return FlowTurn(instance=instance, messages=messages)
    if interruption == Interruption.CANCEL:
        logger.info("Flow cancelled at %s", instance.state.value)
        messages.append(notice(render("cancel")))
        return _finish(instance, None, messages)

    state = instance.state

    if state in TEXT_STEPS:
        slot_name, template_key = TEXT_STEPS[state]
        value = (reply or "").strip()
        if not value:
            text = instance.pending_prompt or render(template_key, **instance.slots.to_dict())
            return _suspend(instance, state, text, messages)
        setattr(instance.slots, slot_name, value)
        return _advance(instance, STEP_ORDER[STEP_ORDER.index(state) + 1], messages, today)

    if state == FlowState.DATE:
        resolver = instance.date_resolver or DateResolverInstance()
        date_turn = continue_date_resolution(resolver, reply, today)
        messages.extend(date_turn.messages)
        if not date_turn.done:
            instance.date_resolver = date_turn.instance
            instance.pending_prompt = date_turn.instance.pending_prompt
            return FlowTurn(instance=instance, messages=messages)
        instance.slots.date = date_turn.resolved
        instance.date_resolver = None
        return _advance(instance, FlowState.CONFIRM, messages, today)

    # ConfirmStep
    answer = parse_confirmation(reply)
    if answer is None:
        messages.append(prompt(f"{render('confirm_retry')} {instance.pending_prompt}"))
        return FlowTurn(instance=instance, messages=messages)
    if answer:
        return _finish(instance, copy.deepcopy(instance.slots), messages)
    logger.info("Confirmation declined")
    return _finish(instance, None, messages)
