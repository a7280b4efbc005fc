"""
Date Resolver

Nested state machine that turns a missing or ambiguous date into a definite
timex. Entry input is the current date slot text (possibly empty); exit output
is the resolved timex string.

    InitialStep --definite reply--> Done
         ^   |
         +---+ unparseable or still ambiguous reply (retry prompt)
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from statusbot.dialogs.timex import is_ambiguous, normalize_timex
from statusbot.rendering import OutboundMessage, prompt, render

logger = logging.getLogger(__name__)


class DateResolverState(str, Enum):
    INITIAL = "InitialStep"
    DONE = "Done"


@dataclass
class DateResolverInstance:
    state: DateResolverState = DateResolverState.INITIAL
    pending_prompt: Optional[str] = None
    attempts: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "pending_prompt": self.pending_prompt,
            "attempts": self.attempts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DateResolverInstance":
        return cls(
            state=DateResolverState(data.get("state", DateResolverState.INITIAL.value)),
            pending_prompt=data.get("pending_prompt"),
            attempts=int(data.get("attempts", 0)),
        )


@dataclass
class DateTurn:
    instance: DateResolverInstance
    messages: List[OutboundMessage] = field(default_factory=list)
    resolved: Optional[str] = None

    @property
    def done(self) -> bool:
        return self.instance.state == DateResolverState.DONE


def _suspend(text: str, attempts: int) -> DateTurn:
    instance = DateResolverInstance(
        state=DateResolverState.INITIAL,
        pending_prompt=text,
        attempts=attempts,
    )
    return DateTurn(instance=instance, messages=[prompt(text)])


def _finish(timex: str) -> DateTurn:
    return DateTurn(
        instance=DateResolverInstance(state=DateResolverState.DONE),
        resolved=timex,
    )


def begin_date_resolution(date_text: Optional[str], today: Optional[date] = None) -> DateTurn:
    """
    Enter the resolver with the current date slot text.

    Empty text asks for a date, ambiguous text asks for a more specific one,
    definite text passes through normalized without prompting.
    """
    if not date_text or not date_text.strip():
        return _suspend(render("date_prompt"), attempts=0)

    if is_ambiguous(date_text, today):
        logger.debug("Date %r is ambiguous; asking for a specific date", date_text)
        return _suspend(render("date_ambiguous_prompt"), attempts=0)

    return _finish(normalize_timex(date_text, today))


def continue_date_resolution(
    instance: DateResolverInstance,
    reply: Optional[str],
    today: Optional[date] = None
) -> DateTurn:
    """
    Resume the resolver with the user's reply.

    Raises:
        ValueError: If the resolver has already finished
    """
    if instance.state == DateResolverState.DONE:
        raise ValueError("Date resolution has already completed")

    if is_ambiguous(reply, today):
        logger.debug("Date reply %r rejected; re-prompting", reply)
        return _suspend(render("date_retry_prompt"), attempts=instance.attempts + 1)

    return _finish(normalize_timex(reply, today))
