"""
Outbound Messages

A message carries its text and an input hint telling the transport whether
the bot now waits for a reply.
"""

from dataclasses import dataclass
from typing import Any, Dict

INPUT_HINT_EXPECTING = "expectingInput"
INPUT_HINT_IGNORING = "ignoringInput"


@dataclass(frozen=True)
class OutboundMessage:
    text: str
    input_hint: str = INPUT_HINT_IGNORING

    @property
    def expects_reply(self) -> bool:
        return self.input_hint == INPUT_HINT_EXPECTING

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "input_hint": self.input_hint}


def prompt(text: str) -> OutboundMessage:
    """Message that suspends the conversation until the user replies."""
    return OutboundMessage(text=text, input_hint=INPUT_HINT_EXPECTING)


def notice(text: str) -> OutboundMessage:
    """Informational message; no reply expected."""
    return OutboundMessage(text=text, input_hint=INPUT_HINT_IGNORING)
