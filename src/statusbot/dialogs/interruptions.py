"""
Interruptions

Replies that are handled the same way at every suspended step of the flow,
regardless of what the step asked for.
"""

from enum import Enum
from typing import Optional

HELP_WORDS = {"help", "?"}
CANCEL_WORDS = {"cancel", "quit"}


class Interruption(str, Enum):
    HELP = "help"
    CANCEL = "cancel"


def detect_interruption(reply: Optional[str]) -> Optional[Interruption]:
    if not reply:
        return None
    text = reply.strip().lower()
    if text in HELP_WORDS:
        return Interruption.HELP
    if text in CANCEL_WORDS:
        return Interruption.CANCEL
    return None
