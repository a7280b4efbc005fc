"""
Rendering Layer

Outbound message shapes and the prompt templates they are rendered from.
"""

from statusbot.rendering.messages import (
    INPUT_HINT_EXPECTING,
    INPUT_HINT_IGNORING,
    OutboundMessage,
    notice,
    prompt,
)
from statusbot.rendering.templates import get_template, render

__all__ = [
    "INPUT_HINT_EXPECTING",
    "INPUT_HINT_IGNORING",
    "OutboundMessage",
    "notice",
    "prompt",
    "get_template",
    "render",
]
