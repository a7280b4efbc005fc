"""
Dialogs

The slot-filling state machine, its nested date resolver and the timex
helpers both rely on.
"""

from statusbot.dialogs.date_resolver import (
    DateResolverInstance,
    DateResolverState,
    DateTurn,
    begin_date_resolution,
    continue_date_resolution,
)
from statusbot.dialogs.slot_filling import (
    FlowInstance,
    FlowState,
    FlowTurn,
    begin_flow,
    continue_flow,
    parse_confirmation,
)
from statusbot.dialogs.timex import TimexProperty, is_ambiguous, normalize_timex, parse_timex

__all__ = [
    "DateResolverInstance",
    "DateResolverState",
    "DateTurn",
    "begin_date_resolution",
    "continue_date_resolution",
    "FlowInstance",
    "FlowState",
    "FlowTurn",
    "begin_flow",
    "continue_flow",
    "parse_confirmation",
    "TimexProperty",
    "is_ambiguous",
    "normalize_timex",
    "parse_timex",
]
