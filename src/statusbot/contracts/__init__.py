"""
Contracts

Data shapes exchanged between the dialog core and its collaborators, and the
boundary checks that decode raw recognizer/search payloads into them.
"""

from statusbot.contracts.slots import SLOT_ORDER, RecognizerResult, SlotSet
from statusbot.contracts.search import SearchOutcome, SearchRecord
from statusbot.contracts.recognizer_contracts import parse_recognizer_response
from statusbot.contracts.search_contracts import parse_search_page

__all__ = [
    "SLOT_ORDER",
    "RecognizerResult",
    "SlotSet",
    "SearchOutcome",
    "SearchRecord",
    "parse_recognizer_response",
    "parse_search_page",
]
