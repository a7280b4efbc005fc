"""
Search Execution

Turns a confirmed SlotSet into a search query, tallies the matched records and
renders the result messages.
"""

from statusbot.search.execution import (
    build_search_query,
    execute_search,
    render_results,
    tally,
)

__all__ = [
    "build_search_query",
    "execute_search",
    "render_results",
    "tally",
]
