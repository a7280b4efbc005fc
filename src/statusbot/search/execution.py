"""
Search Execution

Query format:
    (project_name:"<project>")+(suite_description:"<suite>")

Records are tallied by exact, case-sensitive match of executions_status
against "Pass" and "Fail"; any other value is left out of both counts.
"""

import json
import logging
from typing import List, Protocol, Sequence, Tuple

from statusbot.contracts.search import SearchOutcome, SearchRecord
from statusbot.contracts.slots import SlotSet
from statusbot.rendering import OutboundMessage, notice, render

logger = logging.getLogger(__name__)


class Searcher(Protocol):
    def search(self, query: str) -> List[SearchRecord]:
        ...


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_search_query(slots: SlotSet) -> str:
    return (
        f'(project_name:"{_quote(slots.project or "")}")'
        f'+(suite_description:"{_quote(slots.suite or "")}")'
    )


def tally(records: Sequence[SearchRecord]) -> SearchOutcome:
    outcome = SearchOutcome(records=list(records))
    unknown = outcome.unknown_statuses
    if unknown:
        logger.debug(
            "Ignored %d records with status other than Pass/Fail",
            len(unknown),
            extra={"statuses": sorted({str(s) for s in unknown})},
        )
    return outcome


def execute_search(slots: SlotSet, searcher: Searcher) -> Tuple[str, SearchOutcome]:
    """
    Issue the query for a confirmed SlotSet.

    Errors from the searcher propagate unchanged; there is no retry.
    """
    query = build_search_query(slots)
    logger.info("Executing status search", extra={"query": query})
    outcome = tally(searcher.search(query))
    logger.info(
        "Status search complete",
        extra={
            "query": query,
            "pass_count": outcome.pass_count,
            "fail_count": outcome.fail_count,
            "records": len(outcome.records),
        },
    )
    return query, outcome


def render_results(slots: SlotSet, outcome: SearchOutcome) -> List[OutboundMessage]:
    """Restated parameters, pass/fail tally and matched suite descriptions."""
    return [
        notice(render("results_summary", **slots.to_dict())),
        notice(render(
            "results_tally",
            pass_count=outcome.pass_count,
            fail_count=outcome.fail_count,
        )),
        notice(render("results_suites", suites=json.dumps(outcome.descriptions))),
    ]
