"""
Search Contracts

Typed view over project status search documents.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel

PASS_STATUS = "Pass"
FAIL_STATUS = "Fail"


class SearchRecord(BaseModel):
    """One matched document. Fields the index returns beyond these are ignored."""
    project_name: Optional[str] = None
    suite_description: Optional[str] = None
    executions_status: Optional[str] = None


@dataclass
class SearchOutcome:
    records: List[SearchRecord] = field(default_factory=list)

    @property
    def pass_count(self) -> int:
        return sum(1 for r in self.records if r.executions_status == PASS_STATUS)

    @property
    def fail_count(self) -> int:
        return sum(1 for r in self.records if r.executions_status == FAIL_STATUS)

    @property
    def descriptions(self) -> List[str]:
        return [r.suite_description or "" for r in self.records]

    @property
    def unknown_statuses(self) -> List[Optional[str]]:
        """Status values that were neither Pass nor Fail (not counted)."""
        return [
            r.executions_status for r in self.records
            if r.executions_status not in (PASS_STATUS, FAIL_STATUS)
        ]
