from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class CheckStatus(str, Enum):
    PASSED = "PASSED"
    FAILED = "FAILED"  # property violation
    ERROR = "ERROR"  # fatal setup error


class CheckOutcome(BaseModel):
    """
    Result of running a single property check against the fixture.
    """
    check: str
    status: CheckStatus
    checked: int = 0  # number of predicate evaluations
    collection_size: int = 0

    # Populated for FAILED / ERROR outcomes
    issue_code: Optional[str] = None
    message: str = ""
    element: Optional[Dict[str, Any]] = None

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASSED


class AuditReport(BaseModel):
    """Collected outcomes of a full run over one document."""
    source: str
    strategy: str
    outcomes: List[CheckOutcome] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(o.status == CheckStatus.ERROR for o in self.outcomes)

    @property
    def has_failures(self) -> bool:
        return any(o.status == CheckStatus.FAILED for o in self.outcomes)

    @property
    def exit_code(self) -> int:
        """0 when everything passed, 2 for a broken fixture, 1 for violations."""
        if self.has_errors:
            return 2
        if self.has_failures:
            return 1
        return 0
