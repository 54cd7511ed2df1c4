from __future__ import annotations

import logging
import sys
from typing import Optional

from tqdm import tqdm

from semantic_auditor.dom.builder import DOMBuilder
from semantic_auditor.dom.qngine import QNGINE
from semantic_auditor.errors import FixtureLoadError
from semantic_auditor.model import AuditReport, CheckStatus
from semantic_auditor.utils.config_loader import get_nested_config
from semantic_auditor.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

STATUS_MARKS = {
    CheckStatus.PASSED: "ok",
    CheckStatus.FAILED: "FAIL",
    CheckStatus.ERROR: "ERROR",
}


def run_audit(path: Optional[str] = None) -> AuditReport:
    """
    Loads the fixture and runs every property check against it.

    Raises:
        FixtureLoadError: The fixture could not be loaded; no checks ran.
    """
    doc = DOMBuilder().load(path)
    engine = QNGINE(doc)

    report = AuditReport(source=doc.source, strategy=engine.strategy)
    for name in tqdm(engine.check_names, desc="Checks", unit="check", leave=False):
        report.outcomes.append(engine.run_check(name))
    return report


def print_report(report: AuditReport) -> None:
    print(f"Semantic structure audit of {report.source} ({report.strategy})")
    for outcome in report.outcomes:
        line = f"  [{STATUS_MARKS[outcome.status]:>5}] {outcome.check}"
        if outcome.passed:
            line += f" ({outcome.checked} evaluations, {outcome.collection_size} elements)"
        else:
            line += f": {outcome.message}"
        print(line)


def main() -> int:
    """Entry point of the `semantic-audit` command."""
    configure_logger(
        get_nested_config("debug.level", "INFO"),
        silenced_loggers=get_nested_config("debug.silenced", {})
    )

    try:
        report = run_audit()
    except FixtureLoadError as e:
        logger.error("Fixture could not be loaded: %s", e)
        print(f"FATAL: {e}")
        return 2

    print_report(report)
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
