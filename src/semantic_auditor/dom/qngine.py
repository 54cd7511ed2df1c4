# src/semantic_auditor/dom/qngine.py
import logging
import random
from typing import Callable, Dict, List, Optional, Tuple

from .collectors import get_images, get_interactive_elements, get_page_sections, get_semantic_sections
from .core import ElementBase, Rule
from .models import SiteDocument
from .registry import DOMRegistry
from ..errors import FatalSetupError, PropertyViolation
from ..model import AuditReport, CheckOutcome, CheckStatus
from ..utils.config_loader import get_nested_config

logger = logging.getLogger(__name__)

Collector = Callable[[SiteDocument], List[ElementBase]]

STRATEGIES = ("exhaustive", "sampled")

# Check name -> (collector, issue code of the rule), in reporting order.
# The rule itself is looked up in the DOMRegistry.
PROPERTY_CHECKS: Dict[str, Tuple[Collector, str]] = {
    "semantic_tags": (get_page_sections, "NON_SEMANTIC_TAG"),
    "heading_presence": (get_semantic_sections, "MISSING_HEADING"),
    "interactive_accessibility": (get_interactive_elements, "MISSING_ACCESSIBLE_NAME"),
    "image_alt": (get_images, "MISSING_ALT"),
}


class QNGINE:
    """
    Quality Engine (QNGINE) for property checks on a SiteDocument.

    Each check pairs a collector with the registered rule for one issue
    code. The rule is evaluated for members of the collection and the first
    element it flags, in collection order, is reported as the counterexample.

    Two strategies are supported:
      - 'exhaustive': every element is evaluated once, in order.
      - 'sampled': `num_runs` uniform draws with replacement from a
        `random.Random(seed)`; on failure the collection is rescanned so the
        reported element does not depend on the draw order.
    """

    def __init__(
            self,
            doc: SiteDocument,
            strategy: Optional[str] = None,
            num_runs: Optional[int] = None,
            seed: Optional[int] = None
    ):
        self.doc = doc
        self.strategy = strategy or get_nested_config("checks.strategy", "exhaustive")
        self.num_runs = num_runs if num_runs is not None else get_nested_config("checks.num_runs", 100)
        self.seed = seed if seed is not None else get_nested_config("checks.seed", 0)

        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy '{self.strategy}', expected one of {STRATEGIES}")
        if self.num_runs < 1:
            raise ValueError(f"num_runs must be positive, got {self.num_runs}")

    @property
    def check_names(self) -> List[str]:
        return list(PROPERTY_CHECKS)

    def assert_check(self, name: str) -> int:
        """
        Evaluates check `name` and returns the number of rule evaluations.

        Raises:
            PropertyViolation: The rule flagged an element.
            EmptyCollectionError: A required collection was empty.
        """
        collector, rule = self._lookup(name)
        return self._evaluate(name, collector(self.doc), rule)

    def run_check(self, name: str) -> CheckOutcome:
        """Runs one check and converts its result into a CheckOutcome."""
        collector, rule = self._lookup(name)
        try:
            elements = collector(self.doc)
            checked = self._evaluate(name, elements, rule)
        except PropertyViolation as v:
            return CheckOutcome(
                check=name,
                status=CheckStatus.FAILED,
                checked=v.checked or 0,
                collection_size=len(elements),
                issue_code=v.results[0][0],
                message=str(v),
                element=v.element
            )
        except FatalSetupError as e:
            logger.error("Check %s could not run: %s", name, e)
            return CheckOutcome(
                check=name,
                status=CheckStatus.ERROR,
                issue_code=type(e).__name__,
                message=str(e)
            )

        return CheckOutcome(
            check=name,
            status=CheckStatus.PASSED,
            checked=checked,
            collection_size=len(elements)
        )

    def run_all(self, names: Optional[List[str]] = None) -> AuditReport:
        """
        Runs every check (or the given subset) independently of one another.
        """
        report = AuditReport(source=self.doc.source, strategy=self.strategy)
        for name in names or self.check_names:
            outcome = self.run_check(name)
            logger.info("%s: %s", name, outcome.status.value)
            report.outcomes.append(outcome)
        return report

    # --- Internals ---

    def _lookup(self, name: str) -> Tuple[Collector, Rule]:
        try:
            collector, code = PROPERTY_CHECKS[name]
        except KeyError:
            raise KeyError(f"Unknown check '{name}'. Available: {', '.join(PROPERTY_CHECKS)}") from None
        return collector, DOMRegistry.get_rule(code)

    def _evaluate(self, name: str, elements: List[ElementBase], rule: Rule) -> int:
        if not elements:
            logger.debug("Check %s: empty collection, passes vacuously", name)
            return 0

        if self.strategy == "exhaustive":
            checked, failure = self._first_failure(elements, rule)
        else:
            checked, failure = self._sample(elements, rule)

        if failure is not None:
            element, results = failure
            logger.debug("Check %s failed on %s", name, element.identity())
            raise PropertyViolation(name, element.identity(), results, checked=checked)

        logger.debug("Check %s passed (%d evaluations over %d elements)", name, checked, len(elements))
        return checked

    @staticmethod
    def _first_failure(elements: List[ElementBase], rule: Rule):
        checked = 0
        for element in elements:
            checked += 1
            results = rule(element)
            if results:
                return checked, (element, results)
        return checked, None

    def _sample(self, elements: List[ElementBase], rule: Rule):
        rng = random.Random(self.seed)
        for run in range(1, self.num_runs + 1):
            if rule(rng.choice(elements)):
                # Report the earliest offender, not the one the draw hit
                _, failure = self._first_failure(elements, rule)
                return run, failure
        return self.num_runs, None
