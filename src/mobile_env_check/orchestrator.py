from __future__ import annotations
from typing import Callable, Optional
import asyncio
import logging

from .catalog import RequirementCatalog
from .models import CheckResult, SetupReport
from .requirements.base import Requirement

ResultHook = Callable[[CheckResult], None]


class RequirementOrchestrator:
    """Runs every requirement of a catalog concurrently and aggregates a SetupReport.

    All checks are started before any is awaited, and the report is built only
    once every check has settled. A check that raises is recorded as an
    unfulfilled result flagged ``probe_failed``; it never aborts the run.
    There is no retry and no cancellation: wrap ``run`` in
    ``asyncio.wait_for`` if a deadline is needed.
    """

    def __init__(
        self,
        catalog: RequirementCatalog,
        logger: Optional[logging.Logger] = None,
        on_result: Optional[ResultHook] = None,
    ) -> None:
        self.catalog = catalog
        self.logger = logger or logging.getLogger("mobile_env.orchestrator")
        self.on_result = on_result

    async def run(self) -> SetupReport:
        self.catalog.validate()
        requirements = self.catalog.all()
        self.logger.info("%s: running %d requirement check(s)", self.catalog.name, len(requirements))
        tasks = [asyncio.ensure_future(self._evaluate(r)) for r in requirements]
        results = await asyncio.gather(*tasks)
        report = SetupReport(profile=self.catalog.name, results=tuple(results))
        self.logger.info(
            "%s: %s (%d/%d fulfilled)",
            self.catalog.name,
            "satisfied" if report.overall_satisfied else "not satisfied",
            len(results) - len(report.failed),
            len(results),
        )
        return report

    def run_sync(self) -> SetupReport:
        return asyncio.run(self.run())

    async def _evaluate(self, requirement: Requirement) -> CheckResult:
        title = requirement.title
        try:
            result = await requirement.check()
            if not isinstance(result, CheckResult):
                raise TypeError(f"check() returned {type(result).__name__}, expected CheckResult")
        except Exception as e:
            self.logger.warning("%s: probe failed: %s", title, e, exc_info=self.logger.isEnabledFor(logging.DEBUG))
            result = CheckResult.unfulfilled(title, f"{title} could not be evaluated: {e}", probe_failed=True)
        if result.title != title:
            result = CheckResult(title=title, outcome=result.outcome, message=result.message, probe_failed=result.probe_failed)
        self._emit(result)
        return result

    def _emit(self, result: CheckResult) -> None:
        level = logging.INFO if result.ok else logging.WARNING
        self.logger.log(level, "%s: %s", result.title, result.message)
        if self.on_result is None:
            return
        try:
            self.on_result(result)
        except Exception:
            # A broken display hook must not lose the result.
            self.logger.exception("%s: result hook failed", result.title)
