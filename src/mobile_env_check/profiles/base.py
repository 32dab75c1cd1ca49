from __future__ import annotations
from typing import Iterable, Optional, Tuple
import asyncio
import logging

from ..catalog import RequirementCatalog
from ..config import Settings
from ..messages import MessageCatalog
from ..models import SetupReport
from ..orchestrator import RequirementOrchestrator, ResultHook
from ..requirements.base import Requirement


class SetupProfile:
    """Composition root for one target platform.

    Subclasses instantiate their requirements in ``__init__`` and hand them to
    ``add_requirements``. Nothing is checked until ``run`` is awaited.
    """

    name = "Environment"

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        settings: Optional[Settings] = None,
        messages: Optional[MessageCatalog] = None,
    ) -> None:
        self.logger = logger or logging.getLogger("mobile_env.setup")
        self.settings = settings or Settings()
        self.messages = messages or MessageCatalog.default()
        self.catalog = RequirementCatalog(self.name)

    def add_requirements(self, requirements: Iterable[Requirement]) -> None:
        self.catalog.add(requirements)

    @property
    def requirements(self) -> Tuple[Requirement, ...]:
        return self.catalog.all()

    def orchestrator(self, on_result: Optional[ResultHook] = None) -> RequirementOrchestrator:
        return RequirementOrchestrator(self.catalog, logger=self.logger, on_result=on_result)

    async def run(self, on_result: Optional[ResultHook] = None) -> SetupReport:
        return await self.orchestrator(on_result).run()

    def run_sync(self, on_result: Optional[ResultHook] = None) -> SetupReport:
        return asyncio.run(self.run(on_result))
