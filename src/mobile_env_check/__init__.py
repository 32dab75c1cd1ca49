from __future__ import annotations

from .catalog import RequirementCatalog
from .models import CheckResult, Outcome, SetupReport
from .orchestrator import RequirementOrchestrator
from .profiles.android import AndroidEnvironmentSetup
from .profiles.base import SetupProfile

__version__ = "0.1.0"

__all__ = [
    "AndroidEnvironmentSetup",
    "CheckResult",
    "Outcome",
    "RequirementCatalog",
    "RequirementOrchestrator",
    "SetupProfile",
    "SetupReport",
]
