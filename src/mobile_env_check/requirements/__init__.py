from __future__ import annotations

from .android import (
    AndroidCmdLineToolsRequirement,
    AndroidPlatformToolsRequirement,
    AndroidSdkPrerequisitesRequirement,
    AndroidSdkRootRequirement,
    EmulatorImagesRequirement,
    PlatformApiPackageRequirement,
)
from .base import BaseRequirement, Requirement

__all__ = [
    "AndroidCmdLineToolsRequirement",
    "AndroidPlatformToolsRequirement",
    "AndroidSdkPrerequisitesRequirement",
    "AndroidSdkRootRequirement",
    "BaseRequirement",
    "EmulatorImagesRequirement",
    "PlatformApiPackageRequirement",
    "Requirement",
]
