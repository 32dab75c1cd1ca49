"""
Test doubles for requirements, probes and command runners.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from mobile_env_check.messages import MessageTemplate
from mobile_env_check.models import CheckResult
from mobile_env_check.probes.android import SdkRoot
from mobile_env_check.probes.packages import AndroidPackage
from mobile_env_check.probes.process import CommandResult


class StaticRequirement:
    """Requirement with a canned verdict, optional delay and optional exception."""

    def __init__(self, title: str, ok: bool = True, delay: float = 0.0, error: Optional[Exception] = None):
        self.title = title
        self.fulfilled_message = MessageTemplate(f"{title} is fine")
        self.unfulfilled_message = MessageTemplate(f"{title} is missing")
        self.ok = ok
        self.delay = delay
        self.error = error
        self.calls = 0

    async def check(self) -> CheckResult:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.ok:
            return CheckResult.fulfilled(self.title, self.fulfilled_message.render())
        return CheckResult.unfulfilled(self.title, self.unfulfilled_message.render())


API_30 = AndroidPackage(
    path="platforms;android-30",
    version="3",
    description="Android SDK Platform 30",
    location="platforms/android-30/",
)

IMAGE_30 = AndroidPackage(
    path="system-images;android-30;google_apis;x86_64",
    version="10",
    description="Google APIs Intel x86 Atom_64 System Image",
    location="system-images/android-30/google_apis/x86_64/",
)


class FakeAndroidProbe:
    """AndroidProbe stand-in. Each answer is returned, or raised when it is an exception."""

    def __init__(self, **overrides):
        self.sdk_root: Optional[SdkRoot] = SdkRoot("ANDROID_HOME", "/opt/android")
        self.prerequisites = "8.0"
        self.cmdline_tools = "/opt/android/cmdline-tools/latest/bin"
        self.platform_tools = "/opt/android/platform-tools"
        self.api_package = API_30
        self.image_package = IMAGE_30
        self.requested_api_levels: List[Optional[str]] = []
        for k, v in overrides.items():
            setattr(self, k, v)

    @staticmethod
    async def _answer(value):
        if isinstance(value, BaseException):
            raise value
        return value

    def get_sdk_root(self):
        return self.sdk_root

    def platform_tools_dir(self):
        return Path(self.sdk_root.root_location) / "platform-tools" if self.sdk_root else None

    async def sdk_prerequisites_check(self):
        return await self._answer(self.prerequisites)

    async def fetch_cmdline_tools_location(self):
        return await self._answer(self.cmdline_tools)

    async def fetch_platform_tools_location(self):
        return await self._answer(self.platform_tools)

    async def fetch_supported_api_package(self, api_level=None):
        self.requested_api_levels.append(api_level)
        return await self._answer(self.api_package)

    async def fetch_supported_emulator_image_package(self, api_level=None):
        self.requested_api_levels.append(api_level)
        return await self._answer(self.image_package)


class ScriptedRunner:
    """Command runner keyed by (tool stem, first argument)."""

    def __init__(self, responses: Dict[Tuple[str, str], CommandResult]):
        self.responses = responses
        self.calls: List[List[str]] = []

    async def __call__(self, args, env=None) -> CommandResult:
        self.calls.append(list(args))
        key = (Path(args[0]).stem, args[1] if len(args) > 1 else "")
        if key not in self.responses:
            return CommandResult(127, "", f"{args[0]}: command not found")
        return self.responses[key]
