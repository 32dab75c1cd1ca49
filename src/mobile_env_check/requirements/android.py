from __future__ import annotations
from typing import Optional

from ..config import AndroidConfig
from ..errors import ProbeError
from ..messages import MessageCatalog
from ..models import CheckResult
from ..probes.android import AndroidProbe
from ..probes.process import COMMAND_NOT_FOUND
from .base import BaseRequirement, to_unix_path


class AndroidSdkRootRequirement(BaseRequirement):
    """ANDROID_HOME / ANDROID_SDK_ROOT is set and points at a directory."""

    message_key = "android.sdk_root"

    def __init__(self, messages: MessageCatalog, probe: AndroidProbe) -> None:
        super().__init__(messages)
        self.probe = probe

    async def check(self) -> CheckResult:
        root = self.probe.get_sdk_root()
        if root is None:
            return self.unfulfilled()
        return self.fulfilled(root.root_source, root.root_location, unix_paths=True)


class AndroidSdkPrerequisitesRequirement(BaseRequirement):
    """The SDK tooling can start, which in practice means a usable Java runtime."""

    message_key = "android.sdk_prerequisites"

    def __init__(self, messages: MessageCatalog, probe: AndroidProbe) -> None:
        super().__init__(messages)
        self.probe = probe

    async def check(self) -> CheckResult:
        try:
            await self.probe.sdk_prerequisites_check()
        except ProbeError as e:
            return self.unfulfilled(e.message)
        return self.fulfilled()


class AndroidCmdLineToolsRequirement(BaseRequirement):
    message_key = "android.cmdline_tools"

    def __init__(self, messages: MessageCatalog, probe: AndroidProbe) -> None:
        super().__init__(messages)
        self.probe = probe

    async def check(self) -> CheckResult:
        try:
            location = await self.probe.fetch_cmdline_tools_location()
        except ProbeError:
            return self.unfulfilled()
        return self.fulfilled(location, unix_paths=True)


class AndroidPlatformToolsRequirement(BaseRequirement):
    """adb is runnable.

    Two failure shapes: the tool is missing entirely (status 127), or it is
    present but fails, which is reported against the minimum supported runtime.
    """

    message_key = "android.platform_tools"

    def __init__(self, messages: MessageCatalog, probe: AndroidProbe, config: AndroidConfig) -> None:
        super().__init__(messages)
        self.probe = probe
        self.config = config

    def _expected_location(self) -> str:
        location = self.probe.platform_tools_dir()
        return to_unix_path(str(location)) if location is not None else "<Android SDK root>/platform-tools"

    async def check(self) -> CheckResult:
        try:
            location = await self.probe.fetch_platform_tools_location()
        except ProbeError as e:
            if e.status == COMMAND_NOT_FOUND and self.not_found_message is not None:
                return self.unfulfilled(self._expected_location(), template=self.not_found_message)
            return self.unfulfilled(self.config.min_supported_runtime)
        return self.fulfilled(location, unix_paths=True)


class PlatformApiPackageRequirement(BaseRequirement):
    """A platform package at or above the minimum runtime, or exactly ``api_level`` when given."""

    message_key = "android.platform_api"

    def __init__(
        self,
        messages: MessageCatalog,
        probe: AndroidProbe,
        config: AndroidConfig,
        api_level: Optional[str] = None,
    ) -> None:
        super().__init__(messages)
        self.probe = probe
        self.config = config
        self.api_level = api_level

    async def check(self) -> CheckResult:
        try:
            pkg = await self.probe.fetch_supported_api_package(self.api_level)
        except ProbeError:
            return self.unfulfilled(self.config.min_supported_runtime)
        return self.fulfilled(pkg.platform_api)


class EmulatorImagesRequirement(BaseRequirement):
    """At least one installed system image of any supported type."""

    message_key = "android.emulator_images"

    def __init__(
        self,
        messages: MessageCatalog,
        probe: AndroidProbe,
        config: AndroidConfig,
        api_level: Optional[str] = None,
    ) -> None:
        super().__init__(messages)
        self.probe = probe
        self.config = config
        self.api_level = api_level

    async def check(self) -> CheckResult:
        try:
            pkg = await self.probe.fetch_supported_emulator_image_package(self.api_level)
        except ProbeError:
            return self.unfulfilled(",".join(self.config.supported_images))
        return self.fulfilled(pkg.path)
