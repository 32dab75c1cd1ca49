from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional
import logging
import os

from ..config import Settings
from ..errors import ProbeError
from .packages import AndroidPackage, parse_installed_packages
from .process import COMMAND_NOT_FOUND, CommandResult, CommandRunner, run_command

log = logging.getLogger("mobile_env.probe.android")

JAVA_ERROR_MARKERS = ("NoClassDefFoundError", "UnsupportedClassVersionError", "JAVA_HOME is set to an invalid")


def _exe(name: str, windows_suffix: str) -> str:
    return f"{name}{windows_suffix}" if os.name == "nt" else name


@dataclass(frozen=True)
class SdkRoot:
    root_source: str
    root_location: str


class AndroidProbe:
    """Read-only inspection of an Android SDK installation."""

    def __init__(self, settings: Settings, runner: CommandRunner = run_command) -> None:
        self.settings = settings
        self.runner = runner

    @property
    def environ(self) -> Mapping[str, str]:
        return self.settings.environ if self.settings.environ is not None else os.environ

    # ---------------------------
    # Paths
    # ---------------------------
    def get_sdk_root(self) -> Optional[SdkRoot]:
        for var in self.settings.sdk_root_vars:
            value = self.environ.get(var)
            if value and Path(value).is_dir():
                return SdkRoot(root_source=var, root_location=value)
        return None

    def _root_path(self, status: Optional[int] = None) -> Path:
        root = self.get_sdk_root()
        if root is None:
            raise ProbeError("Android SDK root is not set", status=status)
        return Path(root.root_location)

    def platform_tools_dir(self) -> Optional[Path]:
        root = self.get_sdk_root()
        return Path(root.root_location) / "platform-tools" if root else None

    def cmdline_tools_dir(self) -> Optional[Path]:
        root = self.get_sdk_root()
        if root is None:
            return None
        latest = Path(root.root_location) / "cmdline-tools" / "latest" / "bin"
        legacy = Path(root.root_location) / "tools" / "bin"
        if not latest.is_dir() and legacy.is_dir():
            return legacy
        return latest

    async def _sdkmanager(self, *args: str) -> CommandResult:
        tools = self.cmdline_tools_dir()
        if tools is None:
            raise ProbeError("Android SDK root is not set", status=COMMAND_NOT_FOUND)
        return await self.runner([str(tools / _exe("sdkmanager", ".bat")), *args], self.environ)

    # ---------------------------
    # Probes
    # ---------------------------
    async def sdk_prerequisites_check(self) -> str:
        """sdkmanager runs on Java; a broken or incompatible JVM shows up here first."""
        result = await self._sdkmanager("--version")
        combined = f"{result.stdout}\n{result.stderr}"
        if any(marker in combined for marker in JAVA_ERROR_MARKERS):
            raise ProbeError(
                "sdkmanager could not start with the installed Java runtime. Install Java 8 or later and set JAVA_HOME.",
                status=result.status,
            )
        if not result.ok:
            reason = result.first_error_line() or f"sdkmanager exited with status {result.status}"
            raise ProbeError(reason, status=result.status)
        return result.stdout.strip()

    async def fetch_cmdline_tools_location(self) -> str:
        result = await self._sdkmanager("--version")
        if not result.ok:
            raise ProbeError(result.first_error_line() or "sdkmanager failed", status=result.status)
        return str(self.cmdline_tools_dir())

    async def fetch_platform_tools_location(self) -> str:
        tools = self._root_path(status=COMMAND_NOT_FOUND) / "platform-tools"
        result = await self.runner([str(tools / _exe("adb", ".exe")), "version"], self.environ)
        if not result.ok:
            raise ProbeError(result.first_error_line() or "adb failed", status=result.status)
        return str(tools)

    async def fetch_installed_packages(self) -> List[AndroidPackage]:
        result = await self._sdkmanager("--list_installed")
        if not result.ok:
            raise ProbeError(result.first_error_line() or "sdkmanager failed", status=result.status)
        return parse_installed_packages(result.stdout)

    def _api_matches(self, pkg: AndroidPackage, api_level: Optional[str]) -> bool:
        api = pkg.api_number()
        if api is None or api < int(self.settings.android.min_supported_runtime):
            return False
        return api_level is None or pkg.platform_api == api_level

    async def fetch_supported_api_package(self, api_level: Optional[str] = None) -> AndroidPackage:
        packages = [p for p in await self.fetch_installed_packages() if p.is_platform and self._api_matches(p, api_level)]
        if not packages:
            wanted = f"API level {api_level}" if api_level else "a supported API level"
            raise ProbeError(f"no platform package installed for {wanted}")
        best = max(packages, key=lambda p: p.api_number() or 0)
        log.debug("selected platform package %s", best.path)
        return best

    async def fetch_supported_emulator_image_package(self, api_level: Optional[str] = None) -> AndroidPackage:
        cfg = self.settings.android
        images = [
            p
            for p in await self.fetch_installed_packages()
            if p.is_system_image
            and self._api_matches(p, api_level)
            and p.image_tag in cfg.supported_images
            and p.image_abi in cfg.supported_architectures
        ]
        if not images:
            raise ProbeError("no supported emulator image installed")
        # Newest API first, then the configured image preference order.
        best = min(images, key=lambda p: (-(p.api_number() or 0), cfg.supported_images.index(p.image_tag or "")))
        log.debug("selected emulator image %s", best.path)
        return best
