from __future__ import annotations

from .android import AndroidProbe, SdkRoot
from .packages import AndroidPackage, parse_installed_packages
from .process import COMMAND_NOT_FOUND, CommandResult, run_command

__all__ = [
    "AndroidPackage",
    "AndroidProbe",
    "COMMAND_NOT_FOUND",
    "CommandResult",
    "SdkRoot",
    "parse_installed_packages",
    "run_command",
]
