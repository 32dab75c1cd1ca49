from __future__ import annotations

from .android import AndroidEnvironmentSetup
from .base import SetupProfile

__all__ = ["AndroidEnvironmentSetup", "SetupProfile"]
