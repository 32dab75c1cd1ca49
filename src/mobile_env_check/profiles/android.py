from __future__ import annotations
from typing import Optional
import logging

from ..config import Settings
from ..errors import CatalogConstructionError
from ..messages import MessageCatalog
from ..probes.android import AndroidProbe
from ..requirements.android import (
    AndroidCmdLineToolsRequirement,
    AndroidPlatformToolsRequirement,
    AndroidSdkPrerequisitesRequirement,
    AndroidSdkRootRequirement,
    EmulatorImagesRequirement,
    PlatformApiPackageRequirement,
)
from .base import SetupProfile


class AndroidEnvironmentSetup(SetupProfile):
    """
    Android baseline:
      - SDK root configured
      - SDK prerequisites (Java)
      - command-line tools
      - platform tools
      - platform API package (``api_level`` or any supported)
      - emulator image of a supported type
    """

    name = "Android environment"

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        api_level: Optional[str] = None,
        settings: Optional[Settings] = None,
        probe: Optional[AndroidProbe] = None,
        messages: Optional[MessageCatalog] = None,
    ) -> None:
        super().__init__(logger=logger, settings=settings, messages=messages)
        config = self.settings.android
        if api_level is not None:
            raw = str(api_level).strip()
            if not raw.isdigit() or int(raw) <= 0:
                raise CatalogConstructionError(f"invalid Android API level: {raw!r}")
            # "030" must match platforms;android-30
            api_level = str(int(raw))
            if int(api_level) < int(config.min_supported_runtime):
                raise CatalogConstructionError(
                    f"Android API level {api_level} is below the minimum supported level {config.min_supported_runtime}"
                )
        self.api_level = api_level
        self.probe = probe or AndroidProbe(self.settings)

        self.add_requirements(
            [
                AndroidSdkRootRequirement(self.messages, self.probe),
                AndroidSdkPrerequisitesRequirement(self.messages, self.probe),
                AndroidCmdLineToolsRequirement(self.messages, self.probe),
                AndroidPlatformToolsRequirement(self.messages, self.probe, config),
                PlatformApiPackageRequirement(self.messages, self.probe, config, api_level),
                EmulatorImagesRequirement(self.messages, self.probe, config, api_level),
            ]
        )
