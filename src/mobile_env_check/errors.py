from __future__ import annotations
from typing import Optional, Sequence


class MobileEnvError(Exception):
    """Base class for all errors raised by mobile-env-check."""


class ConfigError(MobileEnvError):
    pass


class MessageCatalogError(MobileEnvError):
    pass


class TemplateArgumentError(MobileEnvError):
    pass


class CatalogConstructionError(MobileEnvError):
    """Raised while assembling a requirement catalog. Always fatal for the run."""


class ProbeError(MobileEnvError):
    """A probe could not confirm what it was looking for.

    ``status`` carries the exit status of the external command when there was
    one; 127 means the command itself could not be found.
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class SetupIncompleteError(MobileEnvError):
    def __init__(self, profile: str, titles: Sequence[str]) -> None:
        self.profile = profile
        self.titles = list(titles)
        super().__init__(f"{profile} setup incomplete: {', '.join(self.titles)}")
