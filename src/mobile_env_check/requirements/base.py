from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, Protocol

from ..messages import MessageCatalog, MessageTemplate
from ..models import CheckResult


class Requirement(Protocol):
    """Protocol for a single environment requirement.

    ``check`` must not depend on any other requirement having run, and must
    report an expected absence as an unfulfilled result rather than raising.
    """

    title: str
    fulfilled_message: MessageTemplate
    unfulfilled_message: MessageTemplate

    async def check(self) -> CheckResult:
        ...


def to_unix_path(message: str) -> str:
    return message.replace("\\", "/")


class BaseRequirement(ABC):
    """Binds title and templates from the message catalog under ``message_key``."""

    message_key: ClassVar[str]

    def __init__(self, messages: MessageCatalog) -> None:
        entry = messages.get(self.message_key)
        self.title = entry.title
        self.fulfilled_message = entry.fulfilled
        self.unfulfilled_message = entry.unfulfilled
        self.not_found_message = entry.not_found

    def fulfilled(self, *args: Any, unix_paths: bool = False) -> CheckResult:
        msg = self.fulfilled_message.render(*args)
        return CheckResult.fulfilled(self.title, to_unix_path(msg) if unix_paths else msg)

    def unfulfilled(
        self,
        *args: Any,
        template: Optional[MessageTemplate] = None,
        probe_failed: bool = False,
    ) -> CheckResult:
        msg = (template or self.unfulfilled_message).render(*args)
        return CheckResult.unfulfilled(self.title, msg, probe_failed=probe_failed)

    @abstractmethod
    async def check(self) -> CheckResult:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self.title!r})"
