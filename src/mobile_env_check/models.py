from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import SetupIncompleteError


class Outcome(str, Enum):
    FULFILLED = "fulfilled"
    UNFULFILLED = "unfulfilled"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of evaluating one requirement once."""
    title: str
    outcome: Outcome
    message: str
    probe_failed: bool = False

    @classmethod
    def fulfilled(cls, title: str, message: str) -> "CheckResult":
        return cls(title=title, outcome=Outcome.FULFILLED, message=message)

    @classmethod
    def unfulfilled(cls, title: str, message: str, probe_failed: bool = False) -> "CheckResult":
        return cls(title=title, outcome=Outcome.UNFULFILLED, message=message, probe_failed=probe_failed)

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.FULFILLED

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "title": self.title,
            "outcome": self.outcome.value,
            "message": self.message,
        }
        if self.probe_failed:
            d["probe_failed"] = True
        return d


@dataclass(frozen=True)
class SetupReport:
    """All results of one setup run, in catalog order."""
    profile: str
    results: Tuple[CheckResult, ...] = field(default_factory=tuple)

    @property
    def overall_satisfied(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def failed(self) -> List[CheckResult]:
        return [r for r in self.results if not r.ok]

    def by_title(self) -> Dict[str, CheckResult]:
        return {r.title: r for r in self.results}

    def get(self, title: str) -> Optional[CheckResult]:
        for r in self.results:
            if r.title == title:
                return r
        return None

    def __getitem__(self, title: str) -> CheckResult:
        r = self.get(title)
        if r is None:
            raise KeyError(title)
        return r

    def __len__(self) -> int:
        return len(self.results)

    def ensure_satisfied(self) -> None:
        if not self.overall_satisfied:
            raise SetupIncompleteError(self.profile, [r.title for r in self.failed])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile": self.profile,
            "overall_satisfied": self.overall_satisfied,
            "results": [r.to_dict() for r in self.results],
        }
