from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple

from .errors import CatalogConstructionError
from .requirements.base import Requirement


class RequirementCatalog:
    """Ordered requirements of one setup profile. Titles are unique."""

    def __init__(self, name: str, requirements: Iterable[Requirement] = ()) -> None:
        self.name = name
        self._requirements: List[Requirement] = []
        self.add(requirements)

    def add(self, requirements: Iterable[Requirement]) -> None:
        incoming = list(requirements)
        seen = set(self.titles())
        for req in incoming:
            title = getattr(req, "title", None)
            if not title:
                raise CatalogConstructionError(f"{self.name}: requirement {req!r} has no title")
            if title in seen:
                raise CatalogConstructionError(f"{self.name}: duplicate requirement title {title!r}")
            seen.add(title)
        self._requirements.extend(incoming)

    def all(self) -> Tuple[Requirement, ...]:
        return tuple(self._requirements)

    def titles(self) -> List[str]:
        return [r.title for r in self._requirements]

    def validate(self) -> None:
        if not self._requirements:
            raise CatalogConstructionError(f"{self.name}: catalog has no requirements")

    def __len__(self) -> int:
        return len(self._requirements)

    def __iter__(self) -> Iterator[Requirement]:
        return iter(tuple(self._requirements))
