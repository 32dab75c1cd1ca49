from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple
import importlib.resources as res
import json
import string

from .errors import MessageCatalogError, TemplateArgumentError


@dataclass(frozen=True)
class MessageTemplate:
    """A message with named slots, filled from positional arguments in ``params`` order.

    Every ``{slot}`` in ``text`` must name one of ``params``.
    """
    text: str
    params: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        try:
            slots = [name for _, name, _, _ in string.Formatter().parse(self.text) if name is not None]
        except ValueError as e:
            raise TemplateArgumentError(f"malformed template {self.text!r}: {e}") from e
        unknown = [s for s in slots if s not in self.params]
        if unknown:
            raise TemplateArgumentError(f"template {self.text!r} uses slot(s) {unknown} not in params {list(self.params)}")

    def render(self, *args: Any) -> str:
        if len(args) != len(self.params):
            raise TemplateArgumentError(
                f"template expects {len(self.params)} argument(s) {list(self.params)}, got {len(args)}"
            )
        try:
            return self.text.format(**{name: str(value) for name, value in zip(self.params, args)})
        except (KeyError, IndexError, ValueError) as e:
            raise TemplateArgumentError(f"cannot render {self.text!r}: {e}") from e


@dataclass(frozen=True)
class RequirementMessages:
    title: str
    fulfilled: MessageTemplate
    unfulfilled: MessageTemplate
    not_found: Optional[MessageTemplate] = None


def _template(raw: Any, key: str, field: str) -> MessageTemplate:
    try:
        if isinstance(raw, str):
            return MessageTemplate(text=raw)
        if isinstance(raw, Mapping) and isinstance(raw.get("text"), str):
            return MessageTemplate(text=raw["text"], params=tuple(raw.get("params") or ()))
    except TemplateArgumentError as e:
        raise MessageCatalogError(f"{key}.{field}: {e}") from e
    raise MessageCatalogError(f"{key}.{field}: expected a string or {{text, params}} object")


class MessageCatalog:
    """Title and message templates per requirement kind."""

    def __init__(self, entries: Mapping[str, Mapping[str, Any]]) -> None:
        self._entries: Dict[str, RequirementMessages] = {}
        for key, raw in entries.items():
            if "title" not in raw or "fulfilled" not in raw or "unfulfilled" not in raw:
                raise MessageCatalogError(f"{key}: title, fulfilled and unfulfilled are required")
            self._entries[key] = RequirementMessages(
                title=str(raw["title"]),
                fulfilled=_template(raw["fulfilled"], key, "fulfilled"),
                unfulfilled=_template(raw["unfulfilled"], key, "unfulfilled"),
                not_found=_template(raw["not_found"], key, "not_found") if "not_found" in raw else None,
            )

    @classmethod
    def default(cls) -> "MessageCatalog":
        raw = res.files("mobile_env_check").joinpath("messages.json").read_text(encoding="utf-8")
        return cls(json.loads(raw))

    def get(self, key: str) -> RequirementMessages:
        try:
            return self._entries[key]
        except KeyError:
            raise MessageCatalogError(f"unknown message key: {key}") from None

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._entries)
