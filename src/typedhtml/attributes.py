"""Attribute values and how they render."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, dataclass_transform

from typedhtml.capabilities import DefaultAttribute
from typedhtml.config import DEFAULT_OPTIONS, RenderOptions

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

# Attribute names may not contain whitespace, quotes, "=", ">" or "/".
_DATA_KEY = re.compile(r"[^\s\"'=>/]+")


def _require_str(value: object, what: str) -> None:
    if not isinstance(value, str):
        msg = f"{what} must be a str, got {type(value).__name__}"
        raise TypeError(msg)


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class AttributeValue(ABC):
    """Base for anything that renders into an element's attribute list."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Turn every attribute kind into a frozen dataclass."""
        super().__init_subclass__(**kwargs)
        dataclass(frozen=True)(cls)

    @abstractmethod
    def render(self, options: RenderOptions | None = None) -> str:
        """Render to markup text, without the leading separator."""
        ...

    def __str__(self) -> str:
        return self.render()


class Attribute(AttributeValue):
    """A single ``name="value"`` fact. The name is fixed per attribute kind."""

    name: ClassVar[str]
    registry: ClassVar[dict[str, type[Attribute]]] = {}

    value: str

    def __init_subclass__(cls, name: str | None = None, **kwargs: Any) -> None:
        """Register attribute kind, deriving the name from the class if omitted."""
        super().__init_subclass__(**kwargs)
        cls.name = (
            name if name is not None else cls.__name__.lower().removesuffix("attribute")
        )

        if (existing := Attribute.registry.get(cls.name)) and existing is not cls:
            msg = (
                f"Attribute '{cls.name}' already registered to {existing}. "
                "Choose a different name."
            )
            raise ValueError(msg)

        Attribute.registry[cls.name] = cls
        logger.debug("Registered attribute %r as %s", cls.name, cls.__qualname__)

    def __post_init__(self) -> None:
        if type(self) is Attribute:
            msg = "Attribute is abstract; subclass it with a name"
            raise TypeError(msg)
        _require_str(self.value, f"{self.name} value")

    def render(self, options: RenderOptions | None = None) -> str:
        """Render as ``name="value"``."""
        options = options or DEFAULT_OPTIONS
        return f'{self.name}="{options.attribute(self.value)}"'


@DefaultAttribute.register
class ClassAttribute(Attribute, name="class"):
    """The ``class`` attribute."""


@DefaultAttribute.register
class IdAttribute(Attribute, name="id"):
    """The ``id`` attribute."""


@DefaultAttribute.register
class DataAttribute(AttributeValue):
    """All the ``data-*`` attributes of an element, expanded on render.

    Entries are stored as an immutable tuple of ``(key, value)`` pairs in the
    insertion order of the mapping they were built from, so the rendered
    output is deterministic:

        DataAttribute({"foo": "bar", "x": "1"}).render()
        # 'data-foo="bar" data-x="1"'

    Keys are validated on construction and are never escaped.
    """

    entries: tuple[tuple[str, str], ...] = ()

    def __init__(
        self,
        entries: Mapping[str, str] | Iterable[tuple[str, str]] = (),
    ) -> None:
        pairs = tuple(dict(entries).items())
        for key, value in pairs:
            if not isinstance(key, str) or not _DATA_KEY.fullmatch(key):
                msg = f"Invalid data attribute key: {key!r}"
                raise ValueError(msg)
            _require_str(value, f"data-{key} value")
        object.__setattr__(self, "entries", pairs)

    def render(self, options: RenderOptions | None = None) -> str:
        """Render each entry as ``data-<key>="<value>"``, space separated."""
        options = options or DEFAULT_OPTIONS
        return " ".join(
            f'data-{key}="{options.attribute(value)}"' for key, value in self.entries
        )
