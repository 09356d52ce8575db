"""Schema extraction for registered element kinds."""

from __future__ import annotations

from dataclasses import dataclass

from typedhtml.capabilities import Capability
from typedhtml.nodes import Element


@dataclass(frozen=True)
class ElementSchema:
    """What an element kind is called and what it composes with."""

    tag: str
    children: str
    attributes: str
    capabilities: tuple[str, ...]


def element_schema(cls: type[Element]) -> ElementSchema:
    """Get schema for an element class."""
    if not (isinstance(cls, type) and issubclass(cls, Element)) or cls is Element:
        msg = f"Expected a concrete Element subclass, got {cls!r}"
        raise TypeError(msg)

    return ElementSchema(
        tag=cls.tag,
        children=cls.child_capability.__name__,
        attributes=cls.attribute_capability.__name__,
        capabilities=tuple(
            name
            for name, marker in Capability.registry.items()
            if issubclass(cls, marker)
        ),
    )


def all_element_schemas() -> dict[str, ElementSchema]:
    """Get all registered element schemas."""
    return {tag: element_schema(cls) for tag, cls in Element.registry.items()}
