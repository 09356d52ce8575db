"""Markup tree nodes with capability-checked composition."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, dataclass_transform

from typedhtml.attributes import AttributeValue
from typedhtml.capabilities import (
    Capability,
    Empty,
    FlowElement,
    NoAttribute,
    is_capability,
)
from typedhtml.config import DEFAULT_OPTIONS, RenderOptions
from typedhtml.errors import CompositionError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class Node(ABC):
    """Base for markup tree nodes. Every node knows how to render itself."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Turn every node kind into a frozen dataclass."""
        super().__init_subclass__(**kwargs)
        dataclass(frozen=True)(cls)

    @abstractmethod
    def render(self, options: RenderOptions | None = None) -> str:
        """Render the node and its subtree to markup text."""
        ...

    def __str__(self) -> str:
        return self.render()


@FlowElement.register
class Text(Node):
    """A literal text leaf. Renders to its content."""

    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            msg = f"Text content must be a str, got {type(self.content).__name__}"
            raise TypeError(msg)

    def render(self, options: RenderOptions | None = None) -> str:
        """Return the content, escaped only if the options ask for it."""
        return (options or DEFAULT_OPTIONS).text(self.content)


def _capability(value: object, cls: type, kind: str) -> type[Capability]:
    if not is_capability(value):
        msg = (
            f"{cls.__name__}: {kind} capability must be a Capability marker, "
            f"got {value!r}"
        )
        raise TypeError(msg)
    return value  # type: ignore[return-value]


class Element(Node):
    """Base for element kinds.

    Each kind fixes its tag name and the capabilities its attributes and
    children must carry in the class statement:

        @FlowElement.register
        class Div(Element, tag="div", children=FlowElement, attributes=DefaultAttribute):
            ...

    Capabilities not given are inherited from the parent element kind, and
    default to Empty and NoAttribute, which accept nothing.
    """

    tag: ClassVar[str]
    child_capability: ClassVar[type[Capability]] = Empty
    attribute_capability: ClassVar[type[Capability]] = NoAttribute
    registry: ClassVar[dict[str, type[Element]]] = {}

    attributes: tuple[AttributeValue, ...] = field(default=(), kw_only=True)
    children: tuple[Node, ...] = field(default=(), kw_only=True)

    def __init_subclass__(
        cls,
        tag: str | None = None,
        children: type[Capability] | None = None,
        attributes: type[Capability] | None = None,
        **kwargs: Any,
    ) -> None:
        """Register element kind with automatic tag derivation."""
        super().__init_subclass__(**kwargs)
        cls.tag = tag if tag is not None else cls.__name__.lower()
        if children is not None:
            cls.child_capability = _capability(children, cls, "child")
        if attributes is not None:
            cls.attribute_capability = _capability(attributes, cls, "attribute")

        if (existing := Element.registry.get(cls.tag)) and existing is not cls:
            msg = (
                f"Tag '{cls.tag}' already registered to {existing}. "
                "Choose a different tag."
            )
            raise ValueError(msg)

        Element.registry[cls.tag] = cls
        logger.debug(
            "Registered element <%s> (children=%s, attributes=%s)",
            cls.tag,
            cls.child_capability.__name__,
            cls.attribute_capability.__name__,
        )

    def __post_init__(self) -> None:
        cls = type(self)
        if cls is Element:
            msg = "Element is abstract; declare a subclass with a tag"
            raise TypeError(msg)

        attributes = tuple(self.attributes)
        children = tuple(self.children)
        self._check(attributes, cls.attribute_capability, "attribute")
        self._check(children, cls.child_capability, "child")

        object.__setattr__(self, "attributes", attributes)
        object.__setattr__(self, "children", children)

    def _check(
        self,
        items: Iterable[object],
        capability: type[Capability],
        role: str,
    ) -> None:
        for item in items:
            if not isinstance(item, capability):
                logger.debug(
                    "Rejected %s %r in <%s>", role, type(item).__name__, self.tag
                )
                raise CompositionError(type(self), item, capability, role)

    def render(self, options: RenderOptions | None = None) -> str:
        """Render as ``<tag attrs />`` when childless, else with a closing tag."""
        options = options or DEFAULT_OPTIONS
        attributes = "".join(f" {a.render(options)}" for a in self.attributes)

        if not self.children:
            return f"<{self.tag}{attributes} />"

        children = "".join(child.render(options) for child in self.children)
        return f"<{self.tag}{attributes}>{children}</{self.tag}>"


def make_element(
    tag: str,
    *,
    attributes: Iterable[AttributeValue] = (),
    children: Iterable[Node] = (),
) -> Element:
    """Construct an element of the kind registered under tag.

    Args:
        tag: Registered tag name, e.g. ``"div"``
        attributes: Attribute values, in output order
        children: Child nodes, in output order

    Returns:
        The new element

    Raises:
        ValueError: If no element kind is registered under tag
        CompositionError: If an attribute or child lacks the required capability

    """
    cls = Element.registry.get(tag)
    if cls is None:
        available = sorted(Element.registry)
        msg = f"Unknown tag '{tag}'. Available element tags: {available}"
        raise ValueError(msg)
    return cls(attributes=tuple(attributes), children=tuple(children))
