"""Capability markers that restrict how attributes and nodes compose."""

from __future__ import annotations

from abc import ABC
from typing import Any, ClassVar


class Capability(ABC):
    """Base for dataless capability markers.

    A kind gains a capability by virtual registration, so markers never
    contribute fields or behaviour to the classes that carry them:

        @FlowElement.register
        class Text(Node): ...
    """

    registry: ClassVar[dict[str, type[Capability]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Record each declared marker by name."""
        super().__init_subclass__(**kwargs)
        if (existing := Capability.registry.get(cls.__name__)) and existing is not cls:
            msg = f"Capability '{cls.__name__}' already declared as {existing}."
            raise ValueError(msg)
        Capability.registry[cls.__name__] = cls


class DefaultAttribute(Capability):
    """Attributes shared by most elements."""


class NoAttribute(Capability):
    """Marks elements that take no attributes. No attribute kind adopts it."""


class FlowElement(Capability):
    """Nodes usable as children of ordinary block and inline elements."""


class Empty(Capability):
    """Marks elements that never take children. No node kind adopts it."""


def is_capability(obj: object) -> bool:
    """Return True if obj is a declared capability marker."""
    return isinstance(obj, type) and Capability.registry.get(obj.__name__) is obj


def has_capability(obj: object, capability: type[Capability]) -> bool:
    """Check whether a kind, or an instance of one, carries a capability."""
    if not is_capability(capability):
        msg = f"{capability!r} is not a capability marker"
        raise TypeError(msg)
    if isinstance(obj, type):
        return issubclass(obj, capability)
    return isinstance(obj, capability)
