"""Exceptions raised while composing markup trees."""

from __future__ import annotations

from typing import Any


class MarkupError(Exception):
    """Base class for typedhtml errors."""


class CompositionError(MarkupError, TypeError):
    """An attribute or child lacks the capability its element requires."""

    def __init__(
        self,
        element: type[Any],
        item: object,
        capability: type[Any],
        role: str,
    ) -> None:
        self.element = element
        self.item = item
        self.capability = capability
        self.role = role
        tag = getattr(element, "tag", element.__name__)
        msg = (
            f"<{tag}> does not accept {type(item).__name__} as {role}: "
            f"it lacks the {capability.__name__} capability"
        )
        super().__init__(msg)
