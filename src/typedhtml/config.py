"""Rendering configuration."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape


@dataclass(frozen=True)
class RenderOptions:
    """Options controlling how nodes are turned into markup text.

    Defaults reproduce the verbatim output format: text and attribute values
    are emitted exactly as given, markup-significant characters included.

    Attributes:
        escape_text: Escape ``&``, ``<`` and ``>`` in text nodes.
        escape_attributes: Escape attribute values, quotes included. Names
            are never escaped; data attribute keys are validated instead.

    """

    escape_text: bool = False
    escape_attributes: bool = False

    @classmethod
    def escaped(cls) -> RenderOptions:
        """Options that escape both text and attribute values."""
        return cls(escape_text=True, escape_attributes=True)

    def text(self, content: str) -> str:
        """Prepare text node content for output."""
        return escape(content, quote=False) if self.escape_text else content

    def attribute(self, value: str) -> str:
        """Prepare an attribute value for output."""
        return escape(value, quote=True) if self.escape_attributes else value


DEFAULT_OPTIONS = RenderOptions()
