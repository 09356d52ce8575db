"""Rendering entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typedhtml.config import RenderOptions
    from typedhtml.nodes import Node


def render(node: Node, options: RenderOptions | None = None) -> str:
    """Render a markup tree to text.

    Elements without children use the self-closing form ``<tag />``; all
    others render their children in order between an opening and a closing
    tag. Text and attribute values are emitted verbatim unless the options
    enable escaping.

    Args:
        node: Root of the tree to render
        options: Rendering options (verbatim output if omitted)

    Returns:
        The markup text

    Example:
        render(Span(children=[Div(attributes=[ClassAttribute("c")])]))
        # '<span><div class="c" /></span>'

    """
    return node.render(options)
