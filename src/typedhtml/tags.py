"""Concrete element kinds."""

from __future__ import annotations

from typedhtml.capabilities import DefaultAttribute, FlowElement
from typedhtml.nodes import Element


@FlowElement.register
class Span(Element, tag="span", children=FlowElement, attributes=DefaultAttribute):
    """Generic inline container."""


@FlowElement.register
class Div(Element, tag="div", children=FlowElement, attributes=DefaultAttribute):
    """Generic block container."""


# Document root; not a flow element, so it cannot be nested.
class Html(Element, tag="html", children=FlowElement, attributes=DefaultAttribute):
    """Root element of a document."""
