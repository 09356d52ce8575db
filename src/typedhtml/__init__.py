"""typedhtml - Capability-checked markup trees for Python 3.12+."""

from typedhtml.attributes import (
    Attribute,
    AttributeValue,
    ClassAttribute,
    DataAttribute,
    IdAttribute,
)
from typedhtml.capabilities import (
    Capability,
    DefaultAttribute,
    Empty,
    FlowElement,
    NoAttribute,
    has_capability,
    is_capability,
)
from typedhtml.config import DEFAULT_OPTIONS, RenderOptions
from typedhtml.errors import CompositionError, MarkupError
from typedhtml.nodes import Element, Node, Text, make_element
from typedhtml.render import render
from typedhtml.schema import ElementSchema, all_element_schemas, element_schema
from typedhtml.tags import Div, Html, Span

__all__ = [
    "DEFAULT_OPTIONS",
    # Attributes
    "Attribute",
    "AttributeValue",
    # Capabilities
    "Capability",
    "ClassAttribute",
    # Errors
    "CompositionError",
    "DataAttribute",
    "DefaultAttribute",
    # Tags
    "Div",
    # Nodes
    "Element",
    # Schema extraction
    "ElementSchema",
    "Empty",
    "FlowElement",
    "Html",
    "IdAttribute",
    "MarkupError",
    "NoAttribute",
    "Node",
    # Rendering
    "RenderOptions",
    "Span",
    "Text",
    "all_element_schemas",
    "element_schema",
    "has_capability",
    "is_capability",
    "make_element",
    "render",
]
