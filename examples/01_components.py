"""Example: building a page from reusable components.

Shows how to:
1. Declare a new element kind with its capabilities
2. Compose components bottom-up
3. Render verbatim and escaped output
"""

from typedhtml import (
    ClassAttribute,
    CompositionError,
    DataAttribute,
    DefaultAttribute,
    Div,
    Element,
    FlowElement,
    Html,
    IdAttribute,
    RenderOptions,
    Span,
    Text,
    render,
)


@FlowElement.register
class Section(Element, tag="section", children=FlowElement, attributes=DefaultAttribute):
    """Thematic grouping of content."""


def card(title: str, body: str) -> Div:
    """A titled card."""
    return Div(
        attributes=[ClassAttribute("card"), DataAttribute({"title": title})],
        children=[
            Span(attributes=[ClassAttribute("title")], children=[Text(title)]),
            Text(body),
        ],
    )


def page() -> Html:
    """A document with two cards."""
    return Html(
        children=[
            Section(
                attributes=[IdAttribute("cards")],
                children=[card("First", "Hello!"), card("Second", "1 < 2 & 3 > 2")],
            ),
        ],
    )


if __name__ == "__main__":
    print(render(page()))
    print(render(page(), RenderOptions.escaped()))

    try:
        Div(children=[page()])
    except CompositionError as e:
        print(f"Rejected: {e}")
