"""Drawing element tree produced by the shape renderers."""
from dataclasses import dataclass, field
from xml.etree.ElementTree import Element


@dataclass
class SvgObject:
    """
    A node in an abstract SVG tree.

    Element nodes have a tag name, attributes and children. Text nodes have
    type "text", an empty name and carry their content in ``value``.
    """
    name: str
    type: str = "element"
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["SvgObject"] = field(default_factory=list)
    value: str = ""

    @property
    def text(self) -> str:
        """Concatenated text content of direct text-node children."""
        return "".join(child.value for child in self.children if child.type == "text")


def svg_element(name: str, attributes: dict[str, str]) -> SvgObject:
    """Create a childless primitive (path, rect, circle, polygon)."""
    return SvgObject(name=name, attributes=dict(attributes))


def svg_group(children: list[SvgObject]) -> SvgObject:
    """Create a ``g`` element holding the given children in order."""
    return SvgObject(name="g", children=list(children))


def svg_text(value: str, attributes: dict[str, str]) -> SvgObject:
    """Create a ``text`` element wrapping a single text node."""
    return SvgObject(
        name="text",
        attributes=dict(attributes),
        children=[SvgObject(name="", type="text", value=value)],
    )


def with_label(shape: SvgObject, label: SvgObject | None) -> list[SvgObject]:
    """Shape followed by its label, or the shape alone when there is no label."""
    return [shape, label] if label is not None else [shape]


def to_element(obj: SvgObject) -> Element:
    """
    Convert an SvgObject tree into an ElementTree element.

    Text-node children become the element's text, or the tail of the
    preceding child element when they follow one.
    """
    elem = Element(obj.name, obj.attributes)
    last: Element | None = None
    for child in obj.children:
        if child.type == "text":
            if last is None:
                elem.text = (elem.text or "") + child.value
            else:
                last.tail = (last.tail or "") + child.value
            continue

        last = to_element(child)
        elem.append(last)

    return elem


def append_to(parent: Element, objects: list[SvgObject]) -> Element:
    """Append converted objects to an existing element and return the parent."""
    for obj in objects:
        parent.append(to_element(obj))
    return parent
