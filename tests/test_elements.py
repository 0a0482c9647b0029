"""Tests for the drawing element tree and its ElementTree export."""
from xml.etree.ElementTree import Element, tostring

from boardsvg.svg import create_svg_objects_from_smt_pad, to_element
from boardsvg.svg.elements import append_to, svg_element, svg_group, svg_text, with_label


def test_text_element_wraps_text_node():
    label = svg_text("U1.2", {"x": "0"})
    assert label.name == "text"
    assert len(label.children) == 1
    assert label.children[0].type == "text"
    assert label.text == "U1.2"


def test_builders_copy_their_inputs():
    attrs = {"fill": "red"}
    children = [svg_element("circle", attrs)]
    group = svg_group(children)

    attrs["fill"] = "blue"
    children.append(svg_element("rect", {}))

    assert group.children[0].attributes["fill"] == "red"
    assert len(group.children) == 1


def test_with_label_omits_missing_label():
    shape = svg_element("circle", {"r": "1"})
    label = svg_text("1", {})

    assert with_label(shape, label) == [shape, label]
    assert with_label(shape, None) == [shape]


def test_to_element_nests_children():
    group = svg_group([svg_element("rect", {"x": "0"}), svg_element("circle", {"r": "1"})])
    elem = to_element(group)

    assert elem.tag == "g"
    assert [child.tag for child in elem] == ["rect", "circle"]
    assert elem[1].get("r") == "1"


def test_to_element_text_content(pcb_ctx, circuit_json):
    _, label = create_svg_objects_from_smt_pad(circuit_json[2], pcb_ctx, circuit_json)
    elem = to_element(label)

    assert elem.tag == "text"
    assert elem.text == "R1.1"
    assert len(elem) == 0
    assert b"R1.1</text>" in tostring(elem)


def test_append_to_parent(pcb_ctx, circuit_json):
    svg = Element("svg")
    objects = create_svg_objects_from_smt_pad(circuit_json[2], pcb_ctx, circuit_json)

    append_to(svg, objects)

    assert [child.tag for child in svg] == ["rect", "text"]
    assert svg[0].get("data-layer") == "top"
