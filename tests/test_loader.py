"""Tests for loading raw circuit records into models."""
import pytest

from boardsvg.circuit import (
    PcbComponent, PcbHoleCircle, PcbSmtPadPolygon, PcbSmtPadRect, SourceComponent,
    coerce_plated_hole, coerce_smt_pad, load_circuit_json,
)


def test_load_keeps_known_records_in_order(raw_circuit_json):
    elements = load_circuit_json(raw_circuit_json)

    assert [type(e) for e in elements] == [
        SourceComponent, PcbComponent, PcbSmtPadRect, PcbHoleCircle,
    ], "pcb_trace should be dropped, everything else kept in order"


def test_load_skips_unknown_shape_and_invalid_fields():
    raw = [
        {"type": "pcb_smtpad", "shape": "oval", "x": 0, "y": 0, "layer": "top"},
        {"type": "pcb_smtpad", "shape": "rect", "x": 0, "y": 0, "width": "wide", "height": 1},
        {"type": "pcb_plated_hole", "shape": "circle", "x": 0, "y": 0},
        {"type": "pcb_smtpad", "shape": "circle", "x": 0, "y": 0, "radius": 0.5},
    ]

    elements = load_circuit_json(raw)

    assert len(elements) == 1
    assert elements[0].shape == "circle"


def test_load_ignores_extra_keys():
    raw = [{
        "type": "pcb_smtpad", "shape": "rect", "x": 0, "y": 0, "width": 1, "height": 1,
        "layer": "bottom", "is_covered_with_solder_mask": True,
    }]
    (pad,) = load_circuit_json(raw)
    assert pad.layer == "bottom"


def test_polygon_points_preserve_order():
    raw = {
        "type": "pcb_smtpad", "shape": "polygon", "x": 0, "y": 0, "layer": "top",
        "points": [{"x": 2, "y": 0}, {"x": 0, "y": 0}, {"x": 1, "y": 1}],
    }
    pad = coerce_smt_pad(raw)
    assert isinstance(pad, PcbSmtPadPolygon)
    assert [(p.x, p.y) for p in pad.points] == [(2, 0), (0, 0), (1, 1)]


def test_null_optional_fields_keep_the_record():
    """A null rotation or port hint is treated as absent, not as invalid."""
    pad = coerce_smt_pad({
        "shape": "rotated_rect", "x": 0, "y": 0, "width": 1, "height": 1,
        "ccw_rotation": None, "port_hints": None,
    })
    hole = coerce_plated_hole({
        "shape": "circle", "x": 0, "y": 0, "outer_diameter": 1, "hole_diameter": 0.5,
        "port_hints": [None],
    })

    assert pad is not None and pad.ccw_rotation is None
    assert hole is not None and hole.port_hints == [None]


def test_coerce_rejects_wrong_record_kind():
    pad = coerce_smt_pad({"shape": "circle", "x": 0, "y": 0, "radius": 1})
    assert pad is not None
    assert coerce_plated_hole(pad) is None
    assert coerce_plated_hole({"type": "pcb_smtpad", "shape": "circle", "x": 0, "y": 0}) is None
    assert coerce_plated_hole("not a record") is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
