"""Pytest configuration for boardsvg tests."""
import pytest

from boardsvg.circuit import load_circuit_json
from boardsvg.svg import AssemblyContext, LabelProfile, Matrix, PcbContext


@pytest.fixture
def identity():
    return Matrix.identity()


@pytest.fixture
def assembly_ctx(identity):
    return AssemblyContext(transform=identity)


@pytest.fixture
def pcb_ctx(identity):
    """PCB context with the annotated label profile regardless of environment."""
    return PcbContext(transform=identity, label_profile=LabelProfile.ANNOTATED)


@pytest.fixture
def raw_circuit_json():
    """A small board: one resistor with an SMT pad and a plated hole."""
    return [
        {"type": "source_component", "source_component_id": "source_component_0", "name": "R1"},
        {
            "type": "pcb_component",
            "pcb_component_id": "pcb_component_0",
            "source_component_id": "source_component_0",
        },
        {
            "type": "pcb_smtpad",
            "shape": "rect",
            "pcb_smtpad_id": "pcb_smtpad_0",
            "pcb_component_id": "pcb_component_0",
            "x": 1.0,
            "y": 2.0,
            "width": 0.6,
            "height": 0.8,
            "layer": "top",
            "port_hints": ["1"],
        },
        {
            "type": "pcb_plated_hole",
            "shape": "circle",
            "pcb_plated_hole_id": "pcb_plated_hole_3",
            "pcb_component_id": "pcb_component_0",
            "x": -1.0,
            "y": 0.0,
            "outer_diameter": 1.5,
            "hole_diameter": 0.8,
            "layers": ["top", "bottom"],
        },
        {"type": "pcb_trace", "route": []},
    ]


@pytest.fixture
def circuit_json(raw_circuit_json):
    return load_circuit_json(raw_circuit_json)
