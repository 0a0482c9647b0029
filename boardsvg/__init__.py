"""Convert circuit board pad and hole records into SVG element trees."""
from .circuit import load_circuit_json
from .svg import (
    AssemblyContext, LabelProfile, Matrix, PcbColorMap, PcbContext, SvgObject,
    compose, to_element,
    create_svg_objects_from_assembly_plated_hole, create_svg_objects_from_assembly_smt_pad,
    create_svg_objects_from_pcb_plated_hole, create_svg_objects_from_smt_pad,
)

__version__ = "0.1.0"

__all__ = [
    "load_circuit_json",
    "AssemblyContext", "LabelProfile", "Matrix", "PcbColorMap", "PcbContext", "SvgObject",
    "compose", "to_element",
    "create_svg_objects_from_assembly_plated_hole", "create_svg_objects_from_assembly_smt_pad",
    "create_svg_objects_from_pcb_plated_hole", "create_svg_objects_from_smt_pad",
]
