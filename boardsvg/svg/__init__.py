from .assembly import create_svg_objects_from_assembly_plated_hole, create_svg_objects_from_assembly_smt_pad
from .context import AssemblyContext, LabelProfile, PcbContext
from .elements import SvgObject, to_element
from .pcb import create_svg_objects_from_pcb_plated_hole, create_svg_objects_from_smt_pad
from .styles import DEFAULT_PCB_COLOR_MAP, PcbColorMap, layer_name_to_color
from .transform import Matrix, compose

__all__ = [
    "create_svg_objects_from_assembly_plated_hole", "create_svg_objects_from_assembly_smt_pad",
    "create_svg_objects_from_pcb_plated_hole", "create_svg_objects_from_smt_pad",
    "AssemblyContext", "PcbContext", "LabelProfile",
    "SvgObject", "to_element",
    "DEFAULT_PCB_COLOR_MAP", "PcbColorMap", "layer_name_to_color",
    "Matrix", "compose",
]
