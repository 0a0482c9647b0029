"""SVG styling constants for the assembly and PCB views."""
from dataclasses import dataclass, field

# Assembly view (grayscale silhouette)
ASSEMBLY_PAD_COLOR = "rgb(210, 210, 210)"   # Lighter gray for pads
ASSEMBLY_HOLE_COLOR = "rgb(190, 190, 190)"  # Darker gray for holes
ASSEMBLY_LABEL_COLOR = "#000000"

# PCB view
PCB_LABEL_COLOR = "#ffffff"

# Color used for a layer missing from the color map
UNKNOWN_LAYER_COLOR = "white"


def _default_copper_colors() -> dict[str, str]:
    return {
        "top": "rgb(200, 52, 52)",       # Red - top copper
        "inner1": "rgb(255, 140, 0)",    # Orange - inner layer 1
        "inner2": "rgb(255, 215, 0)",    # Gold - inner layer 2
        "bottom": "rgb(77, 127, 196)",   # Blue - bottom copper
    }


@dataclass(frozen=True)
class PcbColorMap:
    """Layer to color lookup for the PCB view."""
    copper: dict[str, str] = field(default_factory=_default_copper_colors)
    drill: str = "#FF26E2"  # Magenta - drill holes


DEFAULT_PCB_COLOR_MAP = PcbColorMap()


def layer_name_to_color(layer: str, color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP) -> str:
    """Resolve the copper fill color for a layer name."""
    return color_map.copper.get(layer, UNKNOWN_LAYER_COLOR)
