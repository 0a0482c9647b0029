"""Rendering contexts passed to the shape renderers."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from boardsvg import config

from .styles import DEFAULT_PCB_COLOR_MAP, PcbColorMap
from .transform import Matrix


class LabelProfile(str, Enum):
    """How PCB pad labels are built."""
    ANNOTATED = "annotated"  # "<component>.<pad>" with full-size font
    MINIMAL = "minimal"  # bare pad number, smaller font, no sibling lookup


@dataclass(frozen=True)
class AssemblyContext:
    """Context for the assembly view."""
    transform: Matrix = field(default_factory=Matrix.identity)


@dataclass(frozen=True)
class PcbContext:
    """Context for the PCB view."""
    transform: Matrix = field(default_factory=Matrix.identity)
    color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP
    layer: Optional[str] = None  # Only render pads on this layer when set
    label_profile: LabelProfile = field(
        default_factory=lambda: LabelProfile(config.DEFAULT_LABEL_PROFILE)
    )

    @property
    def label_font_size(self) -> str:
        if self.label_profile == LabelProfile.MINIMAL:
            return config.PCB_MINIMAL_LABEL_FONT_SIZE
        return config.PCB_LABEL_FONT_SIZE
