"""Data models for circuit records consumed by the renderer."""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CircuitRecord(BaseModel):
    """Base for all circuit records. Unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore", frozen=True)


class Point(BaseModel):
    """A 2D point in board units."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


# ---------------------------------------------------------------------------
# Plated holes
# ---------------------------------------------------------------------------

class PcbPlatedHoleBase(CircuitRecord):
    """Fields shared by every plated hole shape."""
    type: Literal["pcb_plated_hole"] = "pcb_plated_hole"
    x: float  # Center X (board units)
    y: float  # Center Y (board units)
    pcb_plated_hole_id: Optional[str] = None
    pcb_component_id: Optional[str] = None
    pcb_port_id: Optional[str] = None
    port_hints: Optional[list[Optional[str]]] = None  # Candidate pad numbers
    layers: list[str] = Field(default_factory=list)


class PcbHolePill(PcbPlatedHoleBase):
    """Vertical capsule hole inside a capsule annulus."""
    shape: Literal["pill"] = "pill"
    outer_width: float
    outer_height: float
    hole_width: float
    hole_height: float


class PcbHoleCircle(PcbPlatedHoleBase):
    """Round hole inside a round annulus."""
    shape: Literal["circle"] = "circle"
    outer_diameter: float
    hole_diameter: float


class PcbHoleCircularWithRectPad(PcbPlatedHoleBase):
    """Round hole inside a rectangular pad."""
    shape: Literal["circular_hole_with_rect_pad"] = "circular_hole_with_rect_pad"
    hole_diameter: float
    rect_pad_width: float
    rect_pad_height: float


class PcbHolePillWithRectPad(PcbPlatedHoleBase):
    """Pill hole inside a rectangular pad."""
    shape: Literal["pill_hole_with_rect_pad"] = "pill_hole_with_rect_pad"
    hole_width: float
    hole_height: float
    rect_pad_width: float
    rect_pad_height: float


PcbPlatedHole = Annotated[
    Union[PcbHolePill, PcbHoleCircle, PcbHoleCircularWithRectPad, PcbHolePillWithRectPad],
    Field(discriminator="shape"),
]


# ---------------------------------------------------------------------------
# Surface-mount pads
# ---------------------------------------------------------------------------

class PcbSmtPadBase(CircuitRecord):
    """Fields shared by every SMT pad shape."""
    type: Literal["pcb_smtpad"] = "pcb_smtpad"
    x: float
    y: float
    layer: str = "top"
    pcb_smtpad_id: Optional[str] = None
    pcb_component_id: Optional[str] = None
    pcb_port_id: Optional[str] = None
    port_hints: Optional[list[Optional[str]]] = None


class PcbSmtPadRect(PcbSmtPadBase):
    shape: Literal["rect"] = "rect"
    width: float
    height: float


class PcbSmtPadRotatedRect(PcbSmtPadBase):
    shape: Literal["rotated_rect"] = "rotated_rect"
    width: float
    height: float
    ccw_rotation: Optional[float] = None  # Degrees, counter-clockwise; None means unrotated


class PcbSmtPadCircle(PcbSmtPadBase):
    shape: Literal["circle"] = "circle"
    radius: float


class PcbSmtPadPill(PcbSmtPadBase):
    shape: Literal["pill"] = "pill"
    width: float
    height: float
    radius: float  # Corner radius (board units)


class PcbSmtPadPolygon(PcbSmtPadBase):
    shape: Literal["polygon"] = "polygon"
    points: list[Point] = Field(default_factory=list)  # Absolute vertices, in order


PcbSmtPad = Annotated[
    Union[PcbSmtPadRect, PcbSmtPadRotatedRect, PcbSmtPadCircle, PcbSmtPadPill, PcbSmtPadPolygon],
    Field(discriminator="shape"),
]


# ---------------------------------------------------------------------------
# Records consulted for label naming
# ---------------------------------------------------------------------------

class PcbComponent(CircuitRecord):
    """Physical placement of a component on the board."""
    type: Literal["pcb_component"] = "pcb_component"
    pcb_component_id: str
    source_component_id: Optional[str] = None


class SourceComponent(CircuitRecord):
    """Schematic-level component definition."""
    type: Literal["source_component"] = "source_component"
    source_component_id: str
    name: Optional[str] = None  # Reference designator, e.g. "U1"


CircuitElement = Union[PcbPlatedHole, PcbSmtPad, PcbComponent, SourceComponent]
