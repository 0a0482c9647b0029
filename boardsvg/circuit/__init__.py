from .loader import coerce_plated_hole, coerce_smt_pad, load_circuit_json
from .models import (
    CircuitElement, PcbComponent, PcbPlatedHole, PcbSmtPad, Point, SourceComponent,
    PcbHolePill, PcbHoleCircle, PcbHoleCircularWithRectPad, PcbHolePillWithRectPad,
    PcbSmtPadRect, PcbSmtPadRotatedRect, PcbSmtPadCircle, PcbSmtPadPill, PcbSmtPadPolygon,
)

__all__ = [
    "load_circuit_json", "coerce_plated_hole", "coerce_smt_pad",
    "CircuitElement", "PcbComponent", "PcbPlatedHole", "PcbSmtPad", "Point", "SourceComponent",
    "PcbHolePill", "PcbHoleCircle", "PcbHoleCircularWithRectPad", "PcbHolePillWithRectPad",
    "PcbSmtPadRect", "PcbSmtPadRotatedRect", "PcbSmtPadCircle", "PcbSmtPadPill",
    "PcbSmtPadPolygon",
]
