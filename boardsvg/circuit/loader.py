"""Tolerant conversion of raw circuit records into models."""
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from .models import (
    CircuitElement, PcbComponent, PcbPlatedHole, PcbSmtPad, SourceComponent,
    PcbHolePill, PcbHoleCircle, PcbHoleCircularWithRectPad, PcbHolePillWithRectPad,
    PcbSmtPadRect, PcbSmtPadRotatedRect, PcbSmtPadCircle, PcbSmtPadPill, PcbSmtPadPolygon,
)

logger = logging.getLogger(__name__)

_PLATED_HOLE_ADAPTER = TypeAdapter(PcbPlatedHole)
_SMT_PAD_ADAPTER = TypeAdapter(PcbSmtPad)

PLATED_HOLE_TYPES = (
    PcbHolePill, PcbHoleCircle, PcbHoleCircularWithRectPad, PcbHolePillWithRectPad,
)
SMT_PAD_TYPES = (
    PcbSmtPadRect, PcbSmtPadRotatedRect, PcbSmtPadCircle, PcbSmtPadPill, PcbSmtPadPolygon,
)

# Record type -> validator for the types the renderer understands
_ADAPTERS: dict[str, TypeAdapter] = {
    "pcb_plated_hole": _PLATED_HOLE_ADAPTER,
    "pcb_smtpad": _SMT_PAD_ADAPTER,
    "pcb_component": TypeAdapter(PcbComponent),
    "source_component": TypeAdapter(SourceComponent),
}


def _validate(adapter: TypeAdapter, raw: Any, kind: str) -> Optional[Any]:
    """Validate a record, returning None (and logging) when it does not fit."""
    try:
        return adapter.validate_python(raw)
    except ValidationError as exc:
        logger.debug("Skipping %s record: %s", kind, exc.errors(include_url=False))
        return None


def coerce_plated_hole(obj: Any) -> Optional[BaseModel]:
    """Return a plated hole model for a model or mapping, or None if unrecognised."""
    if isinstance(obj, PLATED_HOLE_TYPES):
        return obj
    if not isinstance(obj, Mapping):
        return None
    return _validate(_PLATED_HOLE_ADAPTER, dict(obj), "pcb_plated_hole")


def coerce_smt_pad(obj: Any) -> Optional[BaseModel]:
    """Return an SMT pad model for a model or mapping, or None if unrecognised."""
    if isinstance(obj, SMT_PAD_TYPES):
        return obj
    if not isinstance(obj, Mapping):
        return None
    return _validate(_SMT_PAD_ADAPTER, dict(obj), "pcb_smtpad")


def load_circuit_json(raw_elements: Iterable[Mapping[str, Any]]) -> list[CircuitElement]:
    """
    Convert raw circuit records into models.

    Records of a type the renderer does not use, or with an unknown shape or
    invalid fields, are dropped. Input order is preserved.

    Args:
        raw_elements: Parsed circuit JSON records (dicts with a "type" key)

    Returns:
        List of recognised records as models
    """
    elements: list[CircuitElement] = []
    for raw in raw_elements:
        record_type = raw.get("type") if isinstance(raw, Mapping) else None
        adapter = _ADAPTERS.get(record_type)
        if adapter is None:
            logger.debug("Ignoring record of type %r", record_type)
            continue

        element = _validate(adapter, dict(raw), record_type)
        if element is not None:
            elements.append(element)

    return elements
