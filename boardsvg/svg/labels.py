"""Pad number resolution and component naming for labels."""
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

logger = logging.getLogger(__name__)


def _field(record: Any, name: str) -> Any:
    """Read a field from a model or a raw mapping."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def id_suffix(record_id: Optional[str]) -> str:
    """Return the part of an identifier after its last underscore."""
    if not record_id:
        return ""
    return record_id.rsplit("_", 1)[-1]


def first_port_hint(record: Any) -> str:
    hints = _field(record, "port_hints")
    if hints:
        return hints[0] or ""
    return ""


def hole_pad_number(hole: Any) -> str:
    """
    Pad number for a plated hole.

    Uses the first port hint, then the suffix of the hole id. Returns an
    empty string when neither is available.
    """
    return first_port_hint(hole) or id_suffix(_field(hole, "pcb_plated_hole_id"))


def smt_pad_number(pad: Any) -> str:
    """Pad number for an SMT pad in the assembly view (port hint, then id suffix)."""
    return first_port_hint(pad) or id_suffix(_field(pad, "pcb_smtpad_id"))


def _find(records: Iterable[Any], record_type: str, id_field: str, record_id: str) -> Any:
    for record in records:
        if _field(record, "type") == record_type and _field(record, id_field) == record_id:
            return record
    return None


def find_source_component_name(
    circuit_json: Optional[Iterable[Any]], pcb_component_id: Optional[str]
) -> Optional[str]:
    """
    Resolve the source component name for a board placement.

    Follows pcb_component -> source_component by id. The first match wins.

    Args:
        circuit_json: All circuit records (models or mappings); read only
        pcb_component_id: Id of the owning pcb_component

    Returns:
        The source component's name, or None if any link is missing
    """
    if not circuit_json or not pcb_component_id:
        return None

    records = circuit_json if isinstance(circuit_json, (list, tuple)) else list(circuit_json)

    component = _find(records, "pcb_component", "pcb_component_id", pcb_component_id)
    if component is None:
        logger.debug("No pcb_component %r for label", pcb_component_id)
        return None

    source_component_id = _field(component, "source_component_id")
    if not source_component_id:
        return None

    source = _find(records, "source_component", "source_component_id", source_component_id)
    if source is None:
        logger.debug("No source_component %r for label", source_component_id)
        return None

    return _field(source, "name") or None


def qualified_label(pad_number: str, component_name: Optional[str]) -> str:
    """Prefix a pad number with its component name when one is known."""
    if component_name:
        return f"{component_name}.{pad_number}"
    return pad_number
