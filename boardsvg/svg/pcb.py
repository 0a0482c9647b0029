"""PCB view: layer-colored pads and plated holes with component-qualified labels."""
import logging
from collections.abc import Sequence
from typing import Any, Optional

from boardsvg import config
from boardsvg.circuit import (
    PcbHoleCircle, PcbHoleCircularWithRectPad, PcbHolePill, PcbHolePillWithRectPad,
    PcbSmtPadCircle, PcbSmtPadPill, PcbSmtPadPolygon, PcbSmtPadRect, PcbSmtPadRotatedRect,
    coerce_plated_hole, coerce_smt_pad,
)

from .context import LabelProfile, PcbContext
from .elements import SvgObject, svg_element, svg_group, svg_text, with_label
from .geometry import (
    centered_rect_attrs, circle_attrs, fmt, pill_path_d, points_attr,
    rotated_transform_attr, translate_attr,
)
from .labels import find_source_component_name, first_port_hint, hole_pad_number, qualified_label
from .styles import PCB_LABEL_COLOR, layer_name_to_color

logger = logging.getLogger(__name__)


def _label_value(
    pad_number: str,
    pcb_component_id: Optional[str],
    ctx: PcbContext,
    circuit_json: Optional[Sequence[Any]],
) -> str:
    if ctx.label_profile == LabelProfile.MINIMAL:
        return pad_number
    return qualified_label(pad_number, find_source_component_name(circuit_json, pcb_component_id))


def _label_attrs(font_size: str) -> dict[str, str]:
    return {
        "fill": PCB_LABEL_COLOR,
        "font-family": config.LABEL_FONT_FAMILY,
        "font-size": font_size,
        "text-anchor": "middle",
        "dominant-baseline": "central",
    }


def _hole_number_text(hole, x: float, y: float, circuit_json) -> SvgObject | None:
    """Hole labels are always component-qualified, whatever the pad label profile."""
    pad_number = hole_pad_number(hole)
    if not pad_number:
        return None

    component_name = find_source_component_name(circuit_json, hole.pcb_component_id)
    value = qualified_label(pad_number, component_name)
    return svg_text(value, {
        "class": "pcb-hole-number",
        "x": fmt(x),
        "y": fmt(y),
        **_label_attrs(config.PCB_LABEL_FONT_SIZE),
    })


def create_svg_objects_from_pcb_plated_hole(
    hole: Any,
    ctx: PcbContext,
    circuit_json: Optional[Sequence[Any]] = None,
) -> list[SvgObject]:
    """
    Create PCB-view elements for a plated hole.

    The outer copper uses the top copper color and the inner hole the drill
    color. A label follows the group when a pad number can be resolved; it
    is prefixed with the owning component's name when ``circuit_json``
    links the hole to a named source component. The label profile of
    ``ctx`` only affects SMT pads; hole labels are always qualified.

    Args:
        hole: Plated hole record (model or mapping)
        ctx: PCB rendering context
        circuit_json: All circuit records, consulted read-only for naming

    Returns:
        [group] or [group, label]; empty for unsupported shapes
    """
    hole = coerce_plated_hole(hole)
    if hole is None:
        return []

    transform = ctx.transform
    x, y = transform.apply_to_point(hole.x, hole.y)
    scale = transform.scale_x
    copper = layer_name_to_color("top", ctx.color_map)
    drill = ctx.color_map.drill

    if isinstance(hole, PcbHolePill):
        outer = svg_element("path", {
            "class": "pcb-hole-outer",
            "fill": copper,
            "d": pill_path_d(x, y, hole.outer_width * scale, hole.outer_height * scale),
        })
        inner = svg_element("path", {
            "class": "pcb-hole-inner",
            "fill": drill,
            "d": pill_path_d(x, y, hole.hole_width * scale, hole.hole_height * scale),
        })

    elif isinstance(hole, PcbHoleCircle):
        outer = svg_element("circle", {
            "class": "pcb-hole-outer",
            "fill": copper,
            **circle_attrs(x, y, hole.outer_diameter * scale / 2),
        })
        inner = svg_element("circle", {
            "class": "pcb-hole-inner",
            "fill": drill,
            **circle_attrs(x, y, hole.hole_diameter * scale / 2),
        })

    elif isinstance(hole, PcbHoleCircularWithRectPad):
        outer = svg_element("rect", {
            "class": "pcb-hole-outer-pad",
            "fill": copper,
            **centered_rect_attrs(x, y, hole.rect_pad_width * scale, hole.rect_pad_height * scale),
        })
        inner = svg_element("circle", {
            "class": "pcb-hole-inner",
            "fill": drill,
            **circle_attrs(x, y, hole.hole_diameter * scale / 2),
        })

    elif isinstance(hole, PcbHolePillWithRectPad):
        hole_width = hole.hole_width * scale
        hole_height = hole.hole_height * scale
        corner_radius = min(hole_width, hole_height) / 2
        outer = svg_element("rect", {
            "class": "pcb-hole-outer-pad",
            "fill": copper,
            **centered_rect_attrs(x, y, hole.rect_pad_width * scale, hole.rect_pad_height * scale),
        })
        inner = svg_element("rect", {
            "class": "pcb-hole-inner",
            "fill": drill,
            **centered_rect_attrs(x, y, hole_width, hole_height),
            "rx": fmt(corner_radius),
            "ry": fmt(corner_radius),
        })

    else:
        logger.debug("Unsupported plated hole shape %r", getattr(hole, "shape", None))
        return []

    label = _hole_number_text(hole, x, y, circuit_json)
    return with_label(svg_group([outer, inner]), label)


def _pad_number_text(
    pad, x: float, y: float, ctx: PcbContext, circuit_json, transform: str | None = None
) -> SvgObject:
    pad_number = first_port_hint(pad) or config.PCB_PAD_FALLBACK_LABEL
    value = _label_value(pad_number, pad.pcb_component_id, ctx, circuit_json)
    return svg_text(value, {
        "x": "0",
        "y": "0",
        **_label_attrs(ctx.label_font_size),
        "transform": transform or translate_attr(x, y),
    })


def create_svg_objects_from_smt_pad(
    pad: Any,
    ctx: PcbContext,
    circuit_json: Optional[Sequence[Any]] = None,
) -> list[SvgObject]:
    """
    Create PCB-view elements for an SMT pad.

    Pads on a layer other than ``ctx.layer`` (when set) produce nothing.
    Every rendered pad is followed by a label; pads without a port hint are
    labelled with the fallback pad number.

    Args:
        pad: SMT pad record (model or mapping)
        ctx: PCB rendering context
        circuit_json: All circuit records, consulted read-only for naming

    Returns:
        [shape, label]; empty when filtered out or unsupported
    """
    pad = coerce_smt_pad(pad)
    if pad is None:
        return []

    if ctx.layer and pad.layer != ctx.layer:
        logger.debug("Skipping pad %s on layer %r", pad.pcb_smtpad_id, pad.layer)
        return []

    transform = ctx.transform
    x, y = transform.apply_to_point(pad.x, pad.y)
    attrs = {"class": "pcb-pad", "fill": layer_name_to_color(pad.layer, ctx.color_map)}

    if isinstance(pad, (PcbSmtPadRect, PcbSmtPadRotatedRect)):
        width = pad.width * transform.scale_x
        height = pad.height * transform.scale_y

        if isinstance(pad, PcbSmtPadRotatedRect) and pad.ccw_rotation:
            rotation = rotated_transform_attr(x, y, pad.ccw_rotation)
            shape = svg_element("rect", {
                **attrs,
                "x": fmt(-width / 2),
                "y": fmt(-height / 2),
                "width": fmt(width),
                "height": fmt(height),
                "transform": rotation,
                "data-layer": pad.layer,
            })
            return [shape, _pad_number_text(pad, x, y, ctx, circuit_json, rotation)]

        shape = svg_element("rect", {
            **attrs,
            **centered_rect_attrs(x, y, width, height),
            "data-layer": pad.layer,
        })

    elif isinstance(pad, PcbSmtPadPill):
        radius = pad.radius * transform.scale_x
        shape = svg_element("rect", {
            **attrs,
            **centered_rect_attrs(x, y, pad.width * transform.scale_x, pad.height * transform.scale_y),
            "rx": fmt(radius),
            "ry": fmt(radius),
            "data-layer": pad.layer,
        })

    elif isinstance(pad, PcbSmtPadCircle):
        shape = svg_element("circle", {
            **attrs,
            **circle_attrs(x, y, pad.radius * transform.scale_x),
            "data-layer": pad.layer,
        })

    elif isinstance(pad, PcbSmtPadPolygon):
        points = transform.apply_to_points((p.x, p.y) for p in pad.points)
        shape = svg_element("polygon", {
            **attrs,
            "points": points_attr(points),
            "data-layer": pad.layer,
        })

    else:
        logger.debug("Unsupported SMT pad shape %r", getattr(pad, "shape", None))
        return []

    return [shape, _pad_number_text(pad, x, y, ctx, circuit_json)]
