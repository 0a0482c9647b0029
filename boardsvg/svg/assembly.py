"""Assembly view: grayscale pad and hole silhouettes with pad numbers."""
import logging
from typing import Any

from boardsvg import config
from boardsvg.circuit import (
    PcbHoleCircle, PcbHoleCircularWithRectPad, PcbHolePill, PcbHolePillWithRectPad,
    PcbSmtPadCircle, PcbSmtPadPill, PcbSmtPadPolygon, PcbSmtPadRect, PcbSmtPadRotatedRect,
    coerce_plated_hole, coerce_smt_pad,
)

from .context import AssemblyContext
from .elements import SvgObject, svg_element, svg_group, svg_text, with_label
from .geometry import (
    centered_rect_attrs, circle_attrs, fmt, pill_path_d, points_attr,
    rotated_transform_attr, translate_attr,
)
from .labels import hole_pad_number, smt_pad_number
from .styles import ASSEMBLY_HOLE_COLOR, ASSEMBLY_LABEL_COLOR, ASSEMBLY_PAD_COLOR

logger = logging.getLogger(__name__)


def _label_attrs() -> dict[str, str]:
    return {
        "fill": ASSEMBLY_LABEL_COLOR,
        "font-family": config.LABEL_FONT_FAMILY,
        "font-size": config.ASSEMBLY_LABEL_FONT_SIZE,
        "text-anchor": "middle",
        "dominant-baseline": "central",
    }


def _hole_number_text(hole, x: float, y: float) -> SvgObject | None:
    pad_number = hole_pad_number(hole)
    if not pad_number:
        return None

    return svg_text(pad_number, {
        "class": "assembly-hole-number",
        "x": fmt(x),
        "y": fmt(y),
        **_label_attrs(),
    })


def create_svg_objects_from_assembly_plated_hole(
    hole: Any, ctx: AssemblyContext
) -> list[SvgObject]:
    """
    Create assembly-view elements for a plated hole.

    Returns a group holding the outer (pad) and inner (hole) shapes,
    followed by a pad number label when one can be resolved. Unknown shapes
    produce an empty list.
    """
    hole = coerce_plated_hole(hole)
    if hole is None:
        return []

    transform = ctx.transform
    x, y = transform.apply_to_point(hole.x, hole.y)
    scale = transform.scale_x

    if isinstance(hole, PcbHolePill):
        outer = svg_element("path", {
            "class": "assembly-hole-outer",
            "fill": ASSEMBLY_PAD_COLOR,
            "d": pill_path_d(x, y, hole.outer_width * scale, hole.outer_height * scale),
        })
        inner = svg_element("path", {
            "class": "assembly-hole-inner",
            "fill": ASSEMBLY_HOLE_COLOR,
            "d": pill_path_d(x, y, hole.hole_width * scale, hole.hole_height * scale),
        })

    elif isinstance(hole, PcbHoleCircle):
        outer = svg_element("circle", {
            "class": "assembly-hole-outer",
            "fill": ASSEMBLY_PAD_COLOR,
            **circle_attrs(x, y, hole.outer_diameter * scale / 2),
        })
        inner = svg_element("circle", {
            "class": "assembly-hole-inner",
            "fill": ASSEMBLY_HOLE_COLOR,
            **circle_attrs(x, y, hole.hole_diameter * scale / 2),
        })

    elif isinstance(hole, PcbHoleCircularWithRectPad):
        outer = svg_element("rect", {
            "class": "assembly-hole-outer-pad",
            "fill": ASSEMBLY_PAD_COLOR,
            **centered_rect_attrs(x, y, hole.rect_pad_width * scale, hole.rect_pad_height * scale),
        })
        inner = svg_element("circle", {
            "class": "assembly-hole-inner",
            "fill": ASSEMBLY_HOLE_COLOR,
            **circle_attrs(x, y, hole.hole_diameter * scale / 2),
        })

    elif isinstance(hole, PcbHolePillWithRectPad):
        hole_width = hole.hole_width * scale
        hole_height = hole.hole_height * scale
        corner_radius = min(hole_width, hole_height) / 2
        outer = svg_element("rect", {
            "class": "assembly-hole-outer-pad",
            "fill": ASSEMBLY_PAD_COLOR,
            **centered_rect_attrs(x, y, hole.rect_pad_width * scale, hole.rect_pad_height * scale),
        })
        inner = svg_element("rect", {
            "class": "assembly-hole-inner",
            "fill": ASSEMBLY_HOLE_COLOR,
            **centered_rect_attrs(x, y, hole_width, hole_height),
            "rx": fmt(corner_radius),
            "ry": fmt(corner_radius),
        })

    else:
        logger.debug("Unsupported plated hole shape %r", getattr(hole, "shape", None))
        return []

    return with_label(svg_group([outer, inner]), _hole_number_text(hole, x, y))


def _pad_number_text(pad, x: float, y: float, transform: str | None = None) -> SvgObject | None:
    pad_number = smt_pad_number(pad)
    if not pad_number:
        return None

    return svg_text(pad_number, {
        "class": "assembly-pad-number",
        "x": "0",
        "y": "0",
        **_label_attrs(),
        "transform": transform or translate_attr(x, y),
        "data-layer": pad.layer,
    })


def create_svg_objects_from_assembly_smt_pad(pad: Any, ctx: AssemblyContext) -> list[SvgObject]:
    """Create assembly-view elements for an SMT pad, followed by its pad number."""
    pad = coerce_smt_pad(pad)
    if pad is None:
        return []

    transform = ctx.transform
    x, y = transform.apply_to_point(pad.x, pad.y)
    attrs = {"class": "assembly-pad", "fill": ASSEMBLY_PAD_COLOR}

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
            return with_label(shape, _pad_number_text(pad, x, y, rotation))

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

    return with_label(shape, _pad_number_text(pad, x, y))
