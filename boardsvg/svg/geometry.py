"""Shape geometry helpers shared by the assembly and PCB renderers."""
import math

import numpy as np


def fmt(value: float) -> str:
    """
    Format a number for an SVG attribute.

    Matches JavaScript Number.prototype.toString: integral values print
    without a fractional part, negative zero prints as "0", and exponent
    notation is only used below 1e-6 or from 1e21 upward.
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, unique=True, trim="-")
    return np.format_float_scientific(value, unique=True, trim="-", exp_digits=1)


def pill_path_d(x: float, y: float, width: float, height: float) -> str:
    """
    Build the path data for a vertical capsule centered at (x, y).

    Two semicircular caps of radius width/2 are joined by straight vertical
    sides of length height - width. A negative straight length is passed
    through unchanged.
    """
    radius = width / 2
    straight = height - width
    return (
        f"M{fmt(x - radius)},{fmt(y - straight / 2)} "
        f"v{fmt(straight)} "
        f"a{fmt(radius)},{fmt(radius)} 0 0 0 {fmt(width)},0 "
        f"v-{fmt(straight)} "
        f"a{fmt(radius)},{fmt(radius)} 0 0 0 -{fmt(width)},0 z"
    )


def centered_rect_attrs(x: float, y: float, width: float, height: float) -> dict[str, str]:
    """x/y/width/height attributes for a rectangle centered at (x, y)."""
    return {
        "x": fmt(x - width / 2),
        "y": fmt(y - height / 2),
        "width": fmt(width),
        "height": fmt(height),
    }


def circle_attrs(x: float, y: float, radius: float) -> dict[str, str]:
    return {"cx": fmt(x), "cy": fmt(y), "r": fmt(radius)}


def points_attr(points: list[tuple[float, float]]) -> str:
    """Polygon ``points`` attribute, vertices in the given order."""
    return " ".join(f"{fmt(px)},{fmt(py)}" for px, py in points)


def translate_attr(x: float, y: float) -> str:
    return f"translate({fmt(x)} {fmt(y)})"


def rotated_transform_attr(x: float, y: float, ccw_rotation: float) -> str:
    """
    Transform placing an origin-centered shape at (x, y) with a rotation.

    The angle is negated because SVG's Y axis points down, which turns a
    positive SVG rotation clockwise on screen.
    """
    return f"{translate_attr(x, y)} rotate({fmt(-ccw_rotation)})"
