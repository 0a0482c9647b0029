"""Configuration constants for the shape renderer."""
import logging
import os

logger = logging.getLogger(__name__)

# Environment variable selecting the default PCB label profile
LABEL_PROFILE_ENV = "BOARDSVG_LABEL_PROFILE"

# Label text settings
LABEL_FONT_FAMILY = "Arial, sans-serif"
ASSEMBLY_LABEL_FONT_SIZE = "0.8"  # Board units, drawn inside a scaled space
PCB_LABEL_FONT_SIZE = "10"  # Device pixels
PCB_MINIMAL_LABEL_FONT_SIZE = "6"

# Pad number used by PCB pads that carry no port hint
PCB_PAD_FALLBACK_LABEL = "X"


def get_label_profile_from_env() -> str:
    """
    Determine the default PCB label profile from the environment.

    - unset or "annotated": component-name prefixed labels
    - "minimal": bare pad numbers, smaller font
    """
    value = os.environ.get(LABEL_PROFILE_ENV, "").strip().lower()
    if not value:
        return "annotated"

    if value in ("annotated", "minimal"):
        return value

    logger.warning(
        "Unknown %s value %r, falling back to 'annotated'", LABEL_PROFILE_ENV, value
    )
    return "annotated"


DEFAULT_LABEL_PROFILE = get_label_profile_from_env()
