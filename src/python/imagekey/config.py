"""
Configuration constants for imagekey.
"""

from pathlib import Path

# Parameter keys as they appear in a raw parameter string
PARAMETER_WIDTH = "w"
PARAMETER_HEIGHT = "h"
PARAMETER_CROPPING = "c"
PARAMETER_GRAVITY = "g"
PARAMETER_FILTER = "f"
PARAMETER_SCALE = "s"

DEFAULT_SCALE = 1

CONFIG = {
    "PARAMETER_SEPARATOR": ",",
    "KEY_VALUE_SEPARATOR": "_",
    "PATH_PARAMETER_MARKER": "--",
    "TRANSFORMATION_PREFIX": "t_",
    "MAX_CROPPING_LENGTH": 1,
    "MAX_GRAVITY_LENGTH": 2,
    # Field order of the canonical encoding; changing it invalidates every cache key
    "CANONICAL_ORDER": (
        PARAMETER_CROPPING,
        PARAMETER_GRAVITY,
        PARAMETER_HEIGHT,
        PARAMETER_WIDTH,
        PARAMETER_FILTER,
        PARAMETER_SCALE,
    ),
    "DEFAULT_SETTINGS_PATH": str(Path.home() / ".config" / "imagekey" / "settings.json"),
}
