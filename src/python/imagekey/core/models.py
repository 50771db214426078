"""
Data models for imagekey core layer.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, FrozenSet

from ..config import (
    CONFIG,
    DEFAULT_SCALE,
    PARAMETER_CROPPING,
    PARAMETER_FILTER,
    PARAMETER_GRAVITY,
    PARAMETER_HEIGHT,
    PARAMETER_SCALE,
    PARAMETER_WIDTH,
)
from .errors import InvalidEnumError, InvalidNumberError, OutOfRangeError


class _CodedEnum(str, Enum):
    """Enum whose value is the lower-case code used in parameter strings."""

    @classmethod
    def codes(cls) -> FrozenSet[str]:
        return frozenset(member.value for member in cls)

    @classmethod
    def from_code(cls, code: str) -> "_CodedEnum":
        try:
            return cls(code.lower())
        except (ValueError, AttributeError):
            raise InvalidEnumError(f"{code!r} is not a valid {cls.__name__}", value=code) from None

    def __str__(self) -> str:
        return self.value


class CroppingMode(_CodedEnum):
    """How the source image is fitted into the requested frame."""
    EXACT = "e"        # crop exactly to the given dimensions
    ALL = "a"          # whole image shown in a frame of at most the given dimensions
    PART = "p"         # fill a frame of the given dimensions
    KEEP_SCALE = "k"   # fill a frame of the given dimensions, keep scale


class Gravity(_CodedEnum):
    """Anchor used when cropping decides which region to keep."""
    NORTH = "n"
    NORTH_EAST = "ne"
    EAST = "e"
    SOUTH_EAST = "se"
    SOUTH = "s"
    SOUTH_WEST = "sw"
    WEST = "w"
    NORTH_WEST = "nw"
    CENTER = "c"


class ImageFilter(_CodedEnum):
    NONE = "none"
    GRAYSCALE = "grayscale"


def _check_dimension(key: str, value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidNumberError(f"value for {key!r} must be an integer", key=key, value=str(value))
    if value < 0:
        raise OutOfRangeError(f"value for {key!r} must be >= 0", key=key, value=str(value))


def _check_scale(value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidNumberError(
            f"value for {PARAMETER_SCALE!r} must be an integer", key=PARAMETER_SCALE, value=str(value)
        )
    if value <= 0:
        raise OutOfRangeError(
            f"value for {PARAMETER_SCALE!r} must be > 0", key=PARAMETER_SCALE, value=str(value)
        )


@dataclass(frozen=True)
class ParameterSet:
    """Validated parameters of a single image transformation.

    A width or height of 0 means the dimension was not requested. Enum
    fields also accept their string codes and are normalized on creation.
    """
    width: int = 0
    height: int = 0
    scale: int = DEFAULT_SCALE
    cropping: CroppingMode = CroppingMode.EXACT
    gravity: Gravity = Gravity.NORTH_WEST
    filter: ImageFilter = ImageFilter.NONE

    def __post_init__(self):
        _check_dimension(PARAMETER_WIDTH, self.width)
        _check_dimension(PARAMETER_HEIGHT, self.height)
        _check_scale(self.scale)
        # frozen, so normalized enums go through object.__setattr__
        for name, enum_cls in (("cropping", CroppingMode), ("gravity", Gravity), ("filter", ImageFilter)):
            value = getattr(self, name)
            if not isinstance(value, enum_cls):
                object.__setattr__(self, name, enum_cls.from_code(value))

    def with_scale(self, scale: int) -> "ParameterSet":
        """Return a copy of these parameters with the scale set to the given value."""
        return replace(self, scale=scale)

    @property
    def is_default(self) -> bool:
        return self == ParameterSet()

    def to_string(self) -> str:
        """Encode every field in canonical order, e.g. ``c_e,g_nw,h_300,w_400,f_none,s_1``."""
        values = {
            PARAMETER_CROPPING: self.cropping.value,
            PARAMETER_GRAVITY: self.gravity.value,
            PARAMETER_HEIGHT: str(self.height),
            PARAMETER_WIDTH: str(self.width),
            PARAMETER_FILTER: self.filter.value,
            PARAMETER_SCALE: str(self.scale),
        }
        kv = CONFIG["KEY_VALUE_SEPARATOR"]
        return CONFIG["PARAMETER_SEPARATOR"].join(
            f"{key}{kv}{values[key]}" for key in CONFIG["CANONICAL_ORDER"]
        )

    def __str__(self) -> str:
        return self.to_string()

    def to_dict(self) -> Dict[str, Any]:
        """Convert ParameterSet to dictionary."""
        return {
            'width': self.width,
            'height': self.height,
            'scale': self.scale,
            'cropping': self.cropping.value,
            'gravity': self.gravity.value,
            'filter': self.filter.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParameterSet':
        """Create ParameterSet from dictionary."""
        return cls(
            width=data.get('width', 0),
            height=data.get('height', 0),
            scale=data.get('scale', DEFAULT_SCALE),
            cropping=data.get('cropping', CroppingMode.EXACT),
            gravity=data.get('gravity', Gravity.NORTH_WEST),
            filter=data.get('filter', ImageFilter.NONE),
        )
