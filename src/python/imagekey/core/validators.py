"""
Membership checks for the coded parameter values.

Callers are expected to lower-case the value first, as the parser does.
"""

from .models import CroppingMode, Gravity, ImageFilter

_CROPPING_CODES = CroppingMode.codes()
_GRAVITY_CODES = Gravity.codes()
_FILTER_CODES = ImageFilter.codes()


def is_valid_cropping_mode(code: str) -> bool:
    return code in _CROPPING_CODES


def is_valid_gravity(code: str) -> bool:
    return code in _GRAVITY_CODES


def is_valid_filter(code: str) -> bool:
    return code in _FILTER_CODES
