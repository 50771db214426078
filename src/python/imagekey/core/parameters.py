"""imagekey.core.parameters

Parsing of compact parameter strings such as ``w_400,h_300,c_e``.

Each comma separated token is ``<key>_<value>``; only the first ``_`` splits.
Known keys:

- ``w`` / ``h``: width / height, positive integers
- ``c``: cropping mode (``e``, ``a``, ``p``, ``k``)
- ``g``: gravity (``n``, ``ne``, ``e``, ``se``, ``s``, ``sw``, ``w``, ``nw``, ``c``)
- ``f``: filter (``none``, ``grayscale``)

Unknown keys are ignored so that older readers accept newer strings.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Tuple

from ..config import (
    CONFIG,
    PARAMETER_CROPPING,
    PARAMETER_FILTER,
    PARAMETER_GRAVITY,
    PARAMETER_HEIGHT,
    PARAMETER_WIDTH,
)
from .errors import (
    InvalidEnumError,
    InvalidLengthError,
    InvalidNumberError,
    MalformedTokenError,
    OutOfRangeError,
)
from .models import CroppingMode, Gravity, ImageFilter, ParameterSet
from .validators import is_valid_cropping_mode, is_valid_filter, is_valid_gravity

logger = logging.getLogger(__name__)

_TRANSFORMATION_NAME_RE = re.compile(r"t_([0-9A-Za-z-]+)")
# str.isdigit() and int() accept more than plain ASCII decimals
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_MAX_INTEGER = 2 ** 63 - 1
_MIN_INTEGER = -2 ** 63
_MAX_INTEGER_DIGITS = len(str(_MAX_INTEGER))


def _split_token(token: str) -> Tuple[str, str]:
    key, sep, value = token.partition(CONFIG["KEY_VALUE_SEPARATOR"])
    if not sep or not key or not value:
        raise MalformedTokenError(f"malformed parameter: {token!r}", key=key or None, value=value or None)
    return key, value


def _parse_integer(key: str, value: str, allow_zero: bool = False) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise InvalidNumberError(f"could not parse value for parameter: {key!r}", key=key, value=value)
    # values must fit a signed 64-bit integer; the length check keeps int() off huge strings
    if len(value.lstrip("+-").lstrip("0")) > _MAX_INTEGER_DIGITS:
        raise InvalidNumberError(f"value for parameter {key!r} is too large", key=key, value=value)
    number = int(value)
    if not _MIN_INTEGER <= number <= _MAX_INTEGER:
        raise InvalidNumberError(f"value for parameter {key!r} is too large", key=key, value=value)
    if number < 0 or (number == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise OutOfRangeError(f"value {key!r} must be {bound}: {value!r}", key=key, value=value)
    return number


def _parse_code(key: str, value: str, max_length: Optional[int],
                is_valid: Callable[[str], bool], enum_cls):
    code = value.lower()
    if max_length is not None and len(code) > max_length:
        noun = "character" if max_length == 1 else "characters"
        raise InvalidLengthError(
            f"value {key!r} must have at most {max_length} {noun}", key=key, value=value
        )
    if not is_valid(code):
        raise InvalidEnumError(f"invalid value for {key!r}: {value!r}", key=key, value=value)
    return enum_cls(code)


def _parse_cropping(value: str) -> CroppingMode:
    return _parse_code(PARAMETER_CROPPING, value, CONFIG["MAX_CROPPING_LENGTH"],
                       is_valid_cropping_mode, CroppingMode)


def _parse_gravity(value: str) -> Gravity:
    return _parse_code(PARAMETER_GRAVITY, value, CONFIG["MAX_GRAVITY_LENGTH"],
                       is_valid_gravity, Gravity)


def _parse_filter(value: str) -> ImageFilter:
    return _parse_code(PARAMETER_FILTER, value, None, is_valid_filter, ImageFilter)


def parse_parameters(parameters_str: str, scale: Optional[int] = None) -> ParameterSet:
    """Turn a string like ``"w_400,h_300"`` into a validated ParameterSet.

    Raises a ParameterError subclass on the first invalid token. When
    ``scale`` is given it overrides the default scale of the result.
    """
    fields = {}
    for token in parameters_str.split(CONFIG["PARAMETER_SEPARATOR"]):
        key, value = _split_token(token)

        if key == PARAMETER_WIDTH:
            fields["width"] = _parse_integer(key, value)
        elif key == PARAMETER_HEIGHT:
            fields["height"] = _parse_integer(key, value)
        elif key == PARAMETER_CROPPING:
            fields["cropping"] = _parse_cropping(value)
        elif key == PARAMETER_GRAVITY:
            fields["gravity"] = _parse_gravity(value)
        elif key == PARAMETER_FILTER:
            fields["filter"] = _parse_filter(value)
        else:
            logger.debug(f"Ignoring unknown parameter {key!r} in {parameters_str!r}")

    params = ParameterSet(**fields)
    if scale is not None:
        params = params.with_scale(scale)
    logger.debug(f"Parsed {parameters_str!r} -> {params}")
    return params


def parse_transformation_name(parameters_str: str) -> Optional[str]:
    """Return the preset name from a string like ``t_thumbnail``, or None.

    A non-match is not an error: the string is then an explicit parameter list.
    """
    match = _TRANSFORMATION_NAME_RE.fullmatch(parameters_str)
    if match is None:
        return None
    return match.group(1)
