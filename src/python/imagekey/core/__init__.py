"""
Core package for imagekey: parameter parsing and cache path encoding.
"""

from .errors import (
    ParameterError,
    InvalidNumberError,
    OutOfRangeError,
    InvalidEnumError,
    InvalidLengthError,
    MalformedTokenError,
    UnknownTransformationError,
    PathError,
    MissingExtensionError,
)
from .models import CroppingMode, Gravity, ImageFilter, ParameterSet
from .validators import is_valid_cropping_mode, is_valid_gravity, is_valid_filter
from .parameters import parse_parameters, parse_transformation_name
from .cache_keys import (
    encode_parameters,
    decode_parameters,
    make_cache_file_path,
    parse_cache_file_path,
    is_cache_file_path,
)

__all__ = [
    'ParameterError',
    'InvalidNumberError',
    'OutOfRangeError',
    'InvalidEnumError',
    'InvalidLengthError',
    'MalformedTokenError',
    'UnknownTransformationError',
    'PathError',
    'MissingExtensionError',
    'CroppingMode',
    'Gravity',
    'ImageFilter',
    'ParameterSet',
    'is_valid_cropping_mode',
    'is_valid_gravity',
    'is_valid_filter',
    'parse_parameters',
    'parse_transformation_name',
    'encode_parameters',
    'decode_parameters',
    'make_cache_file_path',
    'parse_cache_file_path',
    'is_cache_file_path',
]
