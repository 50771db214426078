"""
imagekey package initialization.
"""

# Core components
from .core import (
    ParameterError,
    InvalidNumberError,
    OutOfRangeError,
    InvalidEnumError,
    InvalidLengthError,
    MalformedTokenError,
    UnknownTransformationError,
    PathError,
    MissingExtensionError,
    CroppingMode,
    Gravity,
    ImageFilter,
    ParameterSet,
    is_valid_cropping_mode,
    is_valid_gravity,
    is_valid_filter,
    parse_parameters,
    parse_transformation_name,
    encode_parameters,
    decode_parameters,
    make_cache_file_path,
    parse_cache_file_path,
    is_cache_file_path,
)

# Services
from .services.config_service import ConfigService
from .services.transformation_service import TransformationService

# Configuration
from .config import CONFIG

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ParameterError",
    "InvalidNumberError",
    "OutOfRangeError",
    "InvalidEnumError",
    "InvalidLengthError",
    "MalformedTokenError",
    "UnknownTransformationError",
    "PathError",
    "MissingExtensionError",

    # Models
    "CroppingMode",
    "Gravity",
    "ImageFilter",
    "ParameterSet",

    # Parsing and validation
    "is_valid_cropping_mode",
    "is_valid_gravity",
    "is_valid_filter",
    "parse_parameters",
    "parse_transformation_name",

    # Cache paths
    "encode_parameters",
    "decode_parameters",
    "make_cache_file_path",
    "parse_cache_file_path",
    "is_cache_file_path",

    # Services
    "ConfigService",
    "TransformationService",

    # Configuration
    "CONFIG",
]
