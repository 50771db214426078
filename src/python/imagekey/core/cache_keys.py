"""imagekey.core.cache_keys

Helpers for building stable, explicit cache file paths for transformed images.

A cache path is the source image path with the canonical parameter encoding
inserted before the extension:

    photo.jpg -> photo--c_e,g_nw,h_300,w_400,f_none,s_1--.jpg

Key goals:
- Every field is always present and always in the same order, so equal
  parameters give byte-identical paths on any machine
- Parameters that differ in any field never share a path
- A cache path can be decoded back into the image path and its parameters
"""

from __future__ import annotations

import logging
from typing import Tuple

from ..config import (
    CONFIG,
    PARAMETER_CROPPING,
    PARAMETER_FILTER,
    PARAMETER_GRAVITY,
    PARAMETER_HEIGHT,
    PARAMETER_SCALE,
    PARAMETER_WIDTH,
)
from .errors import MalformedTokenError, MissingExtensionError, ParameterError
from .models import ParameterSet
from .parameters import (
    _parse_cropping,
    _parse_filter,
    _parse_gravity,
    _parse_integer,
    _split_token,
)

logger = logging.getLogger(__name__)


def encode_parameters(params: ParameterSet) -> str:
    """Canonical encoding of all six fields, e.g. ``c_e,g_nw,h_0,w_0,f_none,s_1``."""
    return params.to_string()


def decode_parameters(encoded: str) -> ParameterSet:
    """Inverse of :func:`encode_parameters`.

    Stricter than the request parser: all six keys must be present in
    canonical order, written exactly as :func:`encode_parameters` writes
    them. A width or height of 0 and the scale key are accepted.
    """
    tokens = encoded.split(CONFIG["PARAMETER_SEPARATOR"])
    pairs = [_split_token(token) for token in tokens]
    keys = tuple(key for key, _ in pairs)
    if keys != CONFIG["CANONICAL_ORDER"]:
        raise MalformedTokenError(f"not a canonical parameter encoding: {encoded!r}", value=encoded)

    values = dict(pairs)
    params = ParameterSet(
        width=_parse_integer(PARAMETER_WIDTH, values[PARAMETER_WIDTH], allow_zero=True),
        height=_parse_integer(PARAMETER_HEIGHT, values[PARAMETER_HEIGHT], allow_zero=True),
        scale=_parse_integer(PARAMETER_SCALE, values[PARAMETER_SCALE]),
        cropping=_parse_cropping(values[PARAMETER_CROPPING]),
        gravity=_parse_gravity(values[PARAMETER_GRAVITY]),
        filter=_parse_filter(values[PARAMETER_FILTER]),
    )
    # signs, leading zeros and upper case decode fine but are not the stored form
    if encode_parameters(params) != encoded:
        raise MalformedTokenError(f"not a canonical parameter encoding: {encoded!r}", value=encoded)
    return params


def make_cache_file_path(image_path: str, params: ParameterSet) -> str:
    """Combine an image path and its parameters into a path for file lookups.

    Structure:
        <path without extension>--<encoded parameters>--<.extension>
    """
    index = image_path.rfind(".")
    if index == -1:
        raise MissingExtensionError(f"invalid image path, no extension: {image_path!r}", path=image_path)

    marker = CONFIG["PATH_PARAMETER_MARKER"]
    cache_path = f"{image_path[:index]}{marker}{encode_parameters(params)}{marker}{image_path[index:]}"
    logger.debug(f"Cache path for {image_path!r}: {cache_path!r}")
    return cache_path


def parse_cache_file_path(cache_path: str) -> Tuple[str, ParameterSet]:
    """Recover ``(image_path, params)`` from a path made by :func:`make_cache_file_path`."""
    marker = CONFIG["PATH_PARAMETER_MARKER"]
    parts = cache_path.rsplit(marker, 2)
    if len(parts) != 3 or not parts[2].startswith("."):
        raise MalformedTokenError(f"not a cache file path: {cache_path!r}", value=cache_path)

    base, encoded, extension = parts
    return base + extension, decode_parameters(encoded)


def is_cache_file_path(path: str) -> bool:
    try:
        parse_cache_file_path(path)
    except ParameterError:
        return False
    return True
