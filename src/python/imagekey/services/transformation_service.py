"""
Transformation service implementation for imagekey.
Resolves raw parameter strings, including named presets (``t_<name>``),
into ParameterSets and cache file paths.
"""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from ..core.cache_keys import make_cache_file_path
from ..core.errors import ParameterError, UnknownTransformationError
from ..core.models import ParameterSet
from ..core.parameters import parse_parameters, parse_transformation_name
from ..config import CONFIG
from .config_service import ConfigService

logger = logging.getLogger(__name__)


class TransformationService:
    """Service mapping request parameter strings to ParameterSets.

    Presets are parsed when registered, so a bad preset fails early rather
    than on the first request that names it. The preset table is replaced,
    never mutated, which keeps concurrent ``resolve`` calls lock-free.
    """

    def __init__(self, config_service: Optional[ConfigService] = None,
                 transformations: Optional[Mapping[str, str]] = None):
        self._lock = threading.Lock()
        self._presets: Mapping[str, ParameterSet] = MappingProxyType({})
        self.default_scale: Optional[int] = None

        if config_service is not None:
            default_scale = config_service.get_setting("default_scale")
            if default_scale is not None:
                # a bad setting fails here rather than on every request
                ParameterSet().with_scale(default_scale)
            self.default_scale = default_scale
            self.register_all(config_service.get_transformations())
        if transformations:
            self.register_all(transformations)

        logger.debug(f"TransformationService initialized with {len(self._presets)} presets")

    def register(self, name: str, parameters_str: str) -> ParameterSet:
        """Register a named preset and return its parsed parameters."""
        return self.register_all({name: parameters_str})[name]

    def register_all(self, transformations: Mapping[str, str]) -> Dict[str, ParameterSet]:
        parsed = {}
        for name, parameters_str in transformations.items():
            prefixed = CONFIG["TRANSFORMATION_PREFIX"] + name
            if parse_transformation_name(prefixed) != name:
                raise ParameterError(f"invalid transformation name: {name!r}", key="t", value=name)
            parsed[name] = parse_parameters(parameters_str)

        with self._lock:
            presets = dict(self._presets)
            presets.update(parsed)
            self._presets = MappingProxyType(presets)
        for name, params in parsed.items():
            logger.debug(f"Registered transformation {name!r}: {params}")
        return parsed

    def names(self) -> List[str]:
        return sorted(self._presets)

    def get(self, name: str) -> ParameterSet:
        try:
            return self._presets[name]
        except KeyError:
            raise UnknownTransformationError(
                f"unknown transformation: {name!r}", key="t", value=name
            ) from None

    def __contains__(self, name: str) -> bool:
        return name in self._presets

    def __len__(self) -> int:
        return len(self._presets)

    def resolve(self, parameters_str: str, scale: Optional[int] = None) -> ParameterSet:
        """Turn a raw request string into parameters.

        ``t_<name>`` selects a registered preset; anything else is parsed as
        an explicit parameter list.
        """
        name = parse_transformation_name(parameters_str)
        if name is not None:
            params = self.get(name)
        else:
            params = parse_parameters(parameters_str)

        if scale is None:
            scale = self.default_scale
        if scale is not None:
            params = params.with_scale(scale)
        return params

    def cache_path(self, image_path: str, parameters_str: str, scale: Optional[int] = None) -> str:
        """Cache file path for an image transformed by ``parameters_str``."""
        return make_cache_file_path(image_path, self.resolve(parameters_str, scale))

    def cache_paths(self, image_path: str, parameter_strs: Iterable[str],
                    scale: Optional[int] = None) -> Dict[str, str]:
        """Cache file paths for several transformations of one image."""
        return {raw: self.cache_path(image_path, raw, scale) for raw in parameter_strs}
