"""
Service layer package for imagekey.
Services sit between callers (request handlers, the command line) and the
pure core layer.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..core.models import ParameterSet


class ConfigServiceInterface(ABC):
    """Settings storage interface."""

    @abstractmethod
    def get_setting(self, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set_setting(self, key: str, value: Any):
        pass

    @abstractmethod
    def save_settings(self):
        pass


class TransformationServiceInterface(ABC):
    """Resolution of raw parameter strings and named presets."""

    @abstractmethod
    def resolve(self, parameters_str: str, scale: Optional[int] = None) -> ParameterSet:
        pass

    @abstractmethod
    def cache_path(self, image_path: str, parameters_str: str, scale: Optional[int] = None) -> str:
        pass

    @abstractmethod
    def names(self) -> List[str]:
        pass


from .config_service import ConfigService
from .transformation_service import TransformationService

ConfigServiceInterface.register(ConfigService)
TransformationServiceInterface.register(TransformationService)

__all__ = [
    'ConfigServiceInterface',
    'TransformationServiceInterface',
    'ConfigService',
    'TransformationService',
]
