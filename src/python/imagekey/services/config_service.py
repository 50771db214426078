"""
Configuration service implementation for imagekey.
Handles the settings file holding named transformations and defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional
from pathlib import Path

from ..config import CONFIG

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for managing imagekey settings.

    Recognized settings:
        transformations: mapping of preset name to parameter string
        default_scale: scale applied when a caller gives none
    """

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or CONFIG["DEFAULT_SETTINGS_PATH"]
        self.settings = {}
        self._load_settings()

    def _load_settings(self):
        """Load settings from the configuration file."""
        if not os.path.exists(self.config_file):
            logger.debug(f"No settings file at {self.config_file}")
            return
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                settings = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load settings from {self.config_file}: {e}")
            return
        if not isinstance(settings, dict):
            logger.warning(f"Ignoring settings in {self.config_file}: expected a JSON object")
            return
        self.settings = settings
        logger.debug(f"Loaded {len(self.settings)} settings from {self.config_file}")

    def _save_settings(self):
        """Save settings to the configuration file."""
        try:
            config_path = Path(self.config_file)
            config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=2, sort_keys=True)
        except OSError as e:
            logger.warning(f"Could not save settings to {self.config_file}: {e}")

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a configuration setting."""
        return self.settings.get(key, default)

    def set_setting(self, key: str, value: Any):
        """Set a configuration setting."""
        self.settings[key] = value

    def save_settings(self):
        """Save all settings to persistent storage."""
        self._save_settings()

    def get_all_settings(self) -> Dict[str, Any]:
        """Get all configuration settings."""
        return self.settings.copy()

    def update_settings(self, settings: Dict[str, Any]):
        """Update multiple settings at once."""
        self.settings.update(settings)

    def get_transformations(self) -> Dict[str, str]:
        """Named transformations as a name -> parameter string mapping."""
        transformations = self.get_setting("transformations", {})
        if not isinstance(transformations, dict):
            logger.warning(f"Ignoring 'transformations' in {self.config_file}: expected an object")
            return {}
        return dict(transformations)
