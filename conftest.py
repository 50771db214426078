"""
Shared pytest fixtures for imagekey tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Allow running the tests from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent / "src" / "python"))

from imagekey import ParameterSet  # noqa: E402


@pytest.fixture
def default_params() -> ParameterSet:
    return ParameterSet()


@pytest.fixture
def settings_file(tmp_path):
    """Settings file with two named transformations and a default scale of 2."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "transformations": {
            "thumb": "w_200,h_200,c_p,g_c",
            "gray-banner": "w_1200,h_300,f_grayscale",
        },
        "default_scale": 2,
    }), encoding="utf-8")
    return path


@pytest.fixture
def missing_settings_file(tmp_path):
    """Path of a settings file that does not exist."""
    return tmp_path / "absent" / "settings.json"
