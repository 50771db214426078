"""
test_services.py
----------------

Tests for the settings and transformation services.
"""

import json
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from imagekey import (
    CroppingMode,
    ConfigService,
    Gravity,
    ImageFilter,
    InvalidEnumError,
    InvalidNumberError,
    OutOfRangeError,
    ParameterError,
    ParameterSet,
    TransformationService,
    UnknownTransformationError,
)
from imagekey.services import ConfigServiceInterface, TransformationServiceInterface


@pytest.fixture
def service():
    return TransformationService(transformations={"thumb": "w_200,h_200,c_p,g_c"})


# ---------------------------------------------------------------------
# ConfigService
# ---------------------------------------------------------------------
def test_missing_settings_file(missing_settings_file):
    config = ConfigService(str(missing_settings_file))
    assert config.get_all_settings() == {}
    assert config.get_transformations() == {}


def test_load_settings(settings_file):
    config = ConfigService(str(settings_file))
    assert config.get_setting("default_scale") == 2
    assert config.get_transformations()["thumb"] == "w_200,h_200,c_p,g_c"
    assert config.get_setting("absent", "fallback") == "fallback"


def test_corrupt_settings_file(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        config = ConfigService(str(path))
    assert config.get_all_settings() == {}
    assert "Could not load settings" in caplog.text


def test_settings_must_be_an_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert ConfigService(str(path)).get_all_settings() == {}


def test_transformations_must_be_an_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"transformations": ["w_1"]}), encoding="utf-8")
    assert ConfigService(str(path)).get_transformations() == {}


def test_save_and_reload(missing_settings_file):
    config = ConfigService(str(missing_settings_file))
    config.set_setting("transformations", {"small": "w_50"})
    config.update_settings({"default_scale": 3})
    config.save_settings()

    reloaded = ConfigService(str(missing_settings_file))
    assert reloaded.get_all_settings() == {"transformations": {"small": "w_50"}, "default_scale": 3}


def test_get_all_settings_is_a_copy(settings_file):
    config = ConfigService(str(settings_file))
    config.get_all_settings()["default_scale"] = 99
    assert config.get_setting("default_scale") == 2


def test_interfaces():
    assert isinstance(ConfigService("unused.json"), ConfigServiceInterface)
    assert isinstance(TransformationService(), TransformationServiceInterface)


# ---------------------------------------------------------------------
# TransformationService
# ---------------------------------------------------------------------
def test_resolve_named_transformation(service):
    params = service.resolve("t_thumb")
    assert params == ParameterSet(width=200, height=200, cropping=CroppingMode.PART, gravity=Gravity.CENTER)


def test_resolve_explicit_parameters(service):
    assert service.resolve("w_10,f_grayscale") == ParameterSet(width=10, filter=ImageFilter.GRAYSCALE)


def test_resolve_with_scale(service):
    assert service.resolve("t_thumb", scale=2).scale == 2
    assert service.resolve("t_thumb").scale == 1


def test_unknown_transformation(service):
    with pytest.raises(UnknownTransformationError) as excinfo:
        service.resolve("t_missing")
    assert excinfo.value.value == "missing"
    assert isinstance(excinfo.value, ParameterError)


def test_invalid_explicit_parameters(service):
    with pytest.raises(InvalidEnumError):
        service.resolve("c_z")


def test_register_validates_eagerly(service):
    with pytest.raises(InvalidEnumError):
        service.register("bad", "g_up")
    assert "bad" not in service


def test_register_rejects_unreachable_names(service):
    with pytest.raises(ParameterError) as excinfo:
        service.register("two words", "w_1")
    assert excinfo.value.key == "t"
    assert excinfo.value.value == "two words"
    assert "two words" not in service


def test_register_and_names(service):
    params = service.register("banner", "w_1200,h_300")
    assert params == ParameterSet(width=1200, height=300)
    assert service.names() == ["banner", "thumb"]
    assert "banner" in service
    assert len(service) == 2


def test_register_replaces_existing(service):
    service.register("thumb", "w_64,h_64")
    assert service.resolve("t_thumb") == ParameterSet(width=64, height=64)


def test_presets_from_settings(settings_file):
    service = TransformationService(ConfigService(str(settings_file)))
    assert service.names() == ["gray-banner", "thumb"]
    params = service.resolve("t_gray-banner")
    assert params == ParameterSet(width=1200, height=300, filter=ImageFilter.GRAYSCALE, scale=2)


def test_default_scale_applies_to_explicit_parameters(settings_file):
    service = TransformationService(ConfigService(str(settings_file)))
    assert service.resolve("w_5").scale == 2
    assert service.resolve("w_5", scale=1).scale == 1


@pytest.mark.parametrize("default_scale, error", [
    (0, OutOfRangeError),
    (-2, OutOfRangeError),
    ("2", InvalidNumberError),
    (2.5, InvalidNumberError),
])
def test_invalid_default_scale_fails_at_startup(tmp_path, default_scale, error):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"default_scale": default_scale}), encoding="utf-8")
    config = ConfigService(str(path))
    with pytest.raises(error):
        TransformationService(config)


def test_cache_path(service):
    path = service.cache_path("a/b.png", "t_thumb")
    assert path == "a/b--c_p,g_c,h_200,w_200,f_none,s_1--.png"


def test_cache_paths(service):
    paths = service.cache_paths("x.jpg", ["t_thumb", "w_10"], scale=2)
    assert paths == {
        "t_thumb": "x--c_p,g_c,h_200,w_200,f_none,s_2--.jpg",
        "w_10": "x--c_e,g_nw,h_0,w_10,f_none,s_2--.jpg",
    }


def test_concurrent_resolve(service):
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = set(pool.map(service.resolve, ["t_thumb"] * 50 + ["w_200,h_200,c_p,g_c"] * 50))
    assert len(results) == 1
