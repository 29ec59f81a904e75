"""Tests for configuration system."""

import pytest
from pydantic import ValidationError

from posetransfer.config import AppConfig, EditorSettings, GeminiSettings, ProxySettings, load_config


def test_gemini_settings_defaults():
    s = GeminiSettings()
    assert s.model == "gemini-2.5-flash-image-preview"
    assert s.generate_url == (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        "gemini-2.5-flash-image-preview:generateContent"
    )


def test_proxy_settings_defaults():
    s = ProxySettings()
    assert s.base_url == "http://localhost:3001"


def test_proxy_settings_ssl():
    assert ProxySettings(use_ssl=True, host="poses.example").base_url == "https://poses.example:3001"


def test_editor_defaults():
    e = EditorSettings()
    assert e.joint_radius == 8.0
    assert e.hit_tolerance == 5.0
    assert e.default_size == "512x768"


def test_app_config_defaults(isolated_home):
    config = AppConfig()
    assert config.active_backend == "gemini"
    assert config.config_dir == isolated_home / ".posetransfer"
    assert config.output_dir.parent.name == ".posetransfer"


def test_env_override(monkeypatch):
    monkeypatch.setenv("POSETRANSFER_ACTIVE_BACKEND", "mock")
    monkeypatch.setenv("POSETRANSFER_PROXY__PORT", "4000")
    config = AppConfig()
    assert config.active_backend == "mock"
    assert config.proxy.port == 4000


def test_unknown_backend_rejected():
    with pytest.raises(ValidationError):
        AppConfig(active_backend="comfyui")


def test_toml_file(isolated_home):
    config_dir = isolated_home / ".posetransfer"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text('active_backend = "proxy"\n\n[proxy]\nhost = "10.0.0.2"\n')
    config = AppConfig()
    assert config.active_backend == "proxy"
    assert config.proxy.base_url == "http://10.0.0.2:3001"


def test_load_config_creates_dirs(isolated_home):
    config = load_config()
    assert config.config_dir.is_dir()
    assert config.output_dir.is_dir()


@pytest.mark.parametrize("bad", [0, -1, 65536, 100000])
def test_proxy_port_rejected(bad: int) -> None:
    with pytest.raises(ValidationError):
        ProxySettings(port=bad)


@pytest.mark.parametrize("good", [1, 3001, 443, 65535])
def test_proxy_port_accepted(good: int) -> None:
    assert ProxySettings(port=good).port == good


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        GeminiSettings(timeout=0)
