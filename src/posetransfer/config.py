"""Application configuration with pydantic-settings + TOML."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource


def _default_config_dir() -> Path:
    return Path.home() / ".posetransfer"


def _default_output_dir() -> Path:
    return _default_config_dir() / "output"


class GeminiSettings(BaseSettings):
    """Gemini image model configuration."""

    api_key: str = ""
    model: str = "gemini-2.5-flash-image-preview"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: float = Field(default=120.0, gt=0)

    @property
    def generate_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


class ProxySettings(BaseSettings):
    """Pass-through generation proxy configuration."""

    host: str = "localhost"
    port: int = Field(default=3001, ge=1, le=65535)
    use_ssl: bool = False
    timeout: float = Field(default=120.0, gt=0)

    @property
    def base_url(self) -> str:
        scheme = "https" if self.use_ssl else "http"
        return f"{scheme}://{self.host}:{self.port}"


class EditorSettings(BaseSettings):
    """Pose editor defaults."""

    joint_radius: float = Field(default=8.0, gt=0)
    hit_tolerance: float = Field(default=5.0, ge=0)
    default_size: str = "512x768"


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="POSETRANSFER_",
        env_nested_delimiter="__",
    )

    config_dir: Path = Field(default_factory=_default_config_dir)
    output_dir: Path = Field(default_factory=_default_output_dir)
    active_backend: Literal["gemini", "proxy", "mock"] = "gemini"
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    proxy: ProxySettings = Field(default_factory=ProxySettings)
    editor: EditorSettings = Field(default_factory=EditorSettings)

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        toml_path = _default_config_dir() / "config.toml"
        sources = (
            kwargs.get("init_settings"),
            kwargs.get("env_settings"),
        )
        if toml_path.exists():
            sources = (*sources, TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return (*sources, kwargs.get("dotenv_settings"), kwargs.get("file_secret_settings"))

    def ensure_dirs(self) -> None:
        """Create config and output directories if they don't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.output_dir.mkdir(parents=True, exist_ok=True)


def load_config() -> AppConfig:
    """Load application config, creating defaults if needed."""
    config = AppConfig()
    config.ensure_dirs()
    return config
