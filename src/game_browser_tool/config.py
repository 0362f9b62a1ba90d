"""Configuration models for the game browser tool."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import ServerVariant


class BrowserConfig(BaseModel):
    """Settings for launching the browser session."""

    profile_name: str = Field(default="default", description="Per-account profile directory name.")
    cache_root: Path = Field(default=Path("data") / "cache")
    proxy_host: Optional[str] = None
    proxy_port: Optional[int] = None
    proxy_username: Optional[str] = None
    proxy_password: Optional[str] = None
    user_agent: Optional[str] = None
    headless: bool = False
    extensions: list[Path] = Field(default_factory=list)
    page_load_timeout: float = Field(default=60.0, description="Seconds allowed for a navigation request.")
    wait_timeout: float = Field(default=180.0, description="Ceiling (seconds) for condition waits.")
    poll_interval: float = Field(default=0.5, description="Seconds between condition polls.")

    def user_data_dir(self) -> Path:
        """Profile storage, isolated by proxy host so each proxy keeps its own cookies."""

        return self.cache_root / self.profile_name / (self.proxy_host or "default")

    def proxy_settings(self) -> Optional[dict[str, str]]:
        if not self.proxy_host:
            return None
        server = self.proxy_host
        if self.proxy_port:
            server = f"{server}:{self.proxy_port}"
        proxy = {"server": server}
        if self.proxy_username:
            proxy["username"] = self.proxy_username
            proxy["password"] = self.proxy_password or ""
        return proxy


class ServerConfig(BaseModel):
    """Game server the session talks to."""

    url: Optional[str] = None
    variant: ServerVariant = ServerVariant.TRAVIAN_OFFICIAL


class AppConfig(BaseSettings):
    """Top-level configuration for the command line tools."""

    model_config = SettingsConfigDict(
        env_prefix="GAME_BROWSER_TOOL_",
        env_file=(".env",),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


def load_config(
    path: Path | None = None,
    *,
    env_file: Path | None = None,
    **overrides: object,
) -> AppConfig:
    """Load configuration from an optional YAML file and overrides."""

    data: dict[str, Any] = {}
    if path:
        import yaml

        data = yaml.safe_load(path.read_text()) or {}
    if overrides:
        _deep_update(data, overrides)
    settings_kwargs: dict[str, object] = {}
    if env_file is not None:
        settings_kwargs["_env_file"] = env_file
    config = AppConfig(**data, **settings_kwargs)
    if not data:
        return config

    merged = config.model_dump(mode="python")
    _deep_update(merged, data)
    return AppConfig.model_validate(merged)


def _deep_update(target: dict[str, Any], updates: Mapping[str, Any]) -> None:
    """Recursively merge ``updates`` into ``target`` in-place."""

    for key, value in updates.items():
        if (
            isinstance(value, Mapping)
            and isinstance(existing := target.get(key), Mapping)
        ):
            nested: dict[str, Any]
            if isinstance(existing, dict):
                nested = existing
            else:
                nested = dict(existing)
            _deep_update(nested, value)
            target[key] = nested
        else:
            target[key] = value
