from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from woc_client.config_types import PROFILE_CURRENT, PROFILES, normalize_network

APP_NAME = "woc"
CONFIG_FILENAME = "config.toml"
ENV_NETWORK = "WOC_NETWORK"
ENV_API_KEY = "WOC_API_KEY"


@dataclass
class AppConfig:
    network: str = "main"
    api_key: str = ""
    user_agent: str = ""
    timeout_ms: int = 30000
    enable_cache: bool = True
    profile: str = PROFILE_CURRENT


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        "network": cfg.network,
        "timeout_ms": cfg.timeout_ms,
        "enable_cache": cfg.enable_cache,
        "profile": cfg.profile,
    }
    # empty strings mean "not configured"
    if cfg.api_key:
        data["api_key"] = cfg.api_key
    if cfg.user_agent:
        data["user_agent"] = cfg.user_agent
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    cfg.network = normalize_network(str(data.get("network") or cfg.network))
    cfg.api_key = str(data.get("api_key") or "").strip()
    cfg.user_agent = str(data.get("user_agent") or "").strip()

    timeout_raw = data.get("timeout_ms")
    if timeout_raw is not None:
        try:
            timeout_ms = int(timeout_raw)
        except (TypeError, ValueError):
            timeout_ms = 0
        if timeout_ms > 0:
            cfg.timeout_ms = timeout_ms

    enable_cache = data.get("enable_cache")
    if isinstance(enable_cache, bool):
        cfg.enable_cache = enable_cache

    profile = str(data.get("profile") or "").strip().lower()
    if profile in PROFILES:
        cfg.profile = profile
    return cfg


def apply_env(cfg: AppConfig) -> AppConfig:
    network = os.getenv(ENV_NETWORK, "").strip()
    if network:
        cfg.network = normalize_network(network)
    api_key = os.getenv(ENV_API_KEY, "").strip()
    if api_key:
        cfg.api_key = api_key
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        cfg = from_toml(data)
    except FileNotFoundError:
        cfg = default_config()
    return apply_env(cfg)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
