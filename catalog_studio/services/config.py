"""
Runtime settings, read from the environment and an optional .env file.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from catalog_studio.utils.errors import ConfigurationError
from catalog_studio.utils.logging import logger

ENV_PREFIX = "CATALOG_STUDIO_"


@dataclass
class Settings:
    """Catalog Studio configuration."""
    server_url: str = "http://127.0.0.1:8080"
    request_timeout: Optional[float] = 30.0
    notify_seconds: float = 3.0
    config_dir: Path = Path.home() / ".config" / "catalog-studio"
    preload_catalogs: bool = True
    icons_path: Optional[Path] = None


def _float(env: Mapping[str, str], name: str, default: Optional[float], allow_none: bool = False) -> Optional[float]:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    if allow_none and raw.strip().lower() == "none":
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be positive, got {raw!r}")
    return value


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings(env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[Path] = None) -> Settings:
    """Build settings from ``env`` (defaults to os.environ after loading .env)."""
    if env is None:
        load_dotenv(dotenv_path=dotenv_path)
        env = os.environ

    defaults = Settings()
    config_dir = env.get(ENV_PREFIX + "CONFIG_DIR")
    icons = env.get(ENV_PREFIX + "ICONS")
    settings = Settings(
        server_url=(env.get(ENV_PREFIX + "SERVER_URL") or defaults.server_url).rstrip("/"),
        request_timeout=_float(env, "TIMEOUT", defaults.request_timeout, allow_none=True),
        notify_seconds=_float(env, "NOTIFY_SECONDS", defaults.notify_seconds),
        config_dir=Path(config_dir).expanduser() if config_dir else defaults.config_dir,
        preload_catalogs=_bool(env, "PRELOAD", defaults.preload_catalogs),
        icons_path=Path(icons).expanduser() if icons else None,
    )
    logger.debug("settings loaded: server=%s timeout=%s", settings.server_url, settings.request_timeout)
    return settings
