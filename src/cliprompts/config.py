"""Configuration with file and environment overrides."""

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger("cliprompts.config")

# Module-level cache for singleton pattern
_config_cache: "Config | None" = None

UNICODE_MODES = ("auto", "always", "never")


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing or config reload."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting CLIPROMPTS_CONFIG_DIR env var."""
    config_dir = os.environ.get("CLIPROMPTS_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "cliprompts"


class ConfigMeta:
    """Schema definition - separate from runtime state."""

    SETTINGS: dict[str, str] = {
        "unicode": "Glyph set (auto|always|never)",
        "color": "Colorize prompt symbols and messages",
        "spinner_interval_ms": "Delay between spinner frames in milliseconds",
        "confirm_message": "Question shown by an empty confirm prompt",
    }


class Config:
    """Runtime configuration with env override support."""

    DEFAULTS: dict[str, Any] = {
        "unicode": "auto",
        "color": True,
        "spinner_interval_ms": 500,
        "confirm_message": "Are you sure?",
    }

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Factory method - explicit loading with caching."""
        global _config_cache

        if _config_cache is not None and config_dir is None:
            return _config_cache

        config = cls(config_dir)
        config._load_from_file()
        config._apply_env_overrides()

        if config_dir is None:
            _config_cache = config

        return config

    def __getattr__(self, name: str) -> Any:
        """Access config values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Config has no attribute '{name}'")

    @property
    def unicode_mode(self) -> str:
        """Validated unicode mode; unknown values fall back to auto."""
        mode = str(self.unicode).lower()
        return mode if mode in UNICODE_MODES else "auto"

    @property
    def spinner_interval(self) -> float:
        """Spinner frame delay in seconds, at least 1ms."""
        return max(1, int(self.spinner_interval_ms)) / 1000

    def items(self) -> list[tuple[str, Any]]:
        """Return (key, effective value) for every known setting."""
        return [(key, getattr(self, key)) for key in self.DEFAULTS]

    def set(self, key: str, value: Any) -> None:
        """Set value and persist."""
        self._data[key] = value
        self._save()

    def _load_from_file(self) -> None:
        if self._config_file.exists():
            try:
                content = self._config_file.read_text()
                if content.strip():
                    self._data = json.loads(content)
            except json.JSONDecodeError:
                logger.warning("Ignoring corrupted config file %s", self._config_file)
                self._data = {}

    def _save(self) -> None:
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(json.dumps(self._data, indent=2))

    def _apply_env_overrides(self) -> None:
        """Apply CLIPROMPTS_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"CLIPROMPTS_{key.upper()}"
            if env_key in os.environ:
                self._data[key] = self._coerce(os.environ[env_key], type(default))

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string env value to target type."""
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        if target_type is int:
            return int(value)
        return value
