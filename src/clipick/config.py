"""Picker settings from ~/.config/clipick/config.json, overridable by CLIPICK_* env vars."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from clipick.models import PickerPadding

logger = logging.getLogger("clipick.config")

ENV_PREFIX = "CLIPICK_"

_config_cache: "Config | None" = None


def clear_config_cache() -> None:
    """Forget the cached default config so the next load re-reads disk and env."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting CLIPICK_CONFIG_DIR env var."""
    config_dir = os.environ.get(f"{ENV_PREFIX}CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "clipick"


class ConfigMeta:
    """Names and help text shown by `clipick config`."""

    TOGGLES: dict[str, str] = {
        "new_screen": "Draw pickers on the alternate screen buffer",
        "show_results": "Print a summary after a selection finishes",
    }

    SETTINGS: dict[str, str] = {
        "top_padding": "Lines reserved above the list (min 2)",
        "bottom_padding": "Lines reserved below the list",
        "permission_retries": "Empty answers tolerated by yes/no prompts",
        "input_retries": "Empty answers tolerated by text prompts",
    }


def _coerce(raw: str, default: Any) -> Any:
    """Parse a text value into the type of the setting's default."""
    if isinstance(default, bool):
        return raw.strip().lower() in ("true", "1", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    return raw


def _padding_from(values: dict[str, Any]) -> PickerPadding:
    return PickerPadding(top=int(values["top_padding"]), bottom=int(values["bottom_padding"]))


class Config:
    """Effective settings: defaults, then the config file, then env vars."""

    DEFAULTS: dict[str, Any] = {
        "new_screen": True,
        "show_results": True,
        "top_padding": 4,
        "bottom_padding": 2,
        "permission_retries": 2,
        "input_retries": 2,
    }

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or get_default_config_dir()
        self.config_file = self.config_dir / "config.json"
        # What the file holds; env overrides never get written back.
        self._stored: dict[str, Any] = {}
        self._values: dict[str, Any] = dict(self.DEFAULTS)

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Read file and env. Only the default directory is cached."""
        global _config_cache

        if config_dir is None and _config_cache is not None:
            return _config_cache

        config = cls(config_dir)
        config._stored = config._read_file()
        config._values.update(config._stored)
        for key, default in cls.DEFAULTS.items():
            raw = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
            if raw is not None:
                config._values[key] = _coerce(raw, default)

        if config_dir is None:
            _config_cache = config
        return config

    def get(self, key: str) -> Any:
        return self._values[key]

    @property
    def new_screen(self) -> bool:
        return bool(self._values["new_screen"])

    @property
    def show_results(self) -> bool:
        return bool(self._values["show_results"])

    @property
    def top_padding(self) -> int:
        return int(self._values["top_padding"])

    @property
    def bottom_padding(self) -> int:
        return int(self._values["bottom_padding"])

    @property
    def permission_retries(self) -> int:
        return int(self._values["permission_retries"])

    @property
    def input_retries(self) -> int:
        return int(self._values["input_retries"])

    @property
    def padding(self) -> PickerPadding:
        """Validated list padding. Raises ValueError on bad values."""
        return _padding_from(self._values)

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Return (name, description, enabled) for display."""
        return [(name, desc, bool(self.get(name))) for name, desc in ConfigMeta.TOGGLES.items()]

    def get_settings(self) -> list[tuple[str, str, Any]]:
        """Return (name, description, value) for display."""
        return [(name, desc, self.get(name)) for name, desc in ConfigMeta.SETTINGS.items()]

    def set(self, key: str, value: Any) -> None:
        """Validate one setting and write it to the config file.

        Text values are parsed the same way as env vars. Raises KeyError for
        unknown names and ValueError for values the pickers can't use, in
        which case nothing is written.
        """
        if key not in self.DEFAULTS:
            raise KeyError(key)
        if isinstance(value, str):
            value = _coerce(value, self.DEFAULTS[key])
        if key in ("permission_retries", "input_retries") and value < 0:
            raise ValueError(f"{key} must not be negative, got {value}")
        _padding_from({**self._values, key: value})

        self._values[key] = value
        self._stored[key] = value
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(json.dumps(self._stored, indent=2))
        logger.debug("Saved %s=%r to %s", key, value, self.config_file)

    def _read_file(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return {}
        content = self.config_file.read_text()
        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupted config file %s", self.config_file)
            return {}
        return {key: value for key, value in data.items() if key in self.DEFAULTS}
