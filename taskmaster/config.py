"""Configuration for the task tracker, stored as YAML."""

from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger()

CONFIG_DIR_NAME = ".taskmaster"
CONFIG_FILE_NAME = "config.yaml"

DEFAULTS: dict[str, str] = {
    "data_file": f"{CONFIG_DIR_NAME}/data.yaml",
}


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config", config_file=str(path), error=str(e))
        raise ValueError(f"Failed to load config from {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Failed to load config from {path}: expected a mapping")
    return data


class Config:
    """Local and global configuration.

    The local file lives in ``.taskmaster/config.yaml`` under the working
    directory, the global one in ``~/.taskmaster/config.yaml``. A local
    config reads through to the global file and then to ``DEFAULTS``; a
    global config only falls back to ``DEFAULTS``. Writes always go to the
    file this instance was opened on.
    """

    def __init__(self, use_global: bool = False, config_dir: Path | None = None) -> None:
        self.is_global = use_global
        if config_dir is not None:
            self.config_dir = Path(config_dir)
        elif use_global:
            self.config_dir = Path.home() / CONFIG_DIR_NAME
        else:
            self.config_dir = Path.cwd() / CONFIG_DIR_NAME
        self.config_file = self.config_dir / CONFIG_FILE_NAME

        self._config = _read_yaml(self.config_file)
        self._fallback: dict[str, Any] = {}
        if not self.is_global:
            try:
                self._fallback = _read_yaml(Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME)
            except ValueError as e:
                logger.warning("Ignoring unreadable global config", error=str(e))

        logger.debug("Config initialized", config_file=str(self.config_file), is_global=self.is_global)

    def _save(self) -> None:
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                yaml.safe_dump(self._config, f, default_flow_style=False, sort_keys=False)
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to save config", config_file=str(self.config_file), error=str(e))
            raise ValueError(f"Failed to save config to {self.config_file}: {e}") from e
        logger.debug("Config saved", config_file=str(self.config_file))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Look a key up in this file, then the global file, then the defaults."""
        for source in (self._config, self._fallback, DEFAULTS):
            if key in source:
                return source[key]
        return default

    def set(self, key: str, value: str) -> None:
        logger.debug("Setting config value", key=key)
        self._config[key] = value
        self._save()

    def unset(self, key: str) -> None:
        logger.debug("Unsetting config value", key=key)
        if self._config.pop(key, None) is not None:
            self._save()

    def source(self, key: str) -> str:
        """Name the scope a key's effective value comes from."""
        if key in self._config:
            return "global" if self.is_global else "local"
        if key in self._fallback:
            return "global"
        return "default"

    def list(self) -> dict[str, str]:
        """Return the explicitly set values, local overriding global."""
        merged = dict(self._fallback)
        merged.update(self._config)
        return merged

    def data_file(self) -> Path:
        """Return the snapshot file path, relative paths resolved against the working directory."""
        path = Path(self.get("data_file") or DEFAULTS["data_file"]).expanduser()
        return path if path.is_absolute() else Path.cwd() / path


def get_config(use_global: bool = False) -> Config:
    return Config(use_global=use_global)
