"""Project configuration loaded from .m2json/config.yaml."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = ".m2json"
CONFIG_FILE = "config.yaml"


@dataclass
class Settings:
    """Defaults for the conversion commands.

    Paths are stored resolved against the project root, i.e. the directory
    holding ``.m2json/``.
    """

    indent: int = 2
    applies: Path | None = None
    apply_names: Path | None = None
    output_dir: Path | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], root: Path) -> Settings:
        """Create settings from a parsed YAML mapping."""

        def _path(key: str) -> Path | None:
            value = data.get(key)
            if not value:
                return None
            path = Path(str(value)).expanduser()
            return path if path.is_absolute() else root / path

        indent = data.get("indent", 2)
        return cls(
            indent=int(indent) if indent is not None else 2,
            applies=_path("applies"),
            apply_names=_path("apply_names"),
            output_dir=_path("output_dir"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "indent": self.indent,
            "applies": str(self.applies) if self.applies else None,
            "apply_names": str(self.apply_names) if self.apply_names else None,
            "output_dir": str(self.output_dir) if self.output_dir else None,
        }


def default_config_path(project_root: Path | str = ".") -> Path:
    """Location of the project configuration file."""
    return Path(project_root) / CONFIG_DIR / CONFIG_FILE


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML, falling back to defaults.

    Args:
        config_path: Explicit configuration file. Defaults to
            ``.m2json/config.yaml`` in the current directory.

    Returns:
        Settings. A missing file yields defaults; an unreadable or malformed
        file is logged and also yields defaults.
    """
    path = Path(config_path) if config_path else default_config_path()
    if not path.exists():
        return Settings()

    root = path.parent.parent if path.parent.name == CONFIG_DIR else path.parent

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError("top level must be a mapping")
        settings = Settings.from_dict(data, root)
    except (yaml.YAMLError, OSError, ValueError, TypeError) as e:
        logger.warning("Could not load configuration from %s: %s", path, e)
        return Settings()

    logger.debug("Loaded configuration from %s", path)
    return settings


def save_settings(settings: Settings, config_path: Path | str | None = None) -> Path:
    """Write settings to YAML and return the file path."""
    path = Path(config_path) if config_path else default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {key: value for key, value in settings.to_dict().items() if value is not None}
    path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False), encoding="utf-8")
    return path
