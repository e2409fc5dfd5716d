"""Configuration management for Fluorine."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from fluorine.config.paths import default_config_path
from fluorine.platform.filesystem import safe_write_text
from fluorine.platform.logging import logger


class ConfigError(Exception):
    """Raised when the configuration file is unreadable or holds invalid values."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "log_file": (Path, type(None)),
    "style_name": (str, type(None)),
    "migrate_legacy_data": (bool,),
}


@dataclass
class Config:
    """Application configuration."""

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    # File name of the selected stylesheet, e.g. "Night Eyes.qss"
    style_name: str | None = None

    # Move ~/.local/share/fluorine into the data directory on start-up
    migrate_legacy_data: bool = True

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and check field types.

        Raises:
            ConfigError: If a value has the wrong type, e.g. ``log_file = 5``.
        """

        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("path", False) and isinstance(value, str):
                value = Path(value) if value.strip() else None
                setattr(self, f.name, value)

            expected = _FIELD_TYPES[f.name]
            if not isinstance(value, expected):
                names = " or ".join("none" if t is type(None) else t.__name__ for t in expected)
                raise ConfigError(f"Invalid value for {f.name}: {value!r} (expected {names})")

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Target file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            safe_write_text(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# Fluorine Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "~/.var/app/com.fluorine.manager/logs/fluorine.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Stylesheet file name (optional)")
        if config["style_name"]:
            lines.append(f"style_name = {self._format_toml_value(config['style_name'])}")
        lines.append("")

        lines.append("# Move ~/.local/share/fluorine into the data directory (default true)")
        lines.append(
            f"migrate_legacy_data = {self._format_toml_value(config['migrate_legacy_data'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written.

        Args:
            path: Config file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but is not valid TOML or holds
                unknown keys.
        """
        config_file = path or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Failed to load configuration from {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                msg = f"Unknown configuration keys in {config_file}: {', '.join(unknown)}"
                logger.error(msg)
                raise ConfigError(msg)

            try:
                instance = cls(**config_dict)
            except ConfigError as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise
            logger.info("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next ``load`` reads the file again."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigError"]
