"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/config.py
Version:        1.0.0
Description:    Manages application configuration using QSettings. Standardizes
                paths for configuration, data and exports across platforms
                (XDG standards on Linux).
------------------------------------------------------------------------------
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from PyQt6.QtCore import QSettings, QStandardPaths

from vietdoc.fonts import DEFAULT_SIGNATURE_FAMILIES


class AppConfig:
    """
    Manages application configuration using QSettings.
    Singleton-like usage via class methods or single instance.
    """

    KEY_EXPORT_DIR: str = "export_dir"
    KEY_DEFAULT_FORMAT: str = "default_format_id"
    KEY_CAPTURE_SCALE: str = "capture_scale"
    KEY_SIGNATURE_FONT: str = "signature_font"
    KEY_FONTS_DIR: str = "fonts_dir"
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"
    KEY_LOG_FILE: str = "log_file"

    DEFAULT_FORMAT_ID: int = 1
    DEFAULT_CAPTURE_SCALE: float = 2.0

    APP_ID: str = "vietdoc"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, all paths and settings are isolated (e.g. vietdoc-dev).
        """
        # If no profile provided, use the last active one
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_config_dir(self) -> Path:
        """
        Returns the path to the application configuration directory.
        Forces a flat structure: ~/.config/vietdoc[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
        config_dir = Path(base_path) / self.active_id
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/vietdoc[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Helper to retrieve a setting value from a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            default: The default value if not found.

        Returns:
            The retrieved value or default.
        """
        if group:
            self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        if group:
            self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Helper to save a setting value into a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            value: The value to save.
        """
        if isinstance(value, str):
            value = value.strip()

        if group:
            self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        if group:
            self.settings.endGroup()

    # --- Export ---

    def get_export_dir(self) -> Path:
        """
        Retrieves the directory exported files are written to.
        Defaults to the user's documents folder.
        """
        default = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.DocumentsLocation)
        return Path(str(self._get_setting("Export", self.KEY_EXPORT_DIR, default or str(Path.home()))))

    def set_export_dir(self, path: str) -> None:
        self._set_setting("Export", self.KEY_EXPORT_DIR, str(path))

    def get_capture_scale(self) -> float:
        """Supersampling factor for captures."""
        raw = self._get_setting("Export", self.KEY_CAPTURE_SCALE, self.DEFAULT_CAPTURE_SCALE)
        try:
            scale = float(raw)
        except (TypeError, ValueError):
            return self.DEFAULT_CAPTURE_SCALE
        return scale if scale > 0 else self.DEFAULT_CAPTURE_SCALE

    def set_capture_scale(self, scale: float) -> None:
        self._set_setting("Export", self.KEY_CAPTURE_SCALE, float(scale))

    # --- Rendering ---

    def get_default_format_id(self) -> int:
        """Format id applied to new sessions."""
        raw = self._get_setting("Render", self.KEY_DEFAULT_FORMAT, self.DEFAULT_FORMAT_ID)
        try:
            return int(raw)
        except (TypeError, ValueError):
            return self.DEFAULT_FORMAT_ID

    def set_default_format_id(self, format_id: int) -> None:
        self._set_setting("Render", self.KEY_DEFAULT_FORMAT, int(format_id))

    def get_signature_font(self) -> str:
        """Font family used for the handwritten signature glyph."""
        return str(self._get_setting("Render", self.KEY_SIGNATURE_FONT, DEFAULT_SIGNATURE_FAMILIES[0]))

    def set_signature_font(self, family: str) -> None:
        self._set_setting("Render", self.KEY_SIGNATURE_FONT, family)

    def get_signature_families(self) -> tuple:
        """Configured signature family followed by the built-in fallbacks."""
        preferred = self.get_signature_font()
        return (preferred,) + tuple(f for f in DEFAULT_SIGNATURE_FAMILIES if f != preferred)

    def get_fonts_dir(self) -> Path:
        """
        Directory scanned for extra .ttf/.otf files.
        Located within the data folder: ~/.local/share/vietdoc/fonts/
        """
        default = str(self.get_data_dir() / "fonts")
        return Path(str(self._get_setting("Render", self.KEY_FONTS_DIR, default)))

    def set_fonts_dir(self, path: str) -> None:
        self._set_setting("Render", self.KEY_FONTS_DIR, str(path))

    # --- Logging ---

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, "WARNING"))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> Dict[str, str]:
        """Retrieves a dictionary of component-specific log levels."""
        raw = str(self._get_setting("Logging", self.KEY_LOG_COMPONENTS, "{}"))
        try:
            components = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return components if isinstance(components, dict) else {}

    def set_log_components(self, components: Dict[str, str]) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """
        Returns the absolute path to the log file.
        Defaults to app.log in the data folder.
        """
        raw = self._get_setting("Logging", self.KEY_LOG_FILE, "")
        if raw:
            return Path(str(raw)).expanduser()
        return self.get_data_dir() / "app.log"

    def set_log_file_path(self, path: str) -> None:
        """Saves a custom log file location; an empty value restores the default."""
        self._set_setting("Logging", self.KEY_LOG_FILE, str(path))
