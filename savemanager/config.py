"""JSON configuration files kept per console in the backup folder."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path

from savemanager.metadata import Metadata

DEFAULT_LANGUAGE = 1


class ConfigError(Exception):
    """A configuration file could not be created, read or decoded."""


class BaseConfig(ABC):
    """A named JSON configuration file inside a configuration folder."""

    def __init__(self, name: str, cfg_path: str | Path, serial_id: str | None = None) -> None:
        self.name = name
        self.cfg_path = Path(cfg_path)
        serial = Metadata.this_console_serial_id if serial_id is None else serial_id
        self.cfg_file = self.cfg_path / f"savemii-{serial}-{name}.json"
        self.initialized = False

    def init(self) -> None:
        """Make sure the folder exists and create a default file if missing."""
        if not self.cfg_path.exists():
            try:
                self.cfg_path.mkdir(parents=True)
            except OSError as exc:
                self.initialized = False
                raise ConfigError(
                    f"Error while creating folder: {self.cfg_path}: {exc.strerror}"
                ) from exc
        elif not self.cfg_path.is_dir():
            self.initialized = False
            raise ConfigError(f"Critical - Path is not a directory: {self.cfg_path}")
        if not self.cfg_file.is_file():
            self.save()
        self.initialized = True

    def save(self) -> None:
        """Write the current settings to the file."""
        text = self.to_json()
        try:
            self.cfg_file.write_bytes(text.encode("utf-8"))
        except OSError as exc:
            raise ConfigError(
                f"Cannot open file for write: {self.cfg_file}: {exc.strerror}"
            ) from exc

    def read(self) -> None:
        """Load settings from the file."""
        if not self.initialized:
            raise ConfigError(f"cfgPath was not initialized and cannot be used: {self.cfg_path}")
        try:
            text = self.cfg_file.read_bytes().decode("utf-8")
        except OSError as exc:
            raise ConfigError(
                f"Cannot open file for read: {self.cfg_file}: {exc.strerror}"
            ) from exc
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Error decoding JSON file {self.cfg_file}: {exc}") from exc
        self.parse_json(text)

    def _decode(self, text: str):
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(
                f"Error decoding JSON file {self.cfg_file} in line {exc.lineno}: {exc.msg}"
            ) from exc

    @abstractmethod
    def to_json(self) -> str:
        """Serialise the settings."""

    @abstractmethod
    def parse_json(self, text: str) -> None:
        """Load settings from serialised text."""


class GlobalConfig(BaseConfig):
    """Application-wide settings."""

    def __init__(
        self,
        cfg_path: str | Path,
        serial_id: str | None = None,
        language: int = DEFAULT_LANGUAGE,
        name: str = "cfg",
    ) -> None:
        super().__init__(name, cfg_path, serial_id)
        self.language = language
        self.always_apply_excludes = False
        self.ask_for_backup_dir_conversion = True
        self.dont_allow_undefined_profiles = True

    def to_json(self) -> str:
        return json.dumps(
            {
                "language": self.language,
                "alwaysApplyExcludes": self.always_apply_excludes,
                "askForBackupDirConversion": self.ask_for_backup_dir_conversion,
                "dontAllowUndefinedProfiles": self.dont_allow_undefined_profiles,
            },
            ensure_ascii=False,
        )

    def parse_json(self, text: str) -> None:
        root = self._decode(text)
        if not isinstance(root, dict):
            return
        language = root.get("language")
        if isinstance(language, int) and not isinstance(language, bool):
            self.language = language
        for key, attr in (
            ("alwaysApplyExcludes", "always_apply_excludes"),
            ("askForBackupDirConversion", "ask_for_backup_dir_conversion"),
            ("dontAllowUndefinedProfiles", "dont_allow_undefined_profiles"),
        ):
            value = root.get(key)
            if isinstance(value, bool):
                setattr(self, attr, value)