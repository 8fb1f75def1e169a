"""Backup metadata stored as a small JSON file next to the save data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import ClassVar

METADATA_FILE_NAME = "savemiiMeta.json"
UNKNOWN_SERIAL_ID = "_WIIU_"


class Metadata:
    """Date, storage, console serial and tag of one backup."""

    this_console_serial_id: ClassVar[str] = UNKNOWN_SERIAL_ID

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.date = ""
        self.storage = ""
        self.serial_id = UNKNOWN_SERIAL_ID
        self.tag = ""

    @classmethod
    def in_directory(cls, directory: str | Path) -> "Metadata":
        """Metadata kept in the standard file inside a backup directory."""
        return cls(Path(directory) / METADATA_FILE_NAME)

    def read(self) -> bool:
        """Load fields from the file; False if it is missing or not JSON."""
        if not self.path.is_file():
            return False
        try:
            root = json.loads(self.path.read_bytes().decode("utf-8"))
        except (OSError, UnicodeDecodeError, ValueError):
            return False
        if isinstance(root, dict):
            for key, attr in (
                ("Date", "date"),
                ("storage", "storage"),
                ("serialId", "serial_id"),
                ("tag", "tag"),
            ):
                value = root.get(key)
                if isinstance(value, str):
                    setattr(self, attr, value)
        return True

    def _format(self) -> str:
        message = self.date
        if self.storage:
            message += ", from " + self.storage
        return message + " | " + self.serial_id

    def describe(self) -> str:
        """Re-read the file and return a one-line summary, or "" if unreadable."""
        return self._format() if self.read() else ""

    def simple_format(self) -> str:
        """Summary of the fields already loaded, or "" when there is no date."""
        return self._format() if self.date else ""

    def set(self, date: str, is_usb: bool) -> None:
        """Record a fresh backup made on this console and write it out."""
        self.date = date
        self.storage = "USB" if is_usb else "NAND"
        self.serial_id = type(self).this_console_serial_id
        self.write()

    def write(self) -> None:
        """Write the fields to the file, raising OSError on failure."""
        document = {
            "Date": self.date,
            "serialId": self.serial_id,
            "storage": self.storage,
            "tag": self.tag,
        }
        self.path.write_bytes(json.dumps(document, ensure_ascii=False).encode("utf-8"))