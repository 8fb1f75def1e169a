"""Per-console list of titles excluded from batch backups."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from savemanager.config import BaseConfig, ConfigError
from savemanager.titles import Title, str2uint


@dataclass(frozen=True)
class TitleKey:
    """Identifies a title installation: its ids and whether it lives on USB."""

    high_id: int
    low_id: int
    is_title_on_usb: bool

    def __str__(self) -> str:
        storage = "USB " if self.is_title_on_usb else "NAND"
        return f"{self.high_id:08x}-{self.low_id:08x}-{storage}"


class ExcludesConfig(BaseConfig):
    """Titles left out of batch backups, stored under the config's name."""

    def __init__(
        self,
        name: str,
        titles: Sequence[Title],
        cfg_path: str | Path,
        serial_id: str | None = None,
    ) -> None:
        super().__init__(name, cfg_path, serial_id)
        self.titles = titles
        self.titles_id: list[TitleKey] = []

    def get_config(self) -> None:
        """Collect every title not currently selected for backup."""
        self.titles_id = [
            TitleKey(title.high_id, title.low_id, title.is_title_on_usb)
            for title in self.titles
            if not title.current_data_source.selected_for_backup
        ]

    def apply_config(self) -> None:
        """Deselect, for backup, the first title matching each excluded key."""
        for key in self.titles_id:
            for title in self.titles:
                if (
                    title.low_id == key.low_id
                    and title.high_id == key.high_id
                    and title.is_title_on_usb == key.is_title_on_usb
                ):
                    title.current_data_source.selected_for_backup = False
                    break

    def to_json(self) -> str:
        entries = [
            {"h": f"{key.high_id:08x}", "l": f"{key.low_id:08x}", "u": key.is_title_on_usb}
            for key in self.titles_id
        ]
        return json.dumps({self.name: entries}, indent=2, ensure_ascii=False)

    def parse_json(self, text: str) -> None:
        """Load excluded titles; valid entries are kept even when others fail."""
        self.titles_id = []
        root = self._decode(text)
        excludes = root.get(self.name) if isinstance(root, dict) else None
        if excludes is None:
            raise ConfigError(f"Error: unexpected format ({self.name} not an array)")
        if not isinstance(excludes, list):
            return

        bad: list[str] = []
        for index, element in enumerate(excludes):
            if not isinstance(element, dict):
                bad.append(f"dec_e:{index}")
                continue
            high, low, usb = element.get("h"), element.get("l"), element.get("u")
            if not isinstance(high, str) or not isinstance(low, str) or not isinstance(usb, bool):
                bad.append(f"el_e:{index}")
                continue
            try:
                key = TitleKey(str2uint(high[:8], 16), str2uint(low[:8], 16), usb)
            except (ValueError, OverflowError):
                bad.append(f"el_e:{index}")
                continue
            self.titles_id.append(key)

        if bad:
            raise ConfigError("Error parsing values in elements: " + " ".join(bad))