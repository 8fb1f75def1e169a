"""The batch backup menu: back up everything, or pick Wii U or vWii titles."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from savemanager.titles import Title


class BackupChoice(IntEnum):
    """Entries of the batch backup menu, in display order."""

    ALL = 0
    WIIU = 1
    VWII = 2


def _count_label(template: str, count: int) -> str:
    return template.format(count=count, plural="s" if count > 1 else "")


class BatchBackupMenu:
    """Cursor over the batch backup choices for a set of Wii U and vWii titles."""

    ENTRY_COUNT = len(BackupChoice)

    def __init__(
        self,
        wiiu_titles: Sequence[Title],
        wii_titles: Sequence[Title],
        cursor: int = 0,
    ) -> None:
        self.wiiu_titles = wiiu_titles
        self.wii_titles = wii_titles
        self.cursor = min(max(cursor, 0), self.ENTRY_COUNT - 1)

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_down(self) -> None:
        if self.cursor < self.ENTRY_COUNT - 1:
            self.cursor += 1

    def labels(self) -> list[str]:
        """Menu lines with the number of titles each choice covers."""
        wiiu = len(self.wiiu_titles)
        wii = len(self.wii_titles)
        return [
            _count_label("Backup All ({count} Title{plural})", wiiu + wii),
            _count_label("Backup Wii U ({count} Title{plural})", wiiu),
            _count_label("Backup vWii ({count} Title{plural})", wii),
        ]

    def shows_excludes_reminder(self, always_apply_excludes: bool) -> bool:
        """Whether the excludes reminder applies to the highlighted choice."""
        return always_apply_excludes and self.cursor > BackupChoice.ALL

    def select(self) -> BackupChoice:
        """The choice under the cursor."""
        return BackupChoice(self.cursor)