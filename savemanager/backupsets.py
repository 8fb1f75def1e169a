"""Listing, sorting and filtering of batch backup sets."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping

from savemanager.metadata import Metadata

ROOT_BS = ">> Root <<"
WILDCARD = "*"
FILTER_FIELDS = ("year", "month", "serial_id", "tag")


@dataclass
class BackupSetItem:
    """One backup set directory and the metadata it was tagged with."""

    entry_path: str
    year: str = ""
    month: str = ""
    serial_id: str = ""
    tag: str = ""


@dataclass
class BackupSetView:
    """A row of the visible list; set_index points back into the full list."""

    entry_path: str
    serial_id: str
    tag: str
    set_index: int | None = None

    @classmethod
    def of(cls, item: BackupSetItem, set_index: int) -> "BackupSetView":
        return cls(item.entry_path, item.serial_id, item.tag, set_index)


class ValueRange:
    """A sorted set of filter values, always holding the wildcard, with a cursor."""

    def __init__(self, values: Iterable[str] = (), descending: bool = False) -> None:
        self.descending = descending
        self._values = sorted(set(values) | {WILDCARD}, reverse=descending)
        self._position = 0
        self.reset()

    @property
    def values(self) -> tuple[str, ...]:
        return tuple(self._values)

    def reset(self) -> None:
        """Put the cursor on the wildcard end of the range."""
        self._position = len(self._values) - 1 if self.descending else 0

    def current(self) -> str:
        return self._values[self._position]

    def right(self) -> None:
        """Advance the cursor, wrapping to the first value."""
        self._position = (self._position + 1) % len(self._values)

    def left(self) -> None:
        """Move the cursor back, wrapping to the last value."""
        if self._position == 0:
            self._position = len(self._values) - 1
        else:
            self._position -= 1


@dataclass
class FilterValues:
    """The values each metadata field can be filtered on."""

    year: ValueRange = field(default_factory=lambda: ValueRange(descending=True))
    month: ValueRange = field(default_factory=lambda: ValueRange(descending=True))
    serial_id: ValueRange = field(default_factory=ValueRange)
    tag: ValueRange = field(default_factory=ValueRange)

    def reset(self) -> None:
        """Return every field to the wildcard."""
        for name in FILTER_FIELDS:
            getattr(self, name).reset()


def _set_directories(root: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(root) as entries:
            found = [entry for entry in entries if entry.is_dir(follow_symlinks=False)]
    except OSError:
        return []
    return sorted(found, key=lambda entry: entry.name)


def _load_item(entry: os.DirEntry) -> BackupSetItem:
    metadata = Metadata.in_directory(entry.path)
    if not metadata.read():
        try:
            metadata.write()
        except OSError:
            pass
    date = metadata.date
    return BackupSetItem(
        entry_path=entry.name,
        year=date[:4],
        month=date[5:7] if len(date) > 6 else "",
        serial_id=metadata.serial_id,
        tag=metadata.tag,
    )


class BackupSetList:
    """All backup sets under a batch backup folder, plus a filtered, sorted view.

    Entry 0 of both the sets and the view is always the root pseudo-set.
    """

    def __init__(self, root: str | Path | None = None, ascending: bool = False) -> None:
        self.root = Path(root) if root is not None else None
        self.sort_ascending = ascending
        self.sets: list[BackupSetItem] = [BackupSetItem(ROOT_BS)]
        if self.root is not None:
            self.sets.extend(_load_item(entry) for entry in _set_directories(self.root))

        items = self.sets[1:]
        self.filter_values = FilterValues(
            year=ValueRange((i.year for i in items if i.year), descending=True),
            month=ValueRange((i.month for i in items if i.month), descending=True),
            serial_id=ValueRange(i.serial_id for i in items),
            tag=ValueRange(i.tag for i in items if i.tag),
        )
        self.view: list[BackupSetView] = [
            BackupSetView.of(item, index) for index, item in enumerate(self.sets)
        ]
        self.sort(ascending)

    @property
    def entries(self) -> int:
        return len(self.sets)

    @property
    def entries_view(self) -> int:
        return len(self.view)

    @property
    def filtered(self) -> bool:
        """True when the view does not show every set."""
        return self.entries_view != self.entries

    def sort(self, ascending: bool) -> None:
        """Sort the view by entry name, keeping the root entry first."""
        self.view[1:] = sorted(
            self.view[1:], key=lambda row: row.entry_path, reverse=not ascending
        )
        self.sort_ascending = ascending

    def _row(self, index: int) -> BackupSetView:
        if not 0 <= index < len(self.view):
            raise IndexError(f"backup set index out of range: {index}")
        return self.view[index]

    def at(self, index: int) -> str:
        return self._row(index).entry_path

    def serial_id_at(self, index: int) -> str:
        return self._row(index).serial_id

    def stretched_serial_id_at(self, index: int) -> str:
        """Serial id shortened to its first and last four characters if long."""
        serial = self.serial_id_at(index)
        return serial[:4] + ".." + serial[-4:] if len(serial) > 8 else serial

    def tag_at(self, index: int) -> str:
        return self._row(index).tag

    def add(self, entry_path: str, serial_id: str, tag: str) -> None:
        """Append a row to the view, resorting it when sorted descending."""
        self.view.append(BackupSetView(entry_path, serial_id, tag))
        if not self.sort_ascending:
            self.sort(False)

    def filter(self, criteria: Mapping[str, str] | None = None) -> None:
        """Rebuild the view from sets matching every criterion.

        criteria maps year, month, serial_id and tag to a value or the
        wildcard; missing fields match anything. Without criteria the
        current filter values are used. The result is in set order.
        """
        if criteria is None:
            wanted = {name: getattr(self.filter_values, name).current() for name in FILTER_FIELDS}
        else:
            wanted = {name: criteria.get(name, WILDCARD) for name in FILTER_FIELDS}
        self.view[1:] = [
            BackupSetView.of(item, index)
            for index, item in enumerate(self.sets[1:], start=1)
            if all(wanted[name] in (WILDCARD, getattr(item, name)) for name in FILTER_FIELDS)
        ]

    def reset_tag_range(self) -> None:
        """Recollect the tag filter values after tags have changed."""
        self.filter_values.tag = ValueRange(item.tag for item in self.sets if item.tag)

    def set_view_tag(self, index: int, tag: str) -> None:
        self._row(index).tag = tag

    def set_set_tag(self, index: int, tag: str) -> None:
        self.sets[index].tag = tag

    def sub_path(self, index: int) -> str:
        """Path of a set relative to the backup folder."""
        if index == 0:
            return "/"
        return "/batch/" + self.at(index) + "/"


class BackupSetFilterMenu:
    """Chooses filter values for console, tag, month and year, then applies them."""

    ENTRY_COUNT = 4
    _FIELDS = ("serial_id", "tag", "month", "year")
    _LABELS = ("Console", "Tag", "Month", "Year")

    def __init__(self, backup_set_list: BackupSetList) -> None:
        self.backup_set_list = backup_set_list
        self.cursor = 0

    def _range(self) -> ValueRange:
        return getattr(self.backup_set_list.filter_values, self._FIELDS[self.cursor])

    def rows(self) -> list[tuple[str, str]]:
        """Label and current value of each filter line."""
        values = self.backup_set_list.filter_values
        return [
            (label, getattr(values, name).current())
            for label, name in zip(self._LABELS, self._FIELDS)
        ]

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_down(self) -> None:
        self.cursor = (self.cursor + 1) % self.ENTRY_COUNT

    def left(self) -> None:
        self._range().left()

    def right(self) -> None:
        self._range().right()

    def apply(self) -> None:
        """Filter the list with the chosen values and keep its sort order."""
        self.backup_set_list.filter()
        self.backup_set_list.sort(self.backup_set_list.sort_ascending)

    def reset(self) -> None:
        self.backup_set_list.filter_values.reset()