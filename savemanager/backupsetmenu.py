"""The backup set list screen: browse, sort, choose and tag backup sets."""

from __future__ import annotations

from savemanager.backupsets import ROOT_BS, BackupSetList
from savemanager.listcursor import MAX_TITLE_SHOW, ListCursor
from savemanager.metadata import Metadata

NAME_WIDTH = 15


class BackupSetMenu:
    """Cursor, sort order and current selection over a BackupSetList.

    As the last screen it selects the set later restores come from; as a
    step of a batch restore the root set cannot be chosen.
    """

    def __init__(self, backup_set_list: BackupSetList, final_screen: bool = True) -> None:
        self.backup_set_list = backup_set_list
        self.final_screen = final_screen
        self.sort_ascending = backup_set_list.sort_ascending
        self.cursor = ListCursor(backup_set_list.entries_view)
        self.backup_set_entry = ROOT_BS
        self.backup_set_sub_path = "/"
        self.tag = ""

    def _sync(self) -> None:
        self.cursor.entries = self.backup_set_list.entries_view

    def _track_tag(self) -> None:
        self.tag = self.backup_set_list.tag_at(self.cursor.index())

    def heading(self) -> str:
        if self.backup_set_list.filtered:
            return "BackupSets (filter applied)"
        return "BackupSets"

    def rows(self) -> list[tuple[str, str, str]]:
        """Name, shortened serial id and tag of each visible line."""
        bsl = self.backup_set_list
        first = self.cursor.scroll
        last = min(first + MAX_TITLE_SHOW, bsl.entries_view)
        return [
            (bsl.at(i)[:NAME_WIDTH], bsl.stretched_serial_id_at(i), bsl.tag_at(i))
            for i in range(max(first, 0), last)
        ]

    def sort(self, ascending: bool) -> None:
        """Change the sort direction, returning the cursor to the top."""
        if ascending == self.sort_ascending:
            return
        self.sort_ascending = ascending
        self.backup_set_list.sort(ascending)
        self.cursor.reset()

    def move_down(self, amount: int = 1, wrap: bool = True) -> None:
        self._sync()
        self.cursor.move_down(amount, wrap)
        self._track_tag()

    def move_up(self, amount: int = 1, wrap: bool = True) -> None:
        self._sync()
        self.cursor.move_up(amount, wrap)
        self._track_tag()

    def select(self) -> str:
        """Make the highlighted set current and return its entry name."""
        index = self.cursor.index()
        if not self.final_screen and index == 0:
            raise ValueError("Root BackupSet cannot be selected for batchRestore")
        entry = self.backup_set_list.at(index)
        self.backup_set_entry = entry
        self.backup_set_sub_path = "/" if entry == ROOT_BS else "/batch/" + entry + "/"
        return entry

    def selection_message(self, this_console_serial_id: str | None = None) -> str:
        index = self.cursor.index()
        bsl = self.backup_set_list
        serial = (
            Metadata.this_console_serial_id
            if this_console_serial_id is None
            else this_console_serial_id
        )
        return (
            f"BackupSet selected:\n - TimeStamp: {bsl.at(index)}\n"
            f" - Tag: {bsl.tag_at(index)}\n - From console: {bsl.serial_id_at(index)}\n\n"
            f"This console: {serial}"
        )

    def retag(self, tag: str) -> None:
        """Give the highlighted set a new tag and store it in its metadata."""
        index = self.cursor.index()
        if index == 0:
            raise ValueError("the root BackupSet cannot be tagged")
        bsl = self.backup_set_list
        if tag == bsl.tag_at(index):
            return
        if bsl.root is None:
            raise ValueError("the backup set list has no folder to write to")
        metadata = Metadata.in_directory(bsl.root / bsl.at(index))
        metadata.read()
        metadata.tag = tag
        metadata.write()
        bsl.set_view_tag(index, tag)
        set_index = bsl.view[index].set_index
        if set_index is not None:
            bsl.set_set_tag(set_index, tag)
        if tag:
            bsl.reset_tag_range()
        self.tag = tag

    def reload(self) -> None:
        """Reread the sets from disk after a new batch backup was added."""
        bsl = self.backup_set_list
        self.backup_set_list = BackupSetList(bsl.root, ascending=bsl.sort_ascending)
        self.cursor.shift_for_new_entry(self.backup_set_list.sort_ascending)
        self._sync()