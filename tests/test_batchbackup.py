import pytest

from savemanager.batchbackup import BackupChoice, BatchBackupMenu
from savemanager.titles import Title


def _titles(count):
    return [Title(high_id=0x00050000, low_id=i + 1) for i in range(count)]


def test_initial_selection_is_all():
    menu = BatchBackupMenu(_titles(2), _titles(1))
    assert menu.select() is BackupChoice.ALL


def test_move_down_stops_at_last():
    menu = BatchBackupMenu(_titles(2), _titles(1))
    for _ in range(5):
        menu.move_down()
    assert menu.select() is BackupChoice.VWII
    assert menu.cursor == BatchBackupMenu.ENTRY_COUNT - 1


def test_move_up_stops_at_first():
    menu = BatchBackupMenu(_titles(2), _titles(1), cursor=2)
    menu.move_up()
    assert menu.select() is BackupChoice.WIIU
    menu.move_up()
    menu.move_up()
    assert menu.select() is BackupChoice.ALL


def test_labels_count_titles_and_pluralise():
    menu = BatchBackupMenu(_titles(3), _titles(1))
    assert menu.labels() == [
        "Backup All (4 Titles)",
        "Backup Wii U (3 Titles)",
        "Backup vWii (1 Title)",
    ]


def test_labels_count_invariant():
    wiiu, wii = _titles(5), _titles(2)
    labels = BatchBackupMenu(wiiu, wii).labels()
    assert f"({len(wiiu) + len(wii)} Titles)" in labels[0]
    assert f"({len(wiiu)} Titles)" in labels[1]
    assert f"({len(wii)} Titles)" in labels[2]


@pytest.mark.parametrize("cursor,expected", [(0, False), (1, True), (2, True)])
def test_excludes_reminder(cursor, expected):
    menu = BatchBackupMenu(_titles(1), _titles(1), cursor=cursor)
    assert menu.shows_excludes_reminder(True) is expected
    assert menu.shows_excludes_reminder(False) is False


def test_cursor_is_clamped_on_creation():
    assert BatchBackupMenu([], [], cursor=9).select() is BackupChoice.VWII
    assert BatchBackupMenu([], [], cursor=-3).select() is BackupChoice.ALL