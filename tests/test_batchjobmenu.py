import pytest

from savemanager.batchjobmenu import BatchJobMenu
from savemanager.titles import JobType, Title


@pytest.fixture
def wiiu():
    return [Title(short_name="A"), Title(short_name="B")]


@pytest.fixture
def wii():
    return [Title(short_name="C", is_wii=True)]


def test_cursor_clamps(wiiu, wii):
    menu = BatchJobMenu(wiiu, wii, JobType.RESTORE)
    menu.move_up()
    assert menu.cursor == 0
    menu.move_down()
    menu.move_down()
    assert menu.cursor == 1
    menu.move_up()
    assert menu.cursor == 0


def test_initial_cursor_is_bounded(wiiu, wii):
    assert BatchJobMenu(wiiu, wii, JobType.RESTORE, cursor=7).cursor == 1


def test_restore_texts(wiiu, wii):
    texts = BatchJobMenu(wiiu, wii, JobType.RESTORE).texts()
    assert texts["title"] == "Batch Restore"
    assert texts["wiiu_task"] == "   Restore Wii U (2 Titles)"
    assert texts["vwii_task"] == "   Restore vWii (1 Title)"
    assert texts["next_task"] == "\ue000: Continue to BackupSet selection  \ue001: Back"


def test_copy_texts_have_no_counts(wiiu, wii):
    texts = BatchJobMenu(wiiu, wii, JobType.COPY_TO_OTHER_DEVICE).texts()
    assert texts["wiiu_task"] == "   Copy Wii U Savedata from NAND to USB"
    assert texts["vwii_task"] == "   Copy Wii U Savedata from USB to NAND"


def test_unsupported_job_texts_are_empty(wiiu, wii):
    texts = BatchJobMenu(wiiu, wii, JobType.BACKUP).texts()
    assert set(texts.values()) == {""}


def test_restore_selects_backup_set_list(wiiu, wii):
    menu = BatchJobMenu(wiiu, wii, JobType.RESTORE)
    choice = menu.select()
    assert choice.opens_backup_set_list
    assert choice.titles is wiiu and choice.is_wiiu_batch
    menu.move_down()
    choice = menu.select()
    assert choice.titles is wii and not choice.is_wiiu_batch
    assert choice.job_type is JobType.RESTORE


def test_wipe_selects_options(wiiu, wii):
    menu = BatchJobMenu(wiiu, wii, JobType.WIPE_PROFILE, cursor=1)
    choice = menu.select()
    assert not choice.opens_backup_set_list
    assert choice.titles is wii
    assert choice.job_type is JobType.WIPE_PROFILE


def test_copy_uses_wiiu_titles_for_both_directions(wiiu, wii):
    menu = BatchJobMenu(wiiu, wii, JobType.COPY_TO_OTHER_DEVICE)
    assert menu.select().job_type is JobType.COPY_FROM_NAND_TO_USB
    menu.move_down()
    choice = menu.select()
    assert choice.job_type is JobType.COPY_FROM_USB_TO_NAND
    assert choice.titles is wiiu and choice.is_wiiu_batch


def test_unsupported_job_selects_nothing(wiiu, wii):
    assert BatchJobMenu(wiiu, wii, JobType.BACKUP).select() is None