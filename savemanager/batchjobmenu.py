"""The batch job menu: choose Wii U or vWii titles for restore, wipe or copy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from savemanager.titles import JobType, Title

ENTRY_COUNT = 2

_TEXTS = {
    JobType.RESTORE: {
        "title": "Batch Restore",
        "wiiu_task": "   Restore Wii U ({count} Title{plural})",
        "vwii_task": "   Restore vWii ({count} Title{plural})",
        "readme": (
            "Batch Restore allows you to restore all savedata from a BatchBackup \n"
            "* to the same user profiles\n"
            "* to a different user in the same console \n"
            "* or to a different console where the games are already installed.\n"
            "In the later case, it is recommended to first run the game to \n"
            "  initialize the savedata."
        ),
        "next_task": "\ue000: Continue to BackupSet selection  \ue001: Back",
    },
    JobType.WIPE_PROFILE: {
        "title": "Batch Wipe",
        "wiiu_task": "   Wipe Wii U Profiles ({count} Title{plural})",
        "vwii_task": "   Wipe vWii Savedata ({count} Title{plural})",
        "readme": (
            "Batch Wipe allows you to wipe savedata belonging to a given profile\n"
            "across all selected titles.\n"
            "It detects also savedata belonging to profiles not defined in the console.\n\n"
            "Just:\n- select which data to wipe\n- select titles to act on\n- and go!"
        ),
        "next_task": "\ue000: Continue to savedata selection  \ue001: Back",
    },
    JobType.COPY_TO_OTHER_DEVICE: {
        "title": "Batch Copy To Other Device",
        "wiiu_task": "   Copy Wii U Savedata from NAND to USB",
        "vwii_task": "   Copy Wii U Savedata from USB to NAND",
        "readme": (
            "Batch Copy To Other Device allows you to transfer savedata \n"
            "between NAND and USB for all selected titles that already\n"
            " have savadata on both media.\n\n"
            "Just:\n- select which data to copy\n- select titles to act on\n- and go!"
        ),
        "next_task": "\ue000: Continue to savedata selection  \ue001: Back",
    },
}

_TEXT_KEYS = ("title", "wiiu_task", "vwii_task", "readme", "next_task")


@dataclass(frozen=True)
class JobChoice:
    """The next step chosen from the batch job menu.

    When opens_backup_set_list is true, a backup set must be picked before
    the job options; otherwise the job options come next.
    """

    opens_backup_set_list: bool
    titles: Sequence[Title]
    is_wiiu_batch: bool
    job_type: JobType


class BatchJobMenu:
    """Cursor over the Wii U and vWii entries of a batch job menu."""

    ENTRY_COUNT = ENTRY_COUNT

    def __init__(
        self,
        wiiu_titles: Sequence[Title],
        wii_titles: Sequence[Title],
        job_type: JobType,
        cursor: int = 0,
    ) -> None:
        self.wiiu_titles = wiiu_titles
        self.wii_titles = wii_titles
        self.job_type = job_type
        self.cursor = min(max(cursor, 0), ENTRY_COUNT - 1)

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_down(self) -> None:
        if self.cursor < ENTRY_COUNT - 1:
            self.cursor += 1

    def texts(self) -> dict[str, str]:
        """Screen title, the two task lines, the explanation and the key hint."""
        templates = _TEXTS.get(self.job_type)
        if templates is None:
            return {key: "" for key in _TEXT_KEYS}
        texts = dict(templates)
        for key, count in (
            ("wiiu_task", len(self.wiiu_titles)),
            ("vwii_task", len(self.wii_titles)),
        ):
            texts[key] = texts[key].format(count=count, plural="s" if count > 1 else "")
        return texts

    def select(self) -> JobChoice | None:
        """What the highlighted entry leads to, or None for unsupported jobs."""
        wiiu = self.cursor == 0
        if self.job_type is JobType.RESTORE:
            return JobChoice(
                True,
                self.wiiu_titles if wiiu else self.wii_titles,
                wiiu,
                JobType.RESTORE,
            )
        if self.job_type is JobType.WIPE_PROFILE:
            return JobChoice(
                False,
                self.wiiu_titles if wiiu else self.wii_titles,
                wiiu,
                JobType.WIPE_PROFILE,
            )
        if self.job_type is JobType.COPY_TO_OTHER_DEVICE:
            return JobChoice(
                False,
                self.wiiu_titles,
                True,
                JobType.COPY_FROM_NAND_TO_USB if wiiu else JobType.COPY_FROM_USB_TO_NAND,
            )
        return None