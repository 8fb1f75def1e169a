"""Title, account and save-state records shared by the save manager."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto

UINT32_MAX = 0xFFFFFFFF

_DIGITS = string.digits + string.ascii_lowercase
_WHITESPACE = " \t\n\r\f\v"


class JobType(Enum):
    """Kinds of save-data jobs the manager can run."""

    BACKUP = auto()
    RESTORE = auto()
    WIPE_PROFILE = auto()
    PROFILE_TO_PROFILE = auto()
    MOVE_PROFILE = auto()
    COPY_TO_OTHER_DEVICE = auto()
    COPY_FROM_NAND_TO_USB = auto()
    COPY_FROM_USB_TO_NAND = auto()


class BatchJobResult(IntEnum):
    """Outcome of a batch job for one title."""

    NOT_TRIED = 0
    ABORTED = 1
    OK = 2
    WR = 3
    KO = 4


class FileNameStyle(Enum):
    """How a title's backup folder is named."""

    UNKNOWN = auto()
    HI_LO = auto()
    TITLE_NAME = auto()


@dataclass
class DataSourceInfo:
    """Per-title state gathered while preparing and running a batch job."""

    has_savedata: bool = False
    candidate_to_be_processed: bool = False
    candidate_for_backup: bool = False
    selected_to_be_processed: bool = False
    selected_for_backup: bool = False
    has_profile_savedata: bool = False
    has_common_savedata: bool = False
    batch_job_state: BatchJobResult = BatchJobResult.NOT_TRIED
    batch_backup_state: BatchJobResult = BatchJobResult.NOT_TRIED
    last_error_code: int = 0


@dataclass
class Title:
    """An installed title and what is known about its save data."""

    high_id: int = 0
    low_id: int = 0
    list_id: int = 0
    index_id: int = 0
    short_name: str = ""
    long_name: str = ""
    product_code: str = ""
    save_init: bool = False
    is_title_on_usb: bool = False
    is_title_dupe: bool = False
    is_wii: bool = False
    no_fw_img: bool = False
    dupe_id: int = 0
    icon: bytes | None = None
    account_save_size: int = 0
    common_save_size: int = 0
    group_id: int = 0
    current_data_source: DataSourceInfo = field(default_factory=DataSourceInfo)
    title_name_based_dir_name: str = ""
    file_name_style: FileNameStyle = FileNameStyle.UNKNOWN


@dataclass
class Account:
    """A user profile on the console or found in a backup."""

    persistent_id: str = ""
    pid: int = 0
    mii_name: str = ""
    slot: int = 0


def sort_titles(titles: list[Title], tsort: int = 1, ascending: bool = True) -> None:
    """Sort titles in place and renumber their index and duplicate links.

    tsort selects the key: 0 list order, 1 short name, 2 storage,
    3 storage then short name. Any other value keeps the current order.
    """
    reverse = not ascending
    if tsort == 0:
        titles.sort(key=lambda t: t.list_id)
    elif tsort == 1:
        titles.sort(key=lambda t: t.short_name, reverse=reverse)
    elif tsort == 2:
        titles.sort(key=lambda t: t.is_title_on_usb, reverse=reverse)
    elif tsort == 3:
        titles.sort(key=lambda t: (t.is_title_on_usb, t.short_name), reverse=reverse)

    position_of: dict[int, int] = {}
    for position, title in enumerate(titles):
        position_of.setdefault(title.index_id, position)
    for title in titles:
        if title.is_title_dupe and title.dupe_id in position_of:
            title.dupe_id = position_of[title.dupe_id]
    for position, title in enumerate(titles):
        title.index_id = position


def str2uint(text: str, base: int = 0) -> int:
    """Parse an unsigned 32-bit integer the way strtoul does.

    Base 0 detects a 0x (hex) or 0 (octal) prefix. Raises ValueError when the
    whole string is not a number and OverflowError when it exceeds 32 bits.
    """
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"invalid base: {base}")
    digits = text.lstrip(_WHITESPACE)
    if digits.startswith("+"):
        digits = digits[1:]

    def has_hex_prefix(value: str) -> bool:
        return (
            value[:2].lower() == "0x"
            and len(value) > 2
            and value[2].lower() in _DIGITS[:16]
        )

    if base == 0:
        if has_hex_prefix(digits):
            base, digits = 16, digits[2:]
        elif digits.startswith("0") and len(digits) > 1:
            base, digits = 8, digits[1:]
        else:
            base = 10
    elif base == 16 and has_hex_prefix(digits):
        digits = digits[2:]

    allowed = _DIGITS[:base]
    if not digits or any(ch.lower() not in allowed for ch in digits):
        raise ValueError(f"not an unsigned integer in base {base}: {text!r}")
    value = int(digits, base)
    if value > UINT32_MAX:
        raise OverflowError(f"value does not fit in 32 bits: {text!r}")
    return value