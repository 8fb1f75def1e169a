"""Discovery of Wii U titles and their save data on NAND and USB storage."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable
from xml.sax.saxutils import unescape

from savemanager.excludes import TitleKey
from savemanager.titles import Title

WIIU_HIGH_IDS = (0x00050000, 0x00050002)
PRODUCT_CODE_PREFIX_LENGTH = 6
PRODUCT_CODE_LENGTH = 4

_XML_ENTITIES = {"&quot;": '"', "&apos;": "'"}
_HEX_PREFIX = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")


@dataclass
class MetaInfo:
    """The fields of a title's meta.xml that the save manager uses."""

    product_code: str = ""
    account_save_size: int = 0
    common_save_size: int = 0
    group_id: int = 0
    short_name: str = ""
    long_name: str = ""


def _hex_value(text: str | None) -> int:
    """Leading hexadecimal number of text, or 0 when there is none."""
    if not text:
        return 0
    match = _HEX_PREFIX.match(text)
    return int(match.group(1), 16) if match else 0


def _tag_text(xml: str, tag: str) -> str | None:
    match = re.search(rf"<{tag}\b[^>]*>([^<]*)", xml)
    return match.group(1) if match else None


def _name(xml: str, english: str, japanese: str) -> str:
    raw = _tag_text(xml, english)
    if not raw:
        raw = _tag_text(xml, japanese) or ""
    return unescape(raw, _XML_ENTITIES)


def parse_meta_xml(text: str) -> MetaInfo:
    """Extract product code, save sizes, group id and names from meta.xml text.

    The product code drops its six-character prefix and keeps four characters.
    Empty English names fall back to the Japanese ones.
    """
    code = _tag_text(text, "product_code") or ""
    return MetaInfo(
        product_code=code[PRODUCT_CODE_PREFIX_LENGTH:][:PRODUCT_CODE_LENGTH],
        account_save_size=_hex_value(_tag_text(text, "account_save_size")),
        common_save_size=_hex_value(_tag_text(text, "common_save_size")),
        group_id=_hex_value(_tag_text(text, "group_id")),
        short_name=_name(text, "shortname_en", "shortname_ja"),
        long_name=_name(text, "longname_en", "longname_ja"),
    )


def _save_dir_names(root: Path, high_id: int) -> list[str]:
    """Names of save folders that hold both user data and a meta.xml."""
    base = root / "usr" / "save" / f"{high_id:08x}"
    try:
        names = sorted(entry.name for entry in base.iterdir())
    except OSError:
        return []
    return [
        name
        for name in names
        if not name.startswith(".")
        and (base / name / "user").is_dir()
        and (base / name / "meta" / "meta.xml").is_file()
    ]


def _read_meta(path: Path) -> MetaInfo | None:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    return parse_meta_xml(text) if text else None


def scan_wiiu_titles(
    mlc_root: str | Path,
    usb_root: str | Path | None,
    installed: Iterable[TitleKey],
) -> list[Title]:
    """Build the Wii U title list from save folders and installed titles.

    Titles with a save folder come first, grouped by title type and then by
    device (USB before NAND); installed titles without save data follow and
    are marked as not initialised. Titles present on both devices are linked
    as duplicates.
    """
    mlc = Path(mlc_root)
    usb = Path(usb_root) if usb_root is not None else None
    devices = [(True, usb), (False, mlc)]

    pending = [key for key in installed if key.high_id in WIIU_HIGH_IDS]
    found = [False] * len(pending)

    records: list[tuple[int, int, bool, bool]] = []
    for high_id in WIIU_HIGH_IDS:
        for is_usb, root in devices:
            if root is None:
                continue
            for name in _save_dir_names(root, high_id):
                low_id = _hex_value(name)
                for position, key in enumerate(pending):
                    if key.low_id == low_id and key.is_title_on_usb == is_usb:
                        found[position] = True
                        break
                records.append((high_id, low_id, is_usb, True))
    records.extend(
        (key.high_id, key.low_id, key.is_title_on_usb, False)
        for key, seen in zip(pending, found)
        if not seen
    )

    titles: list[Title] = []
    for position, (high_id, low_id, is_usb, has_save) in enumerate(records):
        root = usb if is_usb else mlc
        title = Title(
            high_id=high_id,
            low_id=low_id,
            list_id=position,
            index_id=position,
            save_init=has_save,
            is_title_on_usb=is_usb,
            is_wii=(high_id & 0xFFFFFFF0) == 0x00010000,
        )
        if root is not None:
            area = "save" if has_save else "title"
            meta = _read_meta(
                root / "usr" / area / f"{high_id:08x}" / f"{low_id:08x}" / "meta" / "meta.xml"
            )
            if meta is not None:
                title.product_code = meta.product_code
                title.account_save_size = meta.account_save_size
                title.common_save_size = meta.common_save_size
                title.group_id = meta.group_id
                title.short_name = meta.short_name
                title.long_name = meta.long_name
            fw_img = root / "usr" / "title" / f"000{high_id:x}" / f"{low_id:x}" / "code" / "fw.img"
            title.no_fw_img = fw_img.exists()
        if not title.short_name:
            title.short_name = f"{high_id:08x}{low_id:08x}"

        for other_position, other in enumerate(titles):
            if other.high_id == high_id and other.low_id == low_id:
                title.is_title_dupe = True
                title.dupe_id = other_position
                other.is_title_dupe = True
                other.dupe_id = position
        titles.append(title)
    return titles