"""Discovery of vWii titles and decoding of their banner names."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from savemanager.titles import Title

WII_HIGH_IDS = ("00010000", "00010001", "00010004")

BLACKLIST = frozenset(
    {
        (0x00010000, 0x00555044),
        (0x00010000, 0x00555045),
        (0x00010000, 0x0055504A),
        (0x00010000, 0x524F4E45),
        (0x00010000, 0x52543445),
        (0x00010001, 0x48424344),
        (0x00010001, 0x554E454F),
    }
)

BANNER_NAME_OFFSET = 0x20
BANNER_NAME_UNITS = 0x20

_HEX_PREFIX = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")


def _hex_value(text: str) -> int:
    """Leading hexadecimal number of text, or 0 when there is none."""
    match = _HEX_PREFIX.match(text)
    return int(match.group(1), 16) if match else 0


def _encode_unit(unit: int) -> bytes:
    if unit < 0x80:
        return bytes((unit,))
    if unit & 0xF000:
        return bytes(
            (
                0xE0 | ((unit & 0xF000) >> 12),
                0x80 | ((unit & 0xFC0) >> 6),
                0x80 | (unit & 0x3F),
            )
        )
    if unit < 0x400:
        return bytes((0xC0 | ((unit & 0x3C0) >> 6), 0x80 | (unit & 0x3F)))
    return bytes((0xD0 | ((unit & 0x3C0) >> 6), 0x80 | (unit & 0x3F)))


def decode_banner_units(units: Sequence[int]) -> str:
    """Turn 16-bit banner characters into text, stopping at the first zero."""
    encoded = bytearray()
    for unit in units:
        if unit == 0:
            break
        encoded += _encode_unit(unit & 0xFFFF)
    return encoded.decode("utf-8", errors="replace")


def read_banner(path: str | Path) -> tuple[str, str]:
    """Read the short and long names from a banner.bin file.

    Names are stored as big-endian 16-bit units starting at offset 0x20;
    a short file is treated as if padded with zeros. Raises OSError when
    the file cannot be read.
    """
    with open(path, "rb") as banner:
        banner.seek(BANNER_NAME_OFFSET)
        raw = banner.read(4 * BANNER_NAME_UNITS)
    raw = raw.ljust(4 * BANNER_NAME_UNITS, b"\0")
    units = [int.from_bytes(raw[pos : pos + 2], "big") for pos in range(0, len(raw), 2)]
    return (
        decode_banner_units(units[:BANNER_NAME_UNITS]),
        decode_banner_units(units[BANNER_NAME_UNITS:]),
    )


def _product_code(low_id: int) -> str:
    return "".join(
        "." if byte == 0 else chr(byte) for byte in low_id.to_bytes(4, "big")
    )


def _title_dir_names(base: Path) -> list[str]:
    try:
        names = sorted(entry.name for entry in base.iterdir())
    except OSError:
        return []
    return [name for name in names if name not in (".", "..")]


def scan_wii_titles(slccmpt_root: str | Path) -> list[Title]:
    """List the vWii titles installed under the given storage root.

    Blacklisted system titles are skipped. Titles without a banner.bin keep
    a placeholder name and are marked as not initialised.
    """
    root = Path(slccmpt_root)
    titles: list[Title] = []
    for high_text in WII_HIGH_IDS:
        high_id = int(high_text, 16)
        base = root / "title" / high_text
        for name in _title_dir_names(base):
            low_id = _hex_value(name)
            if (high_id, low_id) in BLACKLIST:
                continue
            position = len(titles)
            title = Title(
                high_id=high_id,
                low_id=low_id,
                list_id=position,
                index_id=position,
                product_code=_product_code(low_id),
                is_wii=True,
                no_fw_img=True,
                is_title_on_usb=False,
                is_title_dupe=False,
                dupe_id=0,
            )
            try:
                short_name, long_name = read_banner(base / name / "data" / "banner.bin")
            except OSError:
                title.short_name = f"{high_text}{name} (No banner.bin)"
                title.long_name = ""
                title.save_init = False
            else:
                title.short_name = short_name or f"{high_id:08x}{low_id:08x}"
                title.long_name = long_name
                title.save_init = True
            titles.append(title)
    return titles