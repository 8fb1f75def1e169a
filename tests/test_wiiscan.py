from pathlib import Path

import pytest

from savemanager.wiiscan import decode_banner_units, read_banner, scan_wii_titles


def _units(text: str) -> list[int]:
    return [ord(ch) for ch in text]


def _write_banner(path: Path, short: str, long: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    def block(text: str) -> bytes:
        data = b"".join(ord(ch).to_bytes(2, "big") for ch in text)
        return data.ljust(0x40, b"\0")

    path.write_bytes(b"\xff" * 0x20 + block(short) + block(long))


def test_decode_ascii():
    assert decode_banner_units(_units("Mario Kart")) == "Mario Kart"


def test_decode_stops_at_zero():
    assert decode_banner_units(_units("AB") + [0] + _units("CD")) == "AB"


def test_decode_two_byte_character():
    assert decode_banner_units([ord("é")]) == "é"


def test_decode_three_byte_character():
    assert decode_banner_units([ord("マ"), ord("リ")]) == "マリ"


def test_decode_cyrillic_range():
    assert decode_banner_units([ord("Ж")]) == "Ж"


def test_read_banner(tmp_path):
    banner = tmp_path / "banner.bin"
    _write_banner(banner, "Short", "Long name")
    assert read_banner(banner) == ("Short", "Long name")


def test_read_banner_short_file(tmp_path):
    banner = tmp_path / "banner.bin"
    banner.write_bytes(b"\0" * 0x20 + "Hi".encode("utf-16-be"))
    assert read_banner(banner) == ("Hi", "")


def test_read_banner_missing(tmp_path):
    with pytest.raises(OSError):
        read_banner(tmp_path / "missing.bin")


def test_scan_wii_titles(tmp_path):
    title_root = tmp_path / "title"
    _write_banner(title_root / "00010000" / "52534245" / "data" / "banner.bin", "Game", "Full Game")
    (title_root / "00010001" / "00414200").mkdir(parents=True)
    (title_root / "00010000" / "00555044").mkdir(parents=True)

    titles = scan_wii_titles(tmp_path)

    assert [(t.high_id, t.low_id) for t in titles] == [(0x00010000, 0x52534245), (0x00010001, 0x00414200)]
    first, second = titles
    assert first.short_name == "Game"
    assert first.long_name == "Full Game"
    assert first.save_init is True
    assert first.product_code == "RSBE"
    assert first.is_wii and first.no_fw_img
    assert second.short_name == "0001000100414200 (No banner.bin)"
    assert second.save_init is False
    assert second.product_code == ".AB."
    assert [t.index_id for t in titles] == [0, 1]
    assert [t.list_id for t in titles] == [0, 1]


def test_scan_empty_banner_name_uses_ids(tmp_path):
    _write_banner(tmp_path / "title" / "00010004" / "52534245" / "data" / "banner.bin", "", "")
    titles = scan_wii_titles(tmp_path)
    assert len(titles) == 1
    assert titles[0].short_name == "0001000452534245"


def test_scan_missing_root(tmp_path):
    assert scan_wii_titles(tmp_path / "none") == []