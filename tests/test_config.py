import json

import pytest

from savemanager.config import ConfigError, GlobalConfig


def test_cfg_file_name(tmp_path):
    cfg = GlobalConfig(tmp_path, serial_id="FAKE123")
    assert cfg.cfg_file == tmp_path / "savemii-FAKE123-cfg.json"


def test_init_creates_folder_and_default_file(tmp_path):
    folder = tmp_path / "nested" / "cfgdir"
    cfg = GlobalConfig(folder, serial_id="S", language=3)
    cfg.init()
    assert cfg.initialized
    assert json.loads(cfg.cfg_file.read_text()) == {
        "language": 3,
        "alwaysApplyExcludes": False,
        "askForBackupDirConversion": True,
        "dontAllowUndefinedProfiles": True,
    }


def test_init_keeps_existing_file(tmp_path):
    cfg = GlobalConfig(tmp_path, serial_id="S")
    cfg.cfg_file.write_text('{"alwaysApplyExcludes": true}')
    cfg.init()
    assert cfg.cfg_file.read_text() == '{"alwaysApplyExcludes": true}'


def test_init_path_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    cfg = GlobalConfig(blocker, serial_id="S")
    with pytest.raises(ConfigError):
        cfg.init()
    assert not cfg.initialized


def test_save_and_read_round_trip(tmp_path):
    cfg = GlobalConfig(tmp_path, serial_id="S")
    cfg.init()
    cfg.language = 5
    cfg.always_apply_excludes = True
    cfg.ask_for_backup_dir_conversion = False
    cfg.save()

    other = GlobalConfig(tmp_path, serial_id="S")
    other.init()
    other.read()
    assert other.language == 5
    assert other.always_apply_excludes is True
    assert other.ask_for_backup_dir_conversion is False
    assert other.dont_allow_undefined_profiles is True


def test_read_before_init(tmp_path):
    cfg = GlobalConfig(tmp_path, serial_id="S")
    with pytest.raises(ConfigError):
        cfg.read()


def test_parse_ignores_wrong_types(tmp_path):
    cfg = GlobalConfig(tmp_path, serial_id="S", language=2)
    cfg.parse_json('{"language": "7", "alwaysApplyExcludes": 1, "dontAllowUndefinedProfiles": false}')
    assert cfg.language == 2
    assert cfg.always_apply_excludes is False
    assert cfg.dont_allow_undefined_profiles is False


def test_parse_accepts_any_integer_language(tmp_path):
    cfg = GlobalConfig(tmp_path, serial_id="S")
    cfg.parse_json('{"language": 40}')
    assert cfg.language == 40


def test_parse_invalid_json(tmp_path):
    cfg = GlobalConfig(tmp_path, serial_id="S")
    with pytest.raises(ConfigError):
        cfg.parse_json("{broken")


def test_read_invalid_file(tmp_path):
    cfg = GlobalConfig(tmp_path, serial_id="S")
    cfg.init()
    cfg.cfg_file.write_text("not json at all")
    with pytest.raises(ConfigError):
        cfg.read()