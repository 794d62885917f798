import pytest

from SciCalc import config_manager
from SciCalc.config_manager import AngleMode, DisplayMode, DEFAULT_SETTINGS


@pytest.fixture
def files(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "config.json")
    monkeypatch.setattr(config_manager, "ui_strings", tmp_path / "ui_strings.json")
    monkeypatch.setattr(config_manager, "storage_json", tmp_path / "storage.json")
    return tmp_path


def test_missing_config_gives_defaults(files):
    assert config_manager.load_setting_value("all") == DEFAULT_SETTINGS
    assert config_manager.load_setting_value("fix_decimals") == 2


def test_corrupt_config_gives_defaults(files):
    (files / "config.json").write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("all") == DEFAULT_SETTINGS


def test_save_and_load(files):
    settings = dict(DEFAULT_SETTINGS, angle_mode="RAD", darkmode=True)
    assert config_manager.save_setting(settings) == settings
    assert config_manager.load_setting_value("angle_mode") == "RAD"
    assert config_manager.load_setting_value("darkmode") is True


def test_save_failure_returns_empty(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path)
    assert config_manager.save_setting(dict(DEFAULT_SETTINGS)) == {}


def test_engine_config_parsing():
    config = config_manager.load_engine_config({"angle_mode": "rad", "display_mode": "bogus",
                                                "fix_decimals": "15"})
    assert config.angle_mode == AngleMode.RAD
    assert config.display_mode == DisplayMode.NORM
    assert config.fix_decimals == 9


def test_engine_config_from_file(files):
    config_manager.save_setting(dict(DEFAULT_SETTINGS, display_mode="ENG", fix_decimals=4))
    config = config_manager.load_engine_config()
    assert config.display_mode == DisplayMode.ENG
    assert config.fix_decimals == 4


@pytest.mark.parametrize("value,expected", [(3, 3), ("5", 5), (-2, 0), (12, 9), ("x", 2), (None, 2)])
def test_clamp_decimals(value, expected):
    assert config_manager.clamp_decimals(value) == expected


def test_descriptions(files):
    (files / "ui_strings.json").write_text('{"darkmode": "Night theme"}', encoding="utf-8")
    assert config_manager.load_setting_description("darkmode") == "Night theme"
    assert config_manager.load_setting_description("debug") == "Debug logging"
    assert config_manager.load_setting_description("unknown") == "unknown"


def test_memory_and_history_storage(files):
    assert config_manager.load_memory() == 0
    assert config_manager.load_history() == []
    config_manager.save_memory(2.5)
    config_manager.save_history([{"expression": "1+1", "result": "2"}])
    assert config_manager.load_memory() == 2.5
    assert config_manager.load_history()[0]["result"] == "2"


def test_corrupt_memory_is_zero(files):
    (files / "storage.json").write_text('{"memory": "abc", "history": 5}', encoding="utf-8")
    assert config_manager.load_memory() == 0
    assert config_manager.load_history() == []
