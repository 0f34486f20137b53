from pathlib import Path

import yaml

from hangul_typing.services.settings_store import SettingsStore
from hangul_typing.services.typing_session import TypingConfig


def test_missing_file_gives_defaults(settings_path: Path):
    store = SettingsStore(settings_path)
    assert store.load() == {}
    assert store.get_typing_config() == TypingConfig()


def test_save_and_load_roundtrip(settings_path: Path):
    """
    save() should write a UTF-8 YAML file and load() should reconstruct
    the same dictionary.
    """
    store = SettingsStore(settings_path)
    payload = {
        "theme": "hanji",
        "last_text": "안녕하세요",
        "typing": {"show_cursor": False, "cursor": "▌"},
    }
    store.save(payload)
    assert store.load() == payload

    with open(settings_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    assert data["last_text"] == "안녕하세요"


def test_typing_config_roundtrip(settings_path: Path):
    store = SettingsStore(settings_path)
    config = TypingConfig(
        show_cursor=False,
        cursor_after_typing=True,
        cursor="_",
        start_paused=True,
        incremental=False,
    )
    store.set_typing_config(config)
    assert store.get_typing_config() == config


def test_update_preserves_other_keys(settings_path: Path):
    store = SettingsStore(settings_path)
    store.save({"theme": "taegeuk", "typing": {"cursor": "#", "extra": 1}})

    store.set_typing_config(TypingConfig(show_cursor=False))

    loaded = store.load()
    assert loaded["theme"] == "taegeuk"
    assert loaded["typing"]["extra"] == 1
    assert loaded["typing"]["show_cursor"] is False
    assert loaded["typing"]["cursor"] == "|"


def test_bad_values_fall_back_to_defaults(settings_path: Path):
    settings_path.write_text(
        "typing:\n  show_cursor: 'yes'\n  cursor: 5\n  incremental: false\n",
        encoding="utf-8",
    )
    config = SettingsStore(settings_path).get_typing_config()
    assert config.show_cursor is True
    assert config.cursor == "|"
    assert config.incremental is False


def test_malformed_yaml_is_ignored(settings_path: Path):
    settings_path.write_text("typing: [unclosed\n", encoding="utf-8")
    store = SettingsStore(settings_path)
    assert store.load() == {}
    assert store.get_typing_config() == TypingConfig()


def test_non_mapping_section_is_ignored(settings_path: Path):
    settings_path.write_text("typing: 3\n", encoding="utf-8")
    assert SettingsStore(settings_path).get_typing_config() == TypingConfig()
