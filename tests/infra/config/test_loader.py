import pytest

from rc4kit.infra.config.adapter import ConfigAdapter
from rc4kit.infra.config.loader import (
    find_settings,
    load_settings,
    write_sample_settings,
)
from rc4kit.schemas import CipherConfig

HEX_SETTINGS = '[general]\noutput_format = "hex"\n'


@pytest.fixture
def user_settings(tmp_path, monkeypatch):
    """Point the per-user settings file into tmp_path and work in an empty dir."""
    path = tmp_path / "user" / "settings.toml"
    monkeypatch.setattr("rc4kit.infra.config.loader.USER_SETTINGS_PATH", path)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return path


def test_no_settings_gives_empty_mapping(user_settings):
    assert find_settings() is None
    assert load_settings() == {}


def test_working_directory_settings_used(user_settings, tmp_path):
    local = tmp_path / "work" / "settings.toml"
    local.write_text(HEX_SETTINGS, encoding="utf-8")

    assert find_settings() == local
    assert load_settings() == {"general": {"output_format": "hex"}}


def test_working_directory_wins_over_user_file(user_settings, tmp_path):
    user_settings.parent.mkdir()
    user_settings.write_text('[general]\nencoding = "cp1251"\n', encoding="utf-8")
    (tmp_path / "work" / "settings.toml").write_text(HEX_SETTINGS, encoding="utf-8")

    assert load_settings() == {"general": {"output_format": "hex"}}


def test_user_file_is_last_resort(user_settings):
    user_settings.parent.mkdir()
    user_settings.write_text(HEX_SETTINGS, encoding="utf-8")

    assert find_settings() == user_settings


def test_explicit_path_must_exist(user_settings, tmp_path):
    (tmp_path / "work" / "settings.toml").write_text(HEX_SETTINGS, encoding="utf-8")

    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.toml")


def test_invalid_toml(user_settings, tmp_path):
    bad = tmp_path / "bad.toml"
    bad.write_text("encoding = [1,,2]", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML in"):
        load_settings(bad)


def test_sample_settings_match_defaults(tmp_path):
    target = tmp_path / "nested" / "settings.toml"

    assert write_sample_settings(target)
    cfg = ConfigAdapter(load_settings(target)).get_cipher_config()
    assert cfg == CipherConfig()


def test_sample_settings_keep_existing_file(tmp_path):
    target = tmp_path / "settings.toml"
    target.write_text("keep me", encoding="utf-8")

    assert not write_sample_settings(target)
    assert target.read_text(encoding="utf-8") == "keep me"

    assert write_sample_settings(target, force=True)
    assert "[general]" in target.read_text(encoding="utf-8")
