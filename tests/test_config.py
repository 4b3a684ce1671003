from __future__ import annotations
import pytest
import yaml

from smfnotes import config


def test_packaged_defaults():
    cfg = config.load_config()
    assert config.get_default_bpm(cfg) == 120.0
    assert config.get_output(cfg) == {"separator": "\t", "header": False}


def test_user_file_is_merged(tmp_path):
    user = tmp_path / "user.yaml"
    user.write_text("output:\n  header: true\n", encoding="utf-8")
    cfg = config.load_config(user_path=user)
    # separator kommt weiter aus den Defaults
    assert config.get_output(cfg) == {"separator": "\t", "header": True}


def test_broken_user_file_is_ignored(tmp_path):
    user = tmp_path / "user.yaml"
    user.write_text("output: [unclosed\n", encoding="utf-8")
    cfg = config.load_config(user_path=user)
    assert config.get_default_bpm(cfg) == 120.0


def test_explicit_file_wins(tmp_path):
    user = tmp_path / "user.yaml"
    user.write_text("default_bpm: 90\n", encoding="utf-8")
    extra = tmp_path / "extra.yaml"
    extra.write_text("default_bpm: 75.5\n", encoding="utf-8")
    cfg = config.load_config(extra, user_path=user)
    assert config.get_default_bpm(cfg) == 75.5


def test_explicit_file_must_be_a_mapping(tmp_path):
    extra = tmp_path / "extra.yaml"
    extra.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        config.load_config(extra)


@pytest.mark.parametrize("value", ["fast", None, 0])
def test_invalid_default_bpm_falls_back(value):
    assert config.get_default_bpm({"default_bpm": value}) == 120.0
