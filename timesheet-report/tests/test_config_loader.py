import os
import tempfile

import pytest
from services.config_loader import InvalidConfigError, load_config, merge_config


def test_load_config_override():
    """YAMLの値がデフォルトを上書きすること"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write("time_sheet:\n  directory: sheets/2024\n")
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)
    assert config["time_sheet"]["directory"] == "sheets/2024"


def test_load_config_nested_defaults_kept():
    """上書きしていないネストされた設定はデフォルトが残ること"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(
            "report:\n"
            "  show_path: true\n"
        )
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)
    assert config["report"]["show_path"] is True
    assert config["time_sheet"]["extension"] == ".txt"
    assert config["time_sheet"]["encoding"] == "utf-8-sig"


def test_load_config_empty_file():
    """空のファイルはデフォルト設定になること"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)
    assert config["time_sheet"]["directory"] == "time-sheets"


def test_load_config_file_not_found():
    """存在しないファイルの場合デフォルト設定を返すこと"""
    config = load_config("nonexistent.yaml")
    assert config["time_sheet"]["directory"] == "time-sheets"
    assert config["report"]["show_path"] is False


def test_load_config_defaults_not_shared():
    """返された設定を変更してもデフォルトに影響しないこと"""
    config = load_config("nonexistent.yaml")
    config["time_sheet"]["directory"] = "elsewhere"
    assert load_config("nonexistent.yaml")["time_sheet"]["directory"] == "time-sheets"


def test_load_config_invalid_yaml():
    """YAMLとして読めない場合はInvalidConfigError"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write("time_sheet: [unclosed\n")
        f.flush()
    try:
        with pytest.raises(InvalidConfigError):
            load_config(f.name)
    finally:
        os.unlink(f.name)


def test_load_config_root_not_mapping():
    """トップレベルが辞書でない場合はInvalidConfigError"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write("- time_sheet\n- report\n")
        f.flush()
    try:
        with pytest.raises(InvalidConfigError, match="mapping"):
            load_config(f.name)
    finally:
        os.unlink(f.name)


def test_merge_config_does_not_modify_inputs():
    """マージ元の辞書を変更しないこと"""
    defaults = {"a": {"b": 1, "c": 2}}
    overrides = {"a": {"b": 10}, "d": 3}
    merged = merge_config(defaults, overrides)
    assert merged == {"a": {"b": 10, "c": 2}, "d": 3}
    assert defaults == {"a": {"b": 1, "c": 2}}
