# services/config_loader.py
import copy

import yaml
from pathlib import Path

DEFAULT_CONFIG = {
    "time_sheet": {
        "directory": "time-sheets",
        "extension": ".txt",
        "encoding": "utf-8-sig",
    },
    "report": {
        "show_path": False,
    },
}


class InvalidConfigError(ValueError):
    """設定ファイルの内容が読み取れない場合の例外"""


def merge_config(defaults: dict, overrides: dict) -> dict:
    """overridesでdefaultsを再帰的に上書きした新しい設定を返す（元の辞書は変更しない）"""
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = merge_config(current, value)
        merged[key] = value
    return merged


def load_config(path: str = "config.yaml") -> dict:
    """YAML設定を読み込んでデフォルトに重ねる。ファイルが無ければデフォルトのみ"""
    config_path = Path(path)
    if not config_path.is_file():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        overrides = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"{config_path}: {e}") from e
    if not isinstance(overrides, dict):
        raise InvalidConfigError(f"{config_path}: top level must be a mapping")
    return merge_config(DEFAULT_CONFIG, overrides)
