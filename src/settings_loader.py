"""
設定ファイル読み込みモジュール
"""
import copy
import yaml
from pathlib import Path
from typing import Any, Dict, Union
from utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_SETTINGS_PATH = 'config/settings.yaml'

DEFAULT_SETTINGS: Dict[str, Any] = {
    'schedule': {
        'default_period': 1,
    },
    'output': {
        'work_marker': '+',
        'date_format': '%d-%m-%Y',
        'style': 'list',
    },
    'logging': {
        'level': 'INFO',
        'log_file': None,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(settings_path: Union[str, Path] = DEFAULT_SETTINGS_PATH) -> Dict[str, Any]:
    """
    settings.yamlを読み込み、デフォルト設定にマージする

    Args:
        settings_path: settings.yamlのパス

    Returns:
        設定辞書（ファイルが無い場合はデフォルト設定）

    Raises:
        ValueError: トップレベルが辞書でない場合
    """
    path = Path(settings_path)
    if not path.exists():
        logger.warning(f"設定ファイルが見つかりません（デフォルト設定を使用）: {path}")
        return copy.deepcopy(DEFAULT_SETTINGS)

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not data:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"設定ファイルの形式が不正です: {path}")

    logger.debug(f"設定ファイル読み込み完了: {path}")
    return _merge(DEFAULT_SETTINGS, data)
