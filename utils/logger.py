"""
ログ設定モジュール

各モジュールは setup_logger(__name__) で自分のロガーを作り、
CLIは configure_loggers() でまとめてログレベルと出力先を切り替えます。
"""
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# プロジェクト内モジュールのロガー名の接頭辞
PROJECT_LOGGER_PREFIXES = ('src.', 'utils.', 'main')


def setup_logger(name: str = "rota", level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    ロガーをセットアップする

    ログは標準エラー出力に書く（標準出力は当番表の表示に使う）。

    Args:
        name: ロガー名
        level: ログレベル（DEBUG, INFO, WARNING, ERROR）
        log_file: ログファイルパス（Noneの場合はコンソールのみ）

    Returns:
        設定済みのロガー
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(level).upper()))
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def project_logger_names(prefixes: Iterable[str] = PROJECT_LOGGER_PREFIXES) -> List[str]:
    """作成済みのロガーのうちプロジェクト内モジュールのものを返す"""
    prefixes = tuple(prefixes)
    return sorted(
        name for name in logging.root.manager.loggerDict
        if name.startswith(prefixes)
    )


def configure_loggers(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    プロジェクト内の全ロガーのレベルと出力先を揃える

    --debug や settings.yaml の logging.level をsrc.*にも反映するために使う。
    """
    for name in project_logger_names():
        setup_logger(name, level, log_file)
