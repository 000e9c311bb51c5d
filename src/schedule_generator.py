"""
当番表生成モジュール

入力値の検証、対象期間の計算、勤務パターンの展開をまとめて実行します。
表示は行いません。
"""

from datetime import date
from typing import Any, Callable, List, Optional, Tuple

from utils.logger import setup_logger
from src.window_calculator import DateWindow, compute_window
from src.pattern_walker import Schedule, walk
from src.output_formatter import OutputFormatter


logger = setup_logger(__name__)


def generate_schedule(
    month: Optional[Any] = None,
    year: Optional[Any] = None,
    period: Any = 1,
    today: Callable[[], date] = date.today
) -> Tuple[DateWindow, Schedule]:
    """
    当番表を生成

    Args:
        month: 開始月（省略時は今月）
        year: 開始年（省略時は今年）
        period: 期間（月数）
        today: 現在日付を返す関数

    Returns:
        (対象期間, 当番表) のタプル

    Raises:
        InvalidInputError: 入力値が不正な場合（当番表は生成されない）
    """
    window = compute_window(month, year, period, today=today)
    schedule = walk(window)
    logger.info(f"当番表生成完了: {len(schedule)}日")
    return window, schedule


def generate_labels(
    month: Optional[Any] = None,
    year: Optional[Any] = None,
    period: Any = 1,
    today: Callable[[], date] = date.today,
    formatter: OutputFormatter = None
) -> List[str]:
    """当番表を日付文字列のリスト（勤務日は記号付き）で返す"""
    formatter = formatter or OutputFormatter()
    _, schedule = generate_schedule(month, year, period, today=today)
    return formatter.format_labels(schedule)
