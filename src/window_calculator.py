"""
期間計算モジュール

開始年月と期間（月数）から当番表の対象期間を計算します。
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Optional

from utils.date_utils import first_day_of_month, add_months, days_between
from utils.logger import setup_logger
from src.input_validator import (
    InvalidInputError,
    DATE_OUT_OF_RANGE,
    check_month,
    check_year,
    check_period
)


logger = setup_logger(__name__)


@dataclass(frozen=True)
class DateWindow:
    """
    当番表の対象期間

    Attributes:
        start: 開始日（月初日）
        end: 終了日（start + period ヶ月、期間に含まない）
        number_days: startからendまでの日数
    """
    start: date
    end: date
    number_days: int


def compute_window(
    month: Optional[Any] = None,
    year: Optional[Any] = None,
    period: Any = 1,
    today: Callable[[], date] = date.today
) -> DateWindow:
    """
    対象期間を計算する

    month / year が省略された場合は today() の年月を使う。
    入力値の検証は日付計算より前に行う。

    Args:
        month: 開始月（1～12、省略可）
        year: 開始年（省略可）
        period: 期間（月数、1以上）
        today: 現在日付を返す関数（テストで差し替え可能）

    Returns:
        DateWindow

    Raises:
        InvalidInputError: 入力値が不正な場合
    """
    if month is not None:
        month = check_month(month)
    if year is not None:
        year = check_year(year)
    period = check_period(period)

    if month is None or year is None:
        current = today()
        if month is None:
            month = current.month
        if year is None:
            year = current.year

    start = first_day_of_month(year, month)
    try:
        end = add_months(start, period)
    except (ValueError, OverflowError):
        # 終了日がdate.max（9999-12-31）を超える
        raise InvalidInputError(period, DATE_OUT_OF_RANGE)
    number_days = days_between(start, end)

    logger.info(f"対象期間: {start} ～ {end} ({number_days}日)")
    return DateWindow(start=start, end=end, number_days=number_days)
