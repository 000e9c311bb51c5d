"""
日付処理ユーティリティモジュール
"""
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta


WEEKDAY_NAMES = ['月', '火', '水', '木', '金', '土', '日']


def first_day_of_month(year: int, month: int) -> date:
    """
    指定年月の1日を返す

    Args:
        year: 年
        month: 月（1～12）

    Returns:
        月初日
    """
    return date(year, month, 1)


def add_months(start_date: date, months: int) -> date:
    """
    開始日からNヶ月後の日付を計算する

    月末を超える場合はrelativedeltaの規則に従い月末日に丸められる。

    Args:
        start_date: 開始日
        months: 加算する月数

    Returns:
        Nヶ月後の日付
        例: (2023-01-01, 2) -> 2023-03-01
    """
    return start_date + relativedelta(months=months)


def days_between(start_date: date, end_date: date) -> int:
    """開始日から終了日までの経過日数"""
    return (end_date - start_date).days


def offset_date(start_date: date, offset: int) -> date:
    """開始日からoffset日後の日付"""
    return start_date + timedelta(days=offset)


def is_weekend(target_date: date) -> bool:
    """
    指定日が土日かどうかを判定する

    Args:
        target_date: 判定対象の日付

    Returns:
        土日（ISO曜日番号6または7）の場合True
    """
    return target_date.isoweekday() in [6, 7]


def weekday_name(target_date: date) -> str:
    return WEEKDAY_NAMES[target_date.weekday()]
