"""
入力値検証モジュール

月・年・期間の入力値を日付計算の前に検証します。
検証に失敗した場合はInvalidInputErrorを送出し、終了するかどうかは呼び出し側が決めます。
"""

import re
from typing import Any


NOT_AN_INTEGER = "is not an integer"
MONTH_OUT_OF_RANGE = "is not in range 1-12"
NOT_POSITIVE = "is not a positive integer"
YEAR_OUT_OF_RANGE = "is not in range 1-9999"
DATE_OUT_OF_RANGE = "is out of the supported date range"

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidInputError(ValueError):
    """入力値が制約を満たさない場合のエラー"""

    def __init__(self, value: Any, constraint: str = NOT_AN_INTEGER):
        self.value = value
        self.constraint = constraint
        super().__init__(f"{value} - {constraint}")

    def diagnostic(self) -> str:
        """ユーザー向けのエラーメッセージ"""
        return f"Error: {self.value} - {self.constraint}"


def check_value(value: Any) -> int:
    """
    値が整数として解釈できるか検証し、intに変換して返す

    bool・float・数字以外の文字列は不正とする。"3" のような整数文字列は受け付ける。

    Args:
        value: 検証する値

    Returns:
        整数値

    Raises:
        InvalidInputError: 整数として解釈できない場合
    """
    if isinstance(value, bool):
        raise InvalidInputError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if INTEGER_PATTERN.fullmatch(text):
            return int(text)
    raise InvalidInputError(value)


def check_month(value: Any) -> int:
    month = check_value(value)
    if not 1 <= month <= 12:
        raise InvalidInputError(value, MONTH_OUT_OF_RANGE)
    return month


def check_period(value: Any) -> int:
    period = check_value(value)
    if period < 1:
        raise InvalidInputError(value, NOT_POSITIVE)
    return period


def check_year(value: Any) -> int:
    year = check_value(value)
    if not 1 <= year <= 9999:
        raise InvalidInputError(value, YEAR_OUT_OF_RANGE)
    return year
