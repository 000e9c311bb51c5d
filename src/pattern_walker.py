"""
勤務パターン展開モジュール

対象期間の各日を「土日は休み → 勤務1日 → 休み2日」のローテーションで
WORK / OFF に分類します。
期間（number_days）を超えた日は追加せずに切り捨てます。
"""

from datetime import date
from enum import Enum
from typing import List, NamedTuple

from utils.date_utils import offset_date, is_weekend
from utils.logger import setup_logger
from src.window_calculator import DateWindow


logger = setup_logger(__name__)

REST_DAYS_AFTER_WORK = 2


class DayKind(Enum):
    WORK = 'work'
    OFF = 'off'


class ScheduleEntry(NamedTuple):
    """当番表の1日分"""
    day: date
    kind: DayKind

    @property
    def is_work(self) -> bool:
        return self.kind is DayKind.WORK


Schedule = List[ScheduleEntry]


class DayCursor:
    """
    期間開始日からのオフセット（日数）

    1回の展開処理だけが所有する。位置は1から始まり、number_days + 1 まで進む。
    """

    def __init__(self, number_days: int, start: int = 1):
        self.position = start
        self.number_days = number_days

    def in_window(self) -> bool:
        return self.position <= self.number_days

    def advance(self) -> int:
        """現在位置を返して1日進める"""
        current = self.position
        self.position += 1
        return current


class PatternWalker:
    """
    勤務パターン展開クラス

    状態遷移: 土日スキャン → 勤務 → 休み1 → 休み2 → 土日スキャン
    """

    def __init__(self, window: DateWindow):
        """
        初期化

        Args:
            window: 対象期間
        """
        self.window = window

    def walk(self) -> Schedule:
        """
        期間全体を展開して当番表を作成

        Returns:
            日付順のScheduleEntryリスト
        """
        schedule: Schedule = []
        cursor = DayCursor(self.window.number_days)

        while cursor.in_window():
            self._add_weekend_days_off(cursor, schedule)
            self._add_day(cursor, schedule, DayKind.WORK)
            for _ in range(REST_DAYS_AFTER_WORK):
                self._add_day(cursor, schedule, DayKind.OFF)

        work_days = sum(1 for entry in schedule if entry.is_work)
        logger.debug(
            f"展開完了: {len(schedule)}日 (勤務{work_days}日, 休み{len(schedule) - work_days}日)"
        )
        return schedule

    def _add_weekend_days_off(self, cursor: DayCursor, schedule: Schedule) -> None:
        """連続する土日を休みとして追加（期間外に出たら終了）"""
        while cursor.in_window() and is_weekend(self._day_at(cursor.position)):
            self._add_day(cursor, schedule, DayKind.OFF)

    def _add_day(self, cursor: DayCursor, schedule: Schedule, kind: DayKind) -> None:
        # 期間外の日は追加しないが、カーソルは必ず進める
        if cursor.in_window():
            schedule.append(ScheduleEntry(self._day_at(cursor.position), kind))
        cursor.advance()

    def _day_at(self, offset: int) -> date:
        return offset_date(self.window.start, offset)


def walk(window: DateWindow) -> Schedule:
    """対象期間を展開して当番表を返す"""
    return PatternWalker(window).walk()
