"""
出力フォーマッターモジュール

当番表を一覧形式・テーブル形式で表示し、月別の統計情報レポートを生成します。
"""

import pandas as pd
from typing import Dict, List, Any
from tabulate import tabulate

from utils.date_utils import weekday_name
from src.pattern_walker import Schedule, ScheduleEntry, DayKind
from src.window_calculator import DateWindow


STYLES = ('list', 'table')


class OutputFormatter:
    """
    当番表出力フォーマッタークラス
    """

    def __init__(self, work_marker: str = '+', date_format: str = '%d-%m-%Y'):
        """
        初期化

        Args:
            work_marker: 勤務日の末尾に付ける記号
            date_format: 日付の書式（strftime形式）
        """
        self.work_marker = work_marker
        self.date_format = date_format

    def format_entry(self, entry: ScheduleEntry) -> str:
        """1日分を文字列化（勤務日は末尾に記号を付ける）"""
        label = entry.day.strftime(self.date_format)
        if entry.is_work:
            label += self.work_marker
        return label

    def format_labels(self, schedule: Schedule) -> List[str]:
        return [self.format_entry(entry) for entry in schedule]

    def format_schedule_list(self, schedule: Schedule) -> str:
        """
        当番表を構造化ダンプ形式でフォーマット

        例:
            Array
            (
                [0] => 02-01-2023+
                [1] => 03-01-2023
            )
        """
        output = ["Array", "("]
        for index, label in enumerate(self.format_labels(schedule)):
            output.append(f"    [{index}] => {label}")
        output.append(")")
        return "\n".join(output)

    def format_schedule_table(self, schedule: Schedule) -> str:
        """
        当番表をテーブル形式でフォーマット

        Args:
            schedule: 当番表

        Returns:
            テーブル形式の文字列
        """
        if not schedule:
            return "（なし）"

        table_data = []
        for entry in schedule:
            row = [
                entry.day.strftime(self.date_format),
                weekday_name(entry.day),
                '勤務' if entry.is_work else '休み',
                self.format_entry(entry)
            ]
            table_data.append(row)

        headers = ['日付', '曜日', '区分', '表示']

        return tabulate(table_data, headers=headers, tablefmt='simple')

    def generate_statistics(self, schedule: Schedule) -> Dict[str, Any]:
        """
        統計情報を生成

        Args:
            schedule: 当番表

        Returns:
            統計情報辞書（合計と月別の勤務日数・休み日数）
        """
        stats: Dict[str, Any] = {
            'total_days': len(schedule),
            'work_days': 0,
            'off_days': 0,
            'first_date': None,
            'last_date': None,
            'by_month': {}
        }
        if not schedule:
            return stats

        df = pd.DataFrame(
            [{'date': entry.day, 'kind': entry.kind.value} for entry in schedule]
        )
        df['month'] = pd.to_datetime(df['date']).dt.strftime('%Y-%m')

        counts = df.groupby(['month', 'kind']).size().unstack(fill_value=0)
        for kind in (DayKind.WORK.value, DayKind.OFF.value):
            if kind not in counts.columns:
                counts[kind] = 0

        stats['work_days'] = int(counts[DayKind.WORK.value].sum())
        stats['off_days'] = int(counts[DayKind.OFF.value].sum())
        stats['first_date'] = schedule[0].day
        stats['last_date'] = schedule[-1].day
        stats['by_month'] = {
            month: {
                'work': int(row[DayKind.WORK.value]),
                'off': int(row[DayKind.OFF.value])
            }
            for month, row in counts.iterrows()
        }
        return stats

    def print_statistics_report(self, statistics: Dict[str, Any]) -> str:
        """
        統計情報レポートを生成

        Args:
            statistics: generate_statisticsの戻り値

        Returns:
            レポート文字列
        """
        output = ["\n【統計情報】"]

        by_month = statistics.get('by_month', {})
        if by_month:
            table_data = [
                [month, counts['work'], counts['off'], counts['work'] + counts['off']]
                for month, counts in sorted(by_month.items())
            ]
            headers = ['月', '勤務', '休み', '合計']
            output.append(tabulate(table_data, headers=headers, tablefmt='simple'))

        if statistics.get('first_date'):
            output.append(
                f"\n期間内の日付: {statistics['first_date']} ～ {statistics['last_date']}"
            )
        output.append(f"\n合計: {statistics['total_days']}日")
        output.append(f"  勤務: {statistics['work_days']}日")
        output.append(f"  休み: {statistics['off_days']}日")

        return "\n".join(output)

    def print_schedule(
        self,
        schedule: Schedule,
        window: DateWindow,
        style: str = 'list',
        statistics: Dict[str, Any] = None
    ) -> None:
        """
        当番表と統計情報を標準出力に表示

        Args:
            schedule: 当番表
            window: 対象期間
            style: 'list' または 'table'
            statistics: 統計情報（オプション）
        """
        if style not in STYLES:
            raise ValueError(f"不明な出力形式です: {style}")

        if style == 'table':
            print(f"期間: {window.start} ～ {window.end} ({window.number_days}日)")
            print(self.format_schedule_table(schedule))
        else:
            print(self.format_schedule_list(schedule))

        if statistics:
            print(self.print_statistics_report(statistics))
