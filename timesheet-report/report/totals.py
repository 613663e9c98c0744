# report/totals.py
from dataclasses import dataclass, replace

from report.day_classifier import DayResult, DayStatus


@dataclass
class ReportTotals:
    total_records: int = 0     # タイムシートから読んだレコード数
    present_days: int = 0      # 開始・終了が揃った日
    absent_days: int = 0       # 開始・終了ともに無い日（レコード無しを含む）
    incomplete_days: int = 0   # どちらか一方が欠けている日
    working_minutes: int = 0   # PRESENT日の勤務時間合計


class ReportAggregator:
    """レポート1回分の集計を保持する"""

    def __init__(self):
        self._totals = ReportTotals()

    def add_day(self, result: DayResult, has_record: bool):
        """1日分の判定結果を集計に反映する"""
        if has_record:
            self._totals.total_records += 1

        if result.status is DayStatus.PRESENT:
            self._totals.present_days += 1
            self._totals.working_minutes += result.minutes
        elif result.status is DayStatus.CLARIFICATION_NEEDED:
            self._totals.incomplete_days += 1
        else:
            self._totals.absent_days += 1

    @property
    def totals(self) -> ReportTotals:
        """フッター用のスナップショットを返す"""
        return replace(self._totals)
