# report/day_classifier.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from services.record_reader import TimeOfDay
from services.time_utils import NOT_AVAILABLE, duration_in_minutes, format_duration


class DayStatus(Enum):
    PRESENT = "fully present"
    ABSENT = "absent"
    CLARIFICATION_NEEDED = "clarification needed"


@dataclass(frozen=True)
class DayResult:
    status: DayStatus
    minutes: Optional[int]  # PRESENTの場合のみ

    @property
    def duration(self) -> str:
        if self.minutes is None:
            return NOT_AVAILABLE
        return format_duration(self.minutes)

    @property
    def remarks(self) -> str:
        return self.status.value


def classify_day(start: Optional[TimeOfDay], end: Optional[TimeOfDay]) -> DayResult:
    """開始・終了時刻の有無から1日分の状態と勤務時間を判定する"""
    if start is None and end is None:
        return DayResult(status=DayStatus.ABSENT, minutes=None)

    if start is None or end is None:
        return DayResult(status=DayStatus.CLARIFICATION_NEEDED, minutes=None)

    minutes = duration_in_minutes(start.hour, start.minute, end.hour, end.minute)
    return DayResult(status=DayStatus.PRESENT, minutes=minutes)
