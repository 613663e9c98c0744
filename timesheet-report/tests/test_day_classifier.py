from report.day_classifier import DayStatus, classify_day
from services.record_reader import TimeOfDay


def test_both_missing_is_absent():
    """開始・終了ともに無ければ欠勤"""
    result = classify_day(None, None)
    assert result.status is DayStatus.ABSENT
    assert result.duration == "n/a"
    assert result.remarks == "absent"


def test_one_missing_needs_clarification():
    """片方のみ欠けていれば要確認"""
    for start, end in [(None, TimeOfDay(17, 0)), (TimeOfDay(9, 0), None)]:
        result = classify_day(start, end)
        assert result.status is DayStatus.CLARIFICATION_NEEDED
        assert result.minutes is None
        assert result.duration == "n/a"
        assert result.remarks == "clarification needed"


def test_both_present():
    """両方揃っていれば出勤と勤務時間"""
    result = classify_day(TimeOfDay(9, 0), TimeOfDay(17, 30))
    assert result.status is DayStatus.PRESENT
    assert result.minutes == 510
    assert result.duration == "08h 30m"
    assert result.remarks == "fully present"


def test_night_shift():
    result = classify_day(TimeOfDay(22, 0), TimeOfDay(6, 0))
    assert result.duration == "08h 00m"
