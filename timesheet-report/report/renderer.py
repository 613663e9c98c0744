# report/renderer.py
import sys
from typing import Iterable, Iterator, Optional, TextIO

from report.day_classifier import DayResult, DayStatus, classify_day
from report.totals import ReportAggregator, ReportTotals
from services.record_reader import DayRecord, MalformedRecordError, TimeOfDay
from services.time_utils import (
    NOT_AVAILABLE,
    days_of_month,
    format_date,
    format_duration,
    format_time,
    pad_end,
)

BORDER_LENGTH = 70
THIN_BORDER = "-" * BORDER_LENGTH
THICK_BORDER = "=" * BORDER_LENGTH
DELIMITER = " | "

DATE_FIELD_WIDTH = 10
TIME_FIELD_WIDTH = 5
DURATION_FIELD_WIDTH = 8
REMARKS_FIELD_WIDTH = (
    BORDER_LENGTH - 2 * TIME_FIELD_WIDTH - DATE_FIELD_WIDTH - DURATION_FIELD_WIDTH
)
FOOTER_LABEL_WIDTH = 15


def format_line(date: str, start: str, end: str, duration: str, remarks: str) -> str:
    """5列を固定幅で整形して区切り文字で連結する"""
    return DELIMITER.join([
        pad_end(date, DATE_FIELD_WIDTH),
        pad_end(start, TIME_FIELD_WIDTH),
        pad_end(end, TIME_FIELD_WIDTH),
        pad_end(duration, DURATION_FIELD_WIDTH),
        pad_end(remarks, REMARKS_FIELD_WIDTH),
    ])


def _format_time_of_day(value: Optional[TimeOfDay]) -> str:
    if value is None:
        return NOT_AVAILABLE
    return format_time(value.hour, value.minute)


def format_day_line(date: str, record: Optional[DayRecord], result: DayResult) -> str:
    start = record.start if record else None
    end = record.end if record else None
    return format_line(
        date,
        _format_time_of_day(start),
        _format_time_of_day(end),
        result.duration,
        result.remarks,
    )


def header_lines(year: int, month: int, employee_id: str) -> list[str]:
    """ヘッダー（枠線・年月・社員ID・列名）"""
    return [
        THICK_BORDER,
        f"YEAR: {year} / MONTH: {month:02d} / ID: {employee_id}",
        THICK_BORDER,
        format_line("DATE", "START", "END", "DURATION", "REMARKS"),
        THIN_BORDER,
    ]


def _footer_line(label: str, value) -> str:
    return pad_end(label, FOOTER_LABEL_WIDTH) + DELIMITER + str(value)


def footer_lines(totals: ReportTotals) -> list[str]:
    """フッター（集計値）"""
    return [
        THICK_BORDER,
        _footer_line("TOTAL RECORDS", totals.total_records),
        _footer_line("INCOMPLETE DAYS", totals.incomplete_days),
        _footer_line("ABSENT DAYS", totals.absent_days),
        _footer_line("PRESENT DAYS", totals.present_days),
        _footer_line("WORKING TIME", format_duration(totals.working_minutes)),
        THICK_BORDER,
    ]


def _next_record(
    records: Iterator[DayRecord], previous_day: int, days: int
) -> Optional[DayRecord]:
    """次のレコードを取り出し、日付順・月内であることを検証する"""
    record = next(records, None)
    if record is None:
        return None
    if record.day <= previous_day:
        raise MalformedRecordError(
            f"day {record.day} is duplicated or out of order (after day {previous_day})"
        )
    if record.day > days:
        raise MalformedRecordError(f"day {record.day} is outside 1..{days}")
    return record


def build_report(
    year: int, month: int, employee_id: str, records: Iterable[DayRecord]
) -> list[str]:
    """レポート全体を行リストとして組み立てる

    レコードは日付の昇順・1日1件であること。レコードの無い日は欠勤扱い。
    不正な月（日数0）の場合は日別行を出さず、レコードも読まない。
    """
    lines = header_lines(year, month, employee_id)
    aggregator = ReportAggregator()
    days = days_of_month(year, month)

    if days > 0:
        record_iter = iter(records)
        pending = _next_record(record_iter, 0, days)
        for day in range(1, days + 1):
            record = None
            if pending is not None and pending.day == day:
                record = pending
                pending = _next_record(record_iter, day, days)

            if record is None:
                result = DayResult(status=DayStatus.ABSENT, minutes=None)
            else:
                result = classify_day(record.start, record.end)

            aggregator.add_day(result, has_record=record is not None)
            lines.append(format_day_line(format_date(year, month, day), record, result))

    lines.extend(footer_lines(aggregator.totals))
    return lines


def print_report(
    year: int, month: int, employee_id: str, records: Iterable[DayRecord],
    out: Optional[TextIO] = None,
):
    """レポートを出力する（組み立て完了後にまとめて出力するため途中で壊れた出力は出ない）"""
    if out is None:
        out = sys.stdout
    lines = build_report(year, month, employee_id, records)
    for line in lines:
        print(line, file=out)
