# services/record_reader.py
import re
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

FIELD_COUNT = 5
_SEPARATOR = re.compile(r"[\s,;]+")
_INTEGER = re.compile(r"-?[0-9]+")
BOM = "\ufeff"


class MalformedRecordError(ValueError):
    """タイムシートの行が解析できない場合の例外"""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class TimeOfDay:
    hour: int
    minute: int

    @classmethod
    def from_fields(cls, hour: int, minute: int) -> Optional["TimeOfDay"]:
        """負の値を欠損として扱い、揃っていればTimeOfDayを返す"""
        if hour < 0 or minute < 0:
            return None
        return cls(hour, minute)


@dataclass(frozen=True)
class DayRecord:
    day: int
    start: Optional[TimeOfDay]
    end: Optional[TimeOfDay]


def _parse_int(token: str, line_number: Optional[int]) -> int:
    # ASCII数字のみ（int()が受け付ける全角数字や「_」区切りは不可）
    if not _INTEGER.fullmatch(token):
        raise MalformedRecordError(f"not an integer: {token!r}", line_number)
    return int(token)


def _parse_time(hour: int, minute: int, line_number: Optional[int]) -> Optional[TimeOfDay]:
    time_of_day = TimeOfDay.from_fields(hour, minute)
    if time_of_day is None:
        return None
    if hour > 23 or minute > 59:
        raise MalformedRecordError(f"invalid time: {hour}:{minute}", line_number)
    return time_of_day


def parse_record(line: str, line_number: Optional[int] = None) -> DayRecord:
    """1行を「日 開始時 開始分 終了時 終了分」として解析する"""
    tokens = [t for t in _SEPARATOR.split(line.strip()) if t]
    if len(tokens) != FIELD_COUNT:
        raise MalformedRecordError(
            f"expected {FIELD_COUNT} fields, got {len(tokens)}", line_number
        )

    day, start_hour, start_minute, end_hour, end_minute = (
        _parse_int(t, line_number) for t in tokens
    )
    if day < 1:
        raise MalformedRecordError(f"invalid day: {day}", line_number)

    return DayRecord(
        day=day,
        start=_parse_time(start_hour, start_minute, line_number),
        end=_parse_time(end_hour, end_minute, line_number),
    )


class RecordReader:
    """テキスト行から日次レコードを順に読み出す（一度きり・前方のみ）"""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self._line_number = 0

    def next_record(self) -> Optional[DayRecord]:
        """次のレコードを返す。空行は読み飛ばし、終端ではNoneを返す"""
        for line in self._lines:
            self._line_number += 1
            if self._line_number == 1:
                line = line.lstrip(BOM)
            if not line.strip():
                continue
            return parse_record(line, self._line_number)
        return None

    def __iter__(self) -> Iterator[DayRecord]:
        while True:
            record = self.next_record()
            if record is None:
                return
            yield record


@contextmanager
def open_time_sheet(path, encoding: str = "utf-8-sig") -> Iterator[RecordReader]:
    """タイムシートを開いてRecordReaderを返す（終了時に必ずクローズ）"""
    with open(Path(path), "r", encoding=encoding) as f:
        yield RecordReader(f)
