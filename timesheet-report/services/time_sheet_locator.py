# services/time_sheet_locator.py
from dataclasses import dataclass
from pathlib import Path


class InvalidTimeSheetNameError(ValueError):
    """タイムシート名が「年-月-社員ID」形式でない場合の例外"""


@dataclass(frozen=True)
class TimeSheetName:
    year: int
    month: int
    employee_id: str


def parse_time_sheet_name(name: str) -> TimeSheetName:
    """「2024-02-E042」形式の名前から年・月・社員IDを取り出す"""
    parts = name.split("-", 2)
    if len(parts) != 3 or not parts[2]:
        raise InvalidTimeSheetNameError(f"invalid time sheet name: {name!r}")
    try:
        year = int(parts[0])
        month = int(parts[1])
    except ValueError:
        raise InvalidTimeSheetNameError(f"invalid time sheet name: {name!r}") from None
    return TimeSheetName(year=year, month=month, employee_id=parts[2])


def build_time_sheet_path(directory: str, name: str, extension: str = ".txt") -> Path:
    return Path(directory) / f"{name}{extension}"
