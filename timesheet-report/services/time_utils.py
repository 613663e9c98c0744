# services/time_utils.py
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
NOT_AVAILABLE = "n/a"


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_of_month(year: int, month: int) -> int:
    """指定月の日数を返す（うるう年考慮、不正な月は0）"""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    if month < 1 or month > 12:
        return 0
    return 31


def format_time(hour: int, minute: int) -> str:
    """HH:MM形式の文字列を返す（負の値は欠損としてn/a）"""
    if hour < 0 or minute < 0:
        return NOT_AVAILABLE
    return f"{hour:02d}:{minute:02d}"


def format_date(year: int, month: int, day: int) -> str:
    """DD.MM.YYYY形式の日付文字列を返す"""
    return f"{day:02d}.{month:02d}.{year:04d}"


def format_duration(total_minutes: int) -> str:
    """分数を「HHh MMm」形式に変換する（例: 02h 15m）"""
    hours, minutes = divmod(total_minutes, MINUTES_PER_HOUR)
    return f"{hours:02d}h {minutes:02d}m"


def duration_in_minutes(
    start_hour: int, start_minute: int, end_hour: int, end_minute: int
) -> int:
    """開始から終了までの分数を返す

    終了時刻が開始時刻より前の場合は翌日の時刻とみなす。
    両方の時刻が揃っている前提で呼び出すこと。
    """
    start = start_hour * MINUTES_PER_HOUR + start_minute
    end = end_hour * MINUTES_PER_HOUR + end_minute
    if end < start:
        end += MINUTES_PER_DAY
    return end - start


def pad(text: str, min_length: int, prepend: bool) -> str:
    """min_length文字になるまで空白を追加する（切り詰めはしない）"""
    if len(text) >= min_length:
        return text
    padding = " " * (min_length - len(text))
    return padding + text if prepend else text + padding


def pad_start(text: str, min_length: int) -> str:
    return pad(text, min_length, prepend=True)


def pad_end(text: str, min_length: int) -> str:
    return pad(text, min_length, prepend=False)
