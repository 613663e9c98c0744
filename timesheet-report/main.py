"""タイムシートレポート - エントリーポイント"""
import argparse
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from services.config_loader import InvalidConfigError, load_config
from services.console_notifier import ConsoleNotifier
from services.record_reader import MalformedRecordError, open_time_sheet
from services.time_sheet_locator import (
    InvalidTimeSheetNameError,
    build_time_sheet_path,
    parse_time_sheet_name,
)
from report.renderer import print_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timesheet-report",
        description="Print the monthly report of a time sheet.",
    )
    parser.add_argument(
        "name",
        nargs="?",
        help="Time sheet name in the form YEAR-MONTH-EMPLOYEE (without extension).",
    )
    parser.add_argument("--config", default=None, help="Path to the YAML config file.")
    parser.add_argument("--directory", default=None, help="Directory holding the time sheets.")
    return parser


def resolve_config(config_path: Optional[str] = None, directory: Optional[str] = None) -> dict:
    """設定ファイル・環境変数・引数の順で設定を決定する"""
    load_dotenv()
    config = load_config(config_path or os.getenv("TIMESHEET_CONFIG", "config.yaml"))

    ts_config = config["time_sheet"]
    ts_config["directory"] = directory or os.getenv("TIMESHEET_DIR", ts_config["directory"])
    return config


def run_report(name: str, config: dict, notifier: ConsoleNotifier) -> int:
    """1件のタイムシートからレポートを出力する"""
    try:
        sheet = parse_time_sheet_name(name)
    except InvalidTimeSheetNameError:
        notifier.send_error("Invalid file name format.")
        return 1

    ts_config = config["time_sheet"]
    path = build_time_sheet_path(ts_config["directory"], name, ts_config["extension"])
    if config["report"]["show_path"]:
        notifier.send(f"Path: {path}")

    try:
        with open_time_sheet(path, encoding=ts_config["encoding"]) as reader:
            print_report(sheet.year, sheet.month, sheet.employee_id, reader)
    except MalformedRecordError as e:
        notifier.send_error(f"Malformed time sheet record: {e}")
        return 1
    except (OSError, UnicodeDecodeError):
        notifier.send_error("Error opening time sheet file.")
        return 1

    return 0


def main(argv=None) -> int:
    """メイン起動処理"""
    args = build_parser().parse_args(argv)
    notifier = ConsoleNotifier()

    if not args.name:
        notifier.send_error("Input file name is missing.")
        return 1

    try:
        config = resolve_config(args.config, args.directory)
    except InvalidConfigError as e:
        notifier.send_error(f"Invalid config file: {e}")
        return 1
    return run_report(args.name, config, notifier)


if __name__ == "__main__":
    sys.exit(main())
