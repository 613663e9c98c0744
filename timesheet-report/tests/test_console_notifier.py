from unittest.mock import patch
from services.console_notifier import ConsoleNotifier


def test_console_notifier_send(capsys):
    """メッセージがstdoutに出力されること"""
    notifier = ConsoleNotifier()
    result = notifier.send("Path: time-sheets/2024-02-E001.txt")
    assert result is True
    assert capsys.readouterr().out == "[timesheet] Path: time-sheets/2024-02-E001.txt\n"


def test_console_notifier_send_error(capsys):
    """エラーがstderrに出力されること"""
    notifier = ConsoleNotifier()
    result = notifier.send_error("Error opening time sheet file.")
    captured = capsys.readouterr()
    assert result is True
    assert captured.out == ""
    assert captured.err == "[timesheet] Error opening time sheet file.\n"


def test_console_notifier_prefix():
    notifier = ConsoleNotifier(prefix="report")
    with patch("builtins.print") as mock_print:
        notifier.send("done")
    mock_print.assert_called_once()
    assert mock_print.call_args.args[0] == "[report] done"
