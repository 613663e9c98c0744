import sys


class ConsoleNotifier:
    """コンソール出力による通知（進捗はstdout、エラーはstderr）"""

    def __init__(self, prefix: str = "timesheet"):
        self._prefix = prefix

    def send(self, message: str) -> bool:
        print(f"[{self._prefix}] {message}", file=sys.stdout)
        return True

    def send_error(self, error: str) -> bool:
        print(f"[{self._prefix}] {error}", file=sys.stderr)
        return True
