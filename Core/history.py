import os
import sys

from config import MAX_HISTORY

try:
    import readline
except ImportError:
    import pyreadline3 as readline

# Những dòng không đưa vào history
SKIPPED = ("", "exit")


class CommandHistory:
    """
    History của prompt PCMI, lưu trong thư mục trạng thái cùng các file .pcmi.
    Shell tự quyết định dòng nào được ghi (auto history của readline bị tắt).
    """

    def __init__(self, path, max_length=MAX_HISTORY):
        self.path = path
        self.max_length = max_length

    def setup(self):
        """Tắt auto history; gán phím chỉ khi chạy trong terminal thật"""
        if hasattr(readline, "set_auto_history"):
            readline.set_auto_history(False)
        if not sys.stdin.isatty():
            return
        try:
            readline.parse_and_bind("set editing-mode emacs")
            readline.parse_and_bind("\\e[A: previous-history")
            readline.parse_and_bind("\\e[B: next-history")
        except Exception as e:
            print(f"Warning: Could not configure line editing: {e}", file=sys.stderr)

    def entries(self):
        length = readline.get_current_history_length()
        return [readline.get_history_item(i) for i in range(1, length + 1)]

    def record(self, line):
        """
        Ghi một dòng người dùng nhập.
        Returns: True nếu dòng được thêm vào history
        """
        if line.strip() in SKIPPED:
            return False
        length = readline.get_current_history_length()
        if length and readline.get_history_item(length) == line:
            return False
        readline.add_history(line)
        return True

    def load(self):
        if not os.path.exists(self.path):
            return False
        try:
            readline.read_history_file(self.path)
        except OSError as e:
            print(f"Warning: Could not load history {self.path}: {e}", file=sys.stderr)
            return False
        readline.set_history_length(self.max_length)
        return True

    def save(self):
        try:
            readline.set_history_length(self.max_length)
            readline.write_history_file(self.path)
        except OSError as e:
            print(f"Warning: Could not save history {self.path}: {e}", file=sys.stderr)
            return False
        return True
