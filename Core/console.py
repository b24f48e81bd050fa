import os
import re
import sys
from datetime import datetime

from rich.console import Console
from rich.text import Text

# Màu giống console gốc: 10 xanh lá, 11 xanh lơ, 12 đỏ, 14 vàng
DEFAULT = "green"
PROMPT = "cyan"
ERROR = "red"
INFO = "yellow"

ANSI_ESCAPE = re.compile(r"(\x1b\[[0-9;]*m)")


def current_datetime():
    """Timestamp dạng YYYY:MM:DD:HH:MM:SS.mmm"""
    now = datetime.now()
    return now.strftime("%Y:%m:%d:%H:%M:%S") + f".{now.microsecond // 1000:03d}"


class ConsoleOutput:
    """Thin wrapper over rich so every message goes through one place."""

    def __init__(self, console=None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    def say(self, message, style=DEFAULT, end="\n"):
        self.console.print(Text(message, style=style), end=end)

    def info(self, message):
        self.say(message, INFO)

    def error(self, message):
        self.say(message, ERROR)

    def status(self, message, success):
        """In dòng [OK]/[FAIL]"""
        if success:
            self.say(f"[OK] {message}", DEFAULT)
        else:
            self.say(f"[FAIL] {message}", ERROR)

    def write_raw(self, chunk):
        # Output của tiến trình con: ghi nguyên văn, không xử lý markup
        out = self.console.file
        out.write(chunk)
        out.flush()

    def render_prompt(self, prompt):
        """
        Render prompt có màu thành chuỗi cho input().
        Mã ANSI được bọc bởi \\001...\\002 để readline tính đúng độ dài prompt.
        """
        with self.console.capture() as capture:
            self.console.print(Text(prompt, style=PROMPT), end="")
        return ANSI_ESCAPE.sub("\001\\1\002", capture.get())

    def read_line(self, prompt):
        # readline phải biết prompt để vẽ lại khi duyệt history
        return input(self.render_prompt(prompt))

    def clear_screen(self):
        os.system("cls" if os.name == "nt" else "clear")

    def set_title(self, title):
        if os.name == "nt":
            os.system(f"title {title}")
        elif sys.stdout.isatty():
            sys.stdout.write(f"\033]0;{title}\007")
            sys.stdout.flush()