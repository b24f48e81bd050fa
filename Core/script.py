from Core.console import INFO
from Core.executor import run_command

ECHO_OFF = "@echo off"


def echo_line(session, path, line):
    session.console.say(f"{path}> {line}", INFO)


def run_script(session, path):
    """
    Chạy file .pcml từng dòng một.
      * Dòng đầu chứa "@echo off" -> tắt echo, không chạy dòng đó
      * Các dòng sau: bỏ qua dòng rỗng và dòng bắt đầu bằng "@"
      * Mỗi dòng là một lệnh shell nguyên văn (không qua built-in)
      * Nếu cờ ngắt được bật: xóa cờ và dừng
    Returns: số lệnh đã chạy, hoặc None nếu không mở được file
    """
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError:
        session.console.error(f"Error: cannot open file {path}")
        return None

    executed = 0
    with f:
        first = f.readline().rstrip("\r\n")
        echo_on = ECHO_OFF not in first
        if echo_on and first:
            echo_line(session, path, first)
            run_command(session, first)
            executed += 1

        for raw in f:
            if session.is_interrupted():
                session.clear_interrupt()
                break

            line = raw.rstrip("\r\n")
            if not line or line[0] == "@":
                continue

            if echo_on:
                echo_line(session, path, line)
            run_command(session, line)
            executed += 1

    return executed
