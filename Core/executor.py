import os
import subprocess

from config import CHUNK_SIZE

LAUNCH_ERROR = "Error: cannot execute command"


def build_shell_args(shell_prefix, command):
    """
    Bọc lệnh trong shell của hệ điều hành.
    Windows: chuỗi "cmd /c <command>" (để cmd tự xử lý dấu nháy)
    POSIX:   ["/bin/sh", "-c", command]
    """
    if os.name == "nt":
        return " ".join(shell_prefix + [command])
    return shell_prefix + [command]


def run_command(session, command):
    """
    Chạy lệnh qua shell, copy output ra console và log theo từng khối.
    Returns: exit code, hoặc None nếu không khởi chạy được
    """
    session.log("Executing: " + command)
    try:
        proc = subprocess.Popen(
            build_shell_args(session.shell_prefix, command),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except OSError as e:
        session.log(LAUNCH_ERROR)
        session.console.error(f"{LAUNCH_ERROR}: {e}")
        return None

    # Giống fgets(buffer, 128): mỗi lần đọc tối đa 127 ký tự hoặc đến hết dòng
    with proc.stdout:
        while True:
            chunk = proc.stdout.readline(CHUNK_SIZE - 1)
            if not chunk:
                break
            session.log(chunk)
            session.console.write_raw(chunk)

    return proc.wait()


def resolve_target(path, cwd):
    """
    Tính thư mục đích cho "cd <path>".
    Returns: đường dẫn cần chdir, hoặc None nếu là no-op ("cd .")
    """
    if os.sep != "/":
        path = path.replace("/", os.sep)

    if len(path) >= 2 and path[0] == '"' and path[-1] == '"':
        path = path[1:-1]

    root = os.sep
    if path == "/" or path == "\\":
        return root
    if path == ".":
        return None
    if path == "..":
        # Tự cắt tại dấu phân cách cuối cùng, không nhờ hệ điều hành
        last_sep = cwd.rfind(os.sep)
        if last_sep == -1:
            return root
        return cwd[:last_sep] or root
    return path


def change_directory(session, path):
    """Returns True nếu đổi thư mục thành công (hoặc no-op)"""
    target = resolve_target(path, session.cwd())
    if target is None:
        return True
    try:
        os.chdir(target)
    except OSError:
        message = f'Error: cannot change directory to "{target}"'
        session.log(message)
        session.console.error(message)
        return False
    return True
