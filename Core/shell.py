import sys

from config import TITLE
from Core import parser
from Core.builtin import builtin_pwd, execute_builtin
from Core.console import PROMPT, current_datetime
from Core.executor import change_directory, run_command
from Core.interrupt import init_signal_handlers
from Core.registry import ensure_registered
from Core.script import run_script
from Core.session import Session

WELCOME = (
    "(C)2025 Tong Shun\n"
    "www.tongshunham.top\n"
    "Type help for a tutorial\n"
    "Data is priceless, operate with care. Back up at the first sign of trouble. "
    "Think twice before deleting files. Say dangerous commands out loud. "
    "Double check before you press Enter."
)


def prompt(session):
    """Generate prompt: PCMI [thời gian] [thư mục]:> """
    text = f"PCMI [{current_datetime()}] [{session.cwd()}]:> "
    session.log(text)
    return text


def dispatch(session, line):
    """
    Phân loại một dòng lệnh rồi chuyển đến nơi xử lý tương ứng.
    Thứ tự: rỗng, built-in, "cd <path>", "cd", *.pcml, lệnh shell.
    """
    session.log("Command: " + (line or "[empty]"))

    kind, arg = parser.classify_command(line)
    if kind == parser.EMPTY:
        return
    if kind == parser.BUILTIN:
        execute_builtin(session, arg)
    elif kind == parser.CHDIR:
        change_directory(session, arg)
    elif kind == parser.PWD:
        builtin_pwd(session)
    elif kind == parser.SCRIPT:
        run_script(session, arg)
    else:
        run_command(session, arg)


def read_command(session):
    """Đọc một dòng; EOF được xử lý như lệnh exit"""
    try:
        return session.console.read_line(prompt(session))
    except EOFError:
        session.console.say("")
        return "exit"


def main_loop(session):
    """Main interpreter loop"""
    session.history.setup()
    while True:
        line = read_command(session)
        session.history.record(line)
        session.clear_interrupt()
        session.save_context()
        dispatch(session, line)


def main(argv=None, session=None):
    """
    Entry point: `pcmi [script.pcml]`.
    Returns: exit code
    """
    argv = sys.argv[1:] if argv is None else argv
    session = session or Session()

    session.startup()
    if sys.stdout.isatty():
        session.console.clear_screen()
    ensure_registered(session)
    session.save_context()
    session.console.set_title(TITLE)

    if not init_signal_handlers(session):
        return 1

    session.log(WELCOME)
    session.console.say(WELCOME, PROMPT)

    if argv and parser.is_script_path(argv[0]):
        run_script(session, argv[0])
        session.shutdown()
        return 0

    try:
        main_loop(session)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    return 0


def cli():
    sys.exit(main())
