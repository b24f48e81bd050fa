import sys

from config import NETSTAT_COMMAND, PCML_EXTENSION, ROUTE_COMMAND
from Core.executor import run_command
from Core.registry import register_file_association

PCMI_INFO = (
    "PCMI, short for PowerCommandInterpreter, developed by Tong Shun, "
    "released under GPL-v3\nwww.tongshunham.top/PCMI/"
)


def builtin_help(session):
    """Print help message"""
    session.console.info("""Available commands:
help     - show this help
pcmi     - show PCMI information
exit     - exit PCMI
netstat  - show network status
route    - show routing table
register - register .pcml file association
cd [dir] - show or change the current directory
<file>.pcml - run a PCMI script
Any other command is passed to the system shell""")


def builtin_cls(session):
    session.log("Clearing screen")
    session.console.clear_screen()


def builtin_pcmi(session):
    session.log(PCMI_INFO)
    session.console.info(PCMI_INFO)


def builtin_exit(session):
    """Đóng PCMI đúng cách rồi thoát với mã 0"""
    session.shutdown()
    sys.exit(0)


def builtin_netstat(session):
    run_command(session, NETSTAT_COMMAND)


def builtin_route(session):
    run_command(session, ROUTE_COMMAND)


def builtin_register(session):
    if register_file_association(session):
        session.console.info(f"Registered {PCML_EXTENSION} file association")
    else:
        session.console.error(f"Error: cannot register {PCML_EXTENSION} file association")


def builtin_pwd(session):
    current = session.cwd()
    session.log(current)
    session.console.info(current)


BUILTINS = {
    "help": builtin_help,
    "cls": builtin_cls,
    "pcmi": builtin_pcmi,
    "exit": builtin_exit,
    "netstat": builtin_netstat,
    "route": builtin_route,
    "register": builtin_register,
}


def execute_builtin(session, name):
    """
    Execute built-in command if it matches.
    Returns: True nếu đã xử lý
    """
    handler = BUILTINS.get(name)
    if handler is None:
        return False
    handler(session)
    return True
