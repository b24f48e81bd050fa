import os
import sys

from config import (
    CONTEXT_FILE,
    HISTORY_FILE,
    LOG_FILE,
    REGISTERED_FLAG,
    SHELL_PREFIX,
    SHUTDOWN_FLAG_FILE,
    STATE_DIR,
)
from Core.console import ConsoleOutput, current_datetime
from Core.history import CommandHistory
from Core.logsink import LogSink


class SessionStore:
    """
    Persist session state across runs:
      * shutdown marker ("False" khi đang chạy, "True" khi thoát đúng cách)
      * context: thư mục làm việc cuối cùng
      * registration marker
    """

    def __init__(self, state_dir):
        self.state_dir = os.path.abspath(state_dir)
        self.shutdown_file = os.path.join(self.state_dir, SHUTDOWN_FLAG_FILE)
        self.context_file = os.path.join(self.state_dir, CONTEXT_FILE)
        self.registered_file = os.path.join(self.state_dir, REGISTERED_FLAG)

    def _write(self, path, content):
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
            return True
        except OSError as e:
            print(f"Warning: Could not write {path}: {e}", file=sys.stderr)
            return False

    def _read_first_line(self, path):
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.readline().rstrip("\r\n")
        except OSError as e:
            print(f"Warning: Could not read {path}: {e}", file=sys.stderr)
            return None

    def shutdown_marker_exists(self):
        return os.path.exists(self.shutdown_file)

    def was_properly_shut_down(self):
        content = self._read_first_line(self.shutdown_file)
        return content is not None and content.strip() == "True"

    def mark_open(self):
        return self._write(self.shutdown_file, "False")

    def mark_closed(self):
        return self._write(self.shutdown_file, "True")

    def save_context(self, directory):
        return self._write(self.context_file, directory)

    def load_context(self):
        return self._read_first_line(self.context_file) or ""

    def is_registered(self):
        return os.path.exists(self.registered_file)

    def mark_registered(self):
        return self._write(self.registered_file, "True")


class Session:
    """Long-lived state passed through dispatch, executor and script runner."""

    def __init__(self, state_dir=None, console=None, logger=None, shell_prefix=None, history=None):
        state_dir = state_dir or STATE_DIR or os.getcwd()
        self.store = SessionStore(state_dir)
        self.console = console or ConsoleOutput()
        self.logger = logger or LogSink(os.path.join(self.store.state_dir, LOG_FILE))
        self.history = history or CommandHistory(os.path.join(self.store.state_dir, HISTORY_FILE))
        self.shell_prefix = list(shell_prefix or SHELL_PREFIX)
        # Cờ ngắt: chỉ là một bool, signal handler gán trực tiếp, không dùng lock
        self.interrupted = False
        self.previous_clean_shutdown = None

    def interrupt(self):
        self.interrupted = True

    def clear_interrupt(self):
        self.interrupted = False

    def is_interrupted(self):
        return self.interrupted

    def log(self, message):
        self.logger.log(message)

    def cwd(self):
        return os.getcwd()

    def save_context(self):
        return self.store.save_context(self.cwd())

    def startup(self):
        """Khởi động: ghi marker False và khôi phục thư mục làm việc trước đó"""
        console = self.console
        console.say("Starting PCMI...")

        console.status(f"Read {SHUTDOWN_FLAG_FILE}", self.store.shutdown_marker_exists())
        self.previous_clean_shutdown = self.store.was_properly_shut_down()
        if self.store.shutdown_marker_exists():
            console.status("Previous session shut down properly", self.previous_clean_shutdown)

        console.status(f"Set {SHUTDOWN_FLAG_FILE} to False", self.store.mark_open())

        saved_dir = self.store.load_context()
        if saved_dir:
            try:
                os.chdir(saved_dir)
                console.status(f"Restore context to directory: {saved_dir}", True)
            except OSError:
                console.status(f"Restore context to directory: {saved_dir}", False)

        self.history.load()

        console.say("Entering now!")
        self.log("PCMI initialised at " + current_datetime())

    def shutdown(self):
        console = self.console
        console.say("Shutting down PCMI...")
        self.logger.close()
        self.history.save()
        console.status(f"Set {SHUTDOWN_FLAG_FILE} to True", self.store.mark_closed())
        console.say("Exiting now!")
