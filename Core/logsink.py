import os
import sys
import queue

import psutil

from config import LOW_MEMORY_MB, MAX_LOG_BUFFER


class LogSink:
    """
    Buffer log lines in memory, append them to the log file on flush.
    Mỗi lần gọi log() ghi đúng một dòng vào file khi flush.
    """

    def __init__(self, path, max_lines=MAX_LOG_BUFFER, low_memory_mb=LOW_MEMORY_MB):
        self.path = path
        self.max_lines = max_lines
        self.low_memory_bytes = low_memory_mb * 1024 * 1024
        self.buffer = []
        self.memory_low = False
        # Hàng đợi cho signal handler (không được block)
        self._pending = queue.SimpleQueue()

    def _has_capacity(self):
        if len(self.buffer) >= self.max_lines:
            return False
        try:
            return psutil.virtual_memory().available >= self.low_memory_bytes
        except (psutil.Error, OSError) as e:
            print(f"Warning: Could not read memory status: {e}", file=sys.stderr)
            return True

    def _drain_pending(self):
        while True:
            try:
                self.buffer.append(self._pending.get_nowait())
            except queue.Empty:
                break

    def log(self, message):
        """Append one message; flush first and retry once if capacity is low."""
        self._drain_pending()
        if self._has_capacity():
            self.buffer.append(message)
            return True

        self.memory_low = True
        self.flush()
        if len(self.buffer) < self.max_lines:
            self.buffer.append(message)
            return True

        print(f"Warning: log buffer full, dropped message: {message[:60]}", file=sys.stderr)
        return False

    def log_async(self, message):
        """Signal-safe: only enqueue, the main thread drains later."""
        self._pending.put(message)

    def flush(self):
        """Ghi toàn bộ buffer vào file log rồi xóa buffer"""
        self._drain_pending()
        if not self.buffer:
            return True
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                for msg in self.buffer:
                    f.write(msg + "\n")
        except OSError as e:
            print(f"Warning: Could not write log file {self.path}: {e}", file=sys.stderr)
            return False
        self.buffer.clear()
        return True

    def close(self):
        return self.flush()

    def __len__(self):
        return len(self.buffer) + self._pending.qsize()

    def __repr__(self):
        return f"LogSink({os.path.basename(self.path)!r}, buffered={len(self.buffer)})"
