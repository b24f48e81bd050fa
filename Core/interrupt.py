import signal

INTERRUPT_MESSAGE = "Command interrupted by Ctrl+C"


def make_handler(session):
    """
    Tạo handler cho Ctrl+C / Ctrl+Break.
    Handler chỉ bật cờ và đưa log vào hàng đợi, không làm I/O.
    """
    def handle_break(signum, frame):
        session.interrupt()
        session.logger.log_async(INTERRUPT_MESSAGE)

    return handle_break


def break_signals():
    signals = [signal.SIGINT]
    if hasattr(signal, "SIGBREAK"):
        signals.append(signal.SIGBREAK)
    return signals


def init_signal_handlers(session):
    """
    Cài đặt signal handlers.
    Returns: True nếu thành công, False nếu không thể cài đặt
    """
    handler = make_handler(session)
    try:
        for sig in break_signals():
            signal.signal(sig, handler)
    except (ValueError, OSError) as e:
        session.log(f"Error: cannot install Ctrl+C handler: {e}")
        session.console.error("Error: cannot install Ctrl+C handler")
        return False
    return True
