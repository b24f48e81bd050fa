import os
import signal

import pytest

import Core.interrupt
from Core.interrupt import INTERRUPT_MESSAGE, init_signal_handlers, make_handler


def test_handler_sets_flag_and_queues_log(session):
    handler = make_handler(session)
    handler(signal.SIGINT, None)
    assert session.is_interrupted()
    # chỉ nằm trong hàng đợi cho tới lần log tiếp theo
    assert INTERRUPT_MESSAGE not in session.logger.buffer
    session.log("next")
    assert session.logger.buffer[-2:] == [INTERRUPT_MESSAGE, "next"]


def test_install_registers_sigint(session, monkeypatch):
    installed = {}
    monkeypatch.setattr(Core.interrupt.signal, "signal", lambda sig, h: installed.setdefault(sig, h))
    assert init_signal_handlers(session) is True
    assert signal.SIGINT in installed

    installed[signal.SIGINT](signal.SIGINT, None)
    assert session.is_interrupted()


def test_install_failure_reported(session, monkeypatch, capsys):
    def refuse(sig, handler):
        raise ValueError("signal only works in main thread")

    monkeypatch.setattr(Core.interrupt.signal, "signal", refuse)
    assert init_signal_handlers(session) is False
    assert "Error: cannot install Ctrl+C handler" in capsys.readouterr().out
    assert session.logger.buffer[-1].startswith("Error: cannot install Ctrl+C handler")


@pytest.mark.skipif(os.name == "nt", reason="os.kill SIGINT is POSIX only")
def test_real_signal_during_clear_does_not_block(session, monkeypatch):
    previous = signal.getsignal(signal.SIGINT)
    try:
        assert init_signal_handlers(session) is True

        def clear_with_signal():
            # tín hiệu đến đúng lúc vòng lặp đang xóa cờ
            os.kill(os.getpid(), signal.SIGINT)
            session.interrupted = False

        monkeypatch.setattr(session, "clear_interrupt", clear_with_signal)
        session.clear_interrupt()
        session.log("after")
    finally:
        signal.signal(signal.SIGINT, previous)

    assert INTERRUPT_MESSAGE in session.logger.buffer
    assert session.logger.buffer[-1] == "after"


def test_flag_is_plain_bool(session):
    session.interrupt()
    assert session.interrupted is True
    session.clear_interrupt()
    assert session.interrupted is False
