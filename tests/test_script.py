import os

import pytest

import Core.script
from Core.script import run_script


def write_script(tmp_path, text, name="job.pcml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_echo_off_suppresses_echo_and_skips_comments(session, recorded, tmp_path, capsys):
    path = write_script(tmp_path, "@echo off\necho hi\n@comment\necho bye\n")
    assert run_script(session, path) == 2
    assert recorded == ["echo hi", "echo bye"]
    assert "> " not in capsys.readouterr().out


def test_echo_on_prefixes_every_executed_line(session, recorded, tmp_path, capsys):
    path = write_script(tmp_path, "echo one\n\n@skip me\necho two\n")
    assert run_script(session, path) == 2
    assert recorded == ["echo one", "echo two"]
    out = capsys.readouterr().out
    assert f"{path}> echo one" in out
    assert f"{path}> echo two" in out
    assert "skip me" not in out


def test_echo_off_anywhere_in_first_line(session, recorded, tmp_path, capsys):
    path = write_script(tmp_path, "rem @echo off\necho a\n")
    run_script(session, path)
    assert recorded == ["echo a"]
    assert "> " not in capsys.readouterr().out


def test_echo_off_only_honoured_on_first_line(session, recorded, tmp_path, capsys):
    path = write_script(tmp_path, "echo a\n@echo off\necho b\n")
    run_script(session, path)
    assert recorded == ["echo a", "echo b"]
    assert f"{path}> echo b" in capsys.readouterr().out


def test_empty_first_line_runs_nothing_for_it(session, recorded, tmp_path):
    path = write_script(tmp_path, "\necho later\n")
    assert run_script(session, path) == 1
    assert recorded == ["echo later"]


def test_first_line_starting_with_at_is_executed(session, recorded, tmp_path):
    path = write_script(tmp_path, "@rem first\necho a\n")
    run_script(session, path)
    assert recorded == ["@rem first", "echo a"]


def test_builtins_are_not_recognised_inside_scripts(session, recorded, tmp_path):
    path = write_script(tmp_path, "@echo off\ncd /\nexit\nhelp\n")
    before = os.getcwd()
    run_script(session, path)
    assert recorded == ["cd /", "exit", "help"]
    assert os.getcwd() == before


def test_crlf_line_endings(session, recorded, tmp_path):
    path = tmp_path / "win.pcml"
    path.write_bytes(b"@echo off\r\necho a\r\n\r\necho b\r\n")
    run_script(session, str(path))
    assert recorded == ["echo a", "echo b"]


def test_interrupt_stops_after_current_line(session, tmp_path, monkeypatch, capsys):
    calls = []

    def interrupting_run(session, command):
        calls.append(command)
        if command == "echo two":
            session.interrupt()
        return 0

    monkeypatch.setattr(Core.script, "run_command", interrupting_run)
    path = write_script(tmp_path, "@echo off\necho one\necho two\necho three\necho four\n")
    assert run_script(session, path) == 2
    assert calls == ["echo one", "echo two"]
    assert not session.is_interrupted()
    assert "Error" not in capsys.readouterr().out


def test_pending_interrupt_skips_all_but_first_line(session, recorded, tmp_path):
    session.interrupt()
    path = write_script(tmp_path, "echo first\necho second\n")
    run_script(session, path)
    assert recorded == ["echo first"]
    assert not session.is_interrupted()


def test_missing_file_reported_not_logged(session, recorded, tmp_path, capsys):
    path = str(tmp_path / "missing.pcml")
    assert run_script(session, path) is None
    assert recorded == []
    assert f"Error: cannot open file {path}" in capsys.readouterr().out
    assert session.logger.buffer == []


@pytest.mark.skipif(os.name == "nt", reason="uses /bin/sh commands")
def test_script_runs_real_commands(session, tmp_path, capsys):
    path = write_script(tmp_path, "@echo off\necho from-script\n")
    run_script(session, path)
    assert "from-script" in capsys.readouterr().out
