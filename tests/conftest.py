import pytest

from Core.session import Session


@pytest.fixture
def session(tmp_path, monkeypatch):
    state = tmp_path / "state"
    state.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    return Session(state_dir=str(state))


@pytest.fixture
def recorded(monkeypatch):
    """Thay run_command bằng hàm ghi lại lệnh, không chạy shell thật"""
    calls = []

    def fake_run(session, command):
        calls.append(command)
        return 0

    import Core.builtin
    import Core.script
    import Core.shell

    monkeypatch.setattr(Core.builtin, "run_command", fake_run)
    monkeypatch.setattr(Core.script, "run_command", fake_run)
    monkeypatch.setattr(Core.shell, "run_command", fake_run)
    return calls
