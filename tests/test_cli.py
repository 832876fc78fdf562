import json
from pathlib import Path

import pytest

import flagpick  # type: ignore
from flagpick import OutputMode  # type: ignore

LS_HELP = "Options:\n  -a, --all    Show all\n  -l            Use long format\n"


@pytest.fixture(autouse=True)
def flagpick_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "flagpick-home"
    monkeypatch.setenv("FLAGPICK_HOME", str(home))
    monkeypatch.delenv("FLAGPICK_VERBOSE", raising=False)
    return home


@pytest.fixture()
def fake_help(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    requested: list[list[str]] = []

    def acquire_help(base_command, *, timeout_s=None):
        requested.append(list(base_command))
        return LS_HELP

    monkeypatch.setattr(flagpick, "acquire_help", acquire_help)
    return requested


def test_missing_command_is_usage_error(capsys: pytest.CaptureFixture[str]):
    assert flagpick.main([]) == 2
    assert "usage" in capsys.readouterr().err


def test_dump_prints_help_and_table(fake_help, capsys: pytest.CaptureFixture[str]):
    assert flagpick.main(["--dump", "--no-color", "ls"]) == 0
    out = capsys.readouterr().out
    assert "== ls (help) ==" in out
    assert "Use long format" in out
    assert "== ls (options: 2) ==" in out
    assert "  -a, --all  Show all" in out
    assert fake_help == [["ls"]]


def test_dump_json(fake_help, capsys: pytest.CaptureFixture[str]):
    assert flagpick.main(["--dump", "--json", "ls", "-1"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["command"] == ["ls", "-1"]
    assert payload["help_text"] == LS_HELP
    assert [(o["short"], o["long"]) for o in payload["options"]] == [
        ("a", "all"),
        ("l", None),
    ]


def test_dump_with_no_options_still_succeeds(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.setattr(flagpick, "acquire_help", lambda cmd, timeout_s=None: "prose only\n")
    assert flagpick.main(["-d", "--no-color", "odd"]) == 0
    assert "(no options parsed)" in capsys.readouterr().out


def test_help_unavailable_is_reported(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    def acquire_help(base_command, *, timeout_s=None):
        raise flagpick.HelpUnavailableError(base_command)

    monkeypatch.setattr(flagpick, "acquire_help", acquire_help)
    assert flagpick.main(["nothing"]) == 1
    assert "Error: No help output from `nothing`" in capsys.readouterr().err


def test_no_options_is_reported_before_ui(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.setattr(flagpick, "acquire_help", lambda cmd, timeout_s=None: "prose only\n")

    def run_picker(engine):
        raise AssertionError("UI must not start")

    monkeypatch.setattr(flagpick, "run_picker", run_picker)
    assert flagpick.main(["odd"]) == 1
    assert "No options parsed" in capsys.readouterr().err


def test_abort_emits_nothing(
    fake_help, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.setattr(flagpick, "run_picker", lambda engine: flagpick.SessionResult.abort())
    monkeypatch.setattr(flagpick, "emit", lambda command, mode: pytest.fail("emitted"))
    assert flagpick.main(["ls"]) == 0
    assert capsys.readouterr().out == ""


def test_session_result_is_emitted(fake_help, monkeypatch: pytest.MonkeyPatch):
    def run_picker(engine):
        assert engine.base_command == ("ls", "-1")
        engine.toggle()
        return engine.request_output(OutputMode.EXECUTE)

    emitted: list[tuple[str, OutputMode]] = []
    monkeypatch.setattr(flagpick, "run_picker", run_picker)
    monkeypatch.setattr(flagpick, "emit", lambda command, mode: emitted.append((command, mode)))
    assert flagpick.main(["ls", "-1"]) == 0
    assert emitted == [("ls -1 --all", OutputMode.EXECUTE)]


def test_execute_failure_exit_code(
    fake_help, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.setattr(
        flagpick,
        "run_picker",
        lambda engine: flagpick.SessionResult(command="ls", mode=OutputMode.EXECUTE),
    )

    def emit(command, mode):
        raise flagpick.ExecuteError(command, 2)

    monkeypatch.setattr(flagpick, "emit", emit)
    assert flagpick.main(["ls"]) == 1
    assert "exited with status 2" in capsys.readouterr().err


def test_help_timeout_is_passed_through(
    flagpick_home: Path, monkeypatch: pytest.MonkeyPatch
):
    seen: list[object] = []

    def acquire_help(base_command, *, timeout_s=None):
        seen.append(timeout_s)
        return LS_HELP

    monkeypatch.setattr(flagpick, "acquire_help", acquire_help)
    monkeypatch.setenv("FLAGPICK_HELP_TIMEOUT_S", "9")
    assert flagpick.main(["--dump", "ls"]) == 0
    assert seen == [9]
