import logging

from teko.__main__ import main
from teko.config import get_log_level, get_recursion_limit, level_from_env


def test_runs_program_file(tmp_path, capsys):
    program = tmp_path / "hello.tk"
    program.write_text('(print (" Hello)) (+ 1 2)\n', encoding="utf-8")

    assert main([str(program)]) == 0

    out = capsys.readouterr().out
    assert out == "Hello \n3\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.tk")]) == 1
    assert "file not found" in capsys.readouterr().err


def test_error_is_reported(tmp_path, capsys):
    program = tmp_path / "bad.tk"
    program.write_text("(undefined-thing)", encoding="utf-8")

    assert main([str(program)]) == 1
    assert "UnboundVariable" in capsys.readouterr().err


def test_unhandled_unwind_is_reported(tmp_path, capsys):
    program = tmp_path / "escape.tk"
    program.write_text("(unwind (quote boom))", encoding="utf-8")

    assert main([str(program)]) == 1
    assert "Unhandled unwind: boom" in capsys.readouterr().err


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("TEKO_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"
    monkeypatch.delenv("TEKO_LOG_LEVEL")
    assert get_log_level() == "WARNING"


def test_blank_level_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("SOME_LEVEL", "   ")
    assert level_from_env("SOME_LEVEL", "INFO") == "INFO"


def test_recursion_limit_from_env(monkeypatch):
    monkeypatch.delenv("TEKO_RECURSION_LIMIT", raising=False)
    assert get_recursion_limit() is None
    monkeypatch.setenv("TEKO_RECURSION_LIMIT", "5000")
    assert get_recursion_limit() == 5000


def test_evaluation_logs_at_debug(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="teko"):
        interp.eval("(wind (unwind 1))")
    messages = [r.getMessage() for r in caplog.records]
    assert any("caught" in m for m in messages)
