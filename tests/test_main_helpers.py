"""
Unit tests for small helpers and the list-diseases command in __main__.py:
- _report_issues: prints warnings/errors to stdout
- _load_engine: falls back to the sample data
- _configure_logging: only installs handlers when asked
"""

import logging

from click.testing import CliRunner
from stairval.notepad import create_notepad

from smarthealth.__main__ import _configure_logging, _load_engine, _report_issues, main


def test_report_issues_outputs_both_blocks(capsys):
    n = create_notepad("report")
    n.add_warning("warn 1")
    n.add_error("err 1")

    _report_issues(n)
    out = capsys.readouterr().out
    assert "Warnings found while loading" in out
    assert "warn 1" in out
    assert "Errors found while loading" in out
    assert "err 1" in out


def test_report_issues_silent_when_clean(capsys):
    _report_issues(create_notepad("report"))
    assert capsys.readouterr().out == ""


def test_load_engine_falls_back_to_sample(tmp_path, capsys):
    engine = _load_engine(str(tmp_path / "missing.csv"), create_notepad("diseases"), announce=True)
    assert [d.name for d in engine.diseases] == ["Flu", "Common Cold", "Diabetes"]
    assert "Using sample data" in capsys.readouterr().out


def test_configure_logging_file_handler(tmp_path):
    log_path = tmp_path / "run.log"
    _configure_logging(False, str(log_path))
    try:
        logging.getLogger("smarthealth.test").info("hello log")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello log" in log_path.read_text(encoding="utf-8")
    finally:
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()


def test_list_diseases_shows_records_and_warnings(disease_file):
    result = CliRunner().invoke(main, ["list-diseases", "-d", disease_file])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "Flu -> [cough, fever, headache, sore throat]" in lines
    assert any(line.startswith("Diabetes -> ") and "durationMonths=12" in line for line in lines)
    assert "Loaded 4 diseases" in lines
    assert "Warnings found while loading:" in lines
