# Path: xml_validator/tests/test_cli.py
"""
End-to-end tests for the command-line interface.
"""

import json
import logging

import pytest

from xml_validator.cli.main import build_parser, main
from xml_validator.constants import EXIT_ISSUES, EXIT_OK, LOGGER_ROOT

CLEAN = b'<?xml version="1.0"?>\n<rss><channel><title>ok</title></channel></rss>\n'
DIRTY = (
    b"<rss>\n"
    + b'<p style="color:#12">x</p>\n' * 8
    + b"</rss>\n"
)


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    root = logging.getLogger(LOGGER_ROOT)
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.propagate = True


def _write(tmp_path, content: bytes):
    path = tmp_path / "export.xml"
    path.write_bytes(content)
    return str(path)


def test_parser_defaults():
    args = build_parser().parse_args(["feed.xml"])
    assert args.source == "feed.xml"
    assert args.max_errors is None
    assert args.format == "text"
    assert not args.debug


def test_clean_file_exits_zero(tmp_path, capsys):
    code = main([_write(tmp_path, CLEAN), "--no-color"])
    assert code == EXIT_OK
    assert "XML is well-formed!" in capsys.readouterr().out


def test_issues_exit_one_and_respect_max_errors(tmp_path, capsys):
    code = main([_write(tmp_path, DIRTY), "--no-color", "--max-errors=3", "--no-tips"])
    out = capsys.readouterr().out

    assert code == EXIT_ISSUES
    assert "Issue #3:" in out
    assert "Issue #4:" not in out
    assert "Found 3 XML issues (showing 3)" in out


def test_max_errors_zero_reports_everything(tmp_path, capsys):
    main([_write(tmp_path, DIRTY), "--format", "json", "--max-errors", "0"])
    document = json.loads(capsys.readouterr().out)
    assert document["total_found"] == 8
    assert len(document["issues"]) == 8


def test_default_max_errors_from_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("XML_VALIDATOR_MAX_ERRORS", "2")
    main([_write(tmp_path, DIRTY), "--format", "json"])
    document = json.loads(capsys.readouterr().out)
    assert len(document["issues"]) == 2
    assert document["max_issues"] == 2


def test_missing_file_is_an_error(tmp_path, capsys):
    code = main([str(tmp_path / "nope.xml"), "--no-color"])
    out = capsys.readouterr().out
    assert code == EXIT_ISSUES
    assert "Error reading file" in out
    assert "File not found" in out


def test_negative_max_errors_rejected(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([_write(tmp_path, CLEAN), "--max-errors=-1"])
    assert exc_info.value.code == 2


def test_invalid_configuration_is_reported(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("XML_VALIDATOR_CONTEXT_LINES", "-4")
    code = main([_write(tmp_path, CLEAN)])
    assert code == EXIT_ISSUES
    assert "XML_VALIDATOR_CONTEXT_LINES" in capsys.readouterr().err
