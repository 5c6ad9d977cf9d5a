from __future__ import annotations

from typer.testing import CliRunner

from edm_validate import config
from edm_validate.cli import app

runner = CliRunner()


def _invoke(root, monkeypatch):
    monkeypatch.chdir(root)
    return runner.invoke(app, [])


def test_all_valid_exits_zero(workspace, monkeypatch):
    result = _invoke(workspace(examples={"a.ddna.json": {"id": "a1"}}), monkeypatch)
    assert result.exit_code == 0
    assert "Valid: examples/a.ddna.json" in result.output


def test_invalid_example_exits_one(workspace, monkeypatch):
    root = workspace(examples={"a.ddna.json": {"id": "a1"}, "b.ddna.json": {}})
    result = _invoke(root, monkeypatch)
    assert result.exit_code == 1
    assert "Invalid: examples/b.ddna.json" in result.output
    assert "1 file(s) failed validation." in result.output


def test_no_examples_exits_zero(workspace, monkeypatch):
    result = _invoke(workspace(examples={}), monkeypatch)
    assert result.exit_code == 0
    assert "No example files found" in result.output


def test_missing_schema_exits_two(workspace, monkeypatch):
    result = _invoke(workspace(schema=None, examples={"a.ddna.json": {"id": "a1"}}), monkeypatch)
    assert result.exit_code == 2
    assert "Valid:" not in result.output
    assert "error: schema not found" in result.output
    assert "edm.v0.4.schema.json" in result.output


def test_strict_schema_failure_exits_two(workspace, monkeypatch):
    root = workspace(schema={"type": "object", "requird": ["id"]}, examples={"a.ddna.json": {}})
    result = _invoke(root, monkeypatch)
    assert result.exit_code == 2
    assert "unknown keyword 'requird'" in result.output


def test_malformed_example_exits_two(workspace, monkeypatch):
    root = workspace(examples={"broken.ddna.json": "{not json"})
    result = _invoke(root, monkeypatch)
    assert result.exit_code == 2
    assert "Invalid:" not in result.output


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
    assert config.log_level() == "DEBUG"
    monkeypatch.delenv(config.LOG_LEVEL_ENV)
    assert config.log_level() == "WARNING"
