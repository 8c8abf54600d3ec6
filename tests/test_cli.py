"""Tests for the pif2pass command line."""

import json

import pytest
from click.testing import CliRunner

from pif2pass.cli import main as cli_main
from pif2pass.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def store(monkeypatch, fake_store):
    """Replace the pass store with an in-memory fake."""
    fake = fake_store
    configs = []

    def _factory(config):
        configs.append(config)
        return fake

    monkeypatch.setattr(cli_main, "PassStore", _factory)
    fake.configs = configs
    return fake


@pytest.fixture
def export_file(tmp_path, make_record, make_pif):
    path = tmp_path / "export.1pif"
    path.write_text(
        make_pif(
            make_record(title="Fallback", password="hunter2"),
            make_record(username="jdoe", urls=["https://a.example.com/", "https://example.org/"]),
            make_record(type_name="securenotes.SecureNote"),
        )
    )
    return path


def test_help(runner):
    result = runner.invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "--force" in result.output
    assert "--parallel" in result.output


def test_missing_filename(runner, store):
    result = runner.invoke(cli, [])

    assert result.exit_code == 2
    assert "Usage:" in result.output
    assert store.inserts == []


def test_wrong_extension(runner, store, tmp_path):
    path = tmp_path / "export.json"
    path.write_text("[]")

    result = runner.invoke(cli, [str(path)])

    assert result.exit_code == 2
    assert "Unsupported file format." in result.output
    assert store.inserts == []


def test_import(runner, store, export_file):
    result = runner.invoke(cli, [str(export_file)])

    assert result.exit_code == 0
    assert "Read 2 passwords." in result.output
    assert "Imported Fallback" in result.output
    assert "Imported example.com/jdoe" in result.output
    assert store.entries == {"Fallback": "hunter2", "example.com/jdoe": "hunter2"}
    assert store.links == {"example.org/jdoe": "example.com/jdoe"}


def test_flags_reach_config(runner, store, export_file, tmp_path):
    result = runner.invoke(
        cli,
        [
            "--force",
            "--parallel",
            "--workers", "2",
            "--store-dir", str(tmp_path / "store"),
            "--insert-command", "pass insert",
            str(export_file),
        ],
    )

    assert result.exit_code == 0
    config = store.configs[0]
    assert config.force and config.parallel
    assert config.max_workers == 2
    assert config.store_dir == tmp_path / "store"
    assert config.insert_command == "pass insert"
    assert all(force for _, force in store.inserts)


def test_store_dir_from_environment(runner, store, export_file, tmp_path):
    result = runner.invoke(
        cli,
        [str(export_file)],
        env={"PASSWORD_STORE_DIR": str(tmp_path / "envstore")},
    )

    assert result.exit_code == 0
    assert store.configs[0].store_dir == tmp_path / "envstore"


def test_failures_are_summarized(runner, store, export_file):
    store.fail_titles = {"Fallback"}

    result = runner.invoke(cli, [str(export_file)])

    assert result.exit_code == 0
    assert "ERROR: Failed to import Fallback" in result.output
    assert "Failed to import Fallback\n" in result.output
    assert "try again with --force" in result.output
    assert "Imported example.com/jdoe" in result.output


def test_quiet_only_reports_failures(runner, store, export_file):
    store.fail_titles = {"Fallback"}

    result = runner.invoke(cli, ["--quiet", str(export_file)])

    assert "Read 2 passwords." not in result.output
    assert "Imported" not in result.output
    assert "ERROR: Failed to import Fallback" in result.output


def test_malformed_export_is_fatal(runner, store, tmp_path):
    path = tmp_path / "broken.1pif"
    path.write_text('{"title": "one"\n***x***\n')

    result = runner.invoke(cli, [str(path)])

    assert result.exit_code == 4
    assert "Malformed 1PIF data" in result.output
    assert store.inserts == []


def test_bad_url_is_fatal(runner, store, tmp_path, make_record, make_pif):
    path = tmp_path / "export.1pif"
    path.write_text(make_pif(make_record(urls=["http://[::1/broken"])))

    result = runner.invoke(cli, [str(path)])

    assert result.exit_code == 4
    assert store.inserts == []


def test_json_log_format(runner, store, tmp_path):
    path = tmp_path / "broken.1pif"
    path.write_text("{not json}\n***x***\n")

    result = runner.invoke(cli, ["--log-format", "json", str(path)])

    assert result.exit_code == 4
    entry = json.loads(result.output.strip().splitlines()[-1])
    assert entry["level"] == "error"
    assert entry["code"] == "PARSE_ERROR"
