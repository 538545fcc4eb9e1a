# ABOUTME: Tests for the squash command line and its single-report error boundary
# ABOUTME: Runs commands through click's CliRunner in standard and accessible modes
"""Tests for the command-line interface"""

import os
import zipfile

import pytest
from click.testing import CliRunner

from squash.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Keep log files and .env lookups inside the test directory"""
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.chdir(tmp_path)


class TestCommands:
    def test_compress_and_list(self, runner, source_tree, tmp_path):
        archive = tmp_path / "notes.zip"
        result = runner.invoke(cli, ["compress", str(source_tree), "-o", str(archive)])
        assert result.exit_code == 0
        assert "Created" in result.output

        result = runner.invoke(cli, ["list", str(archive)])
        assert result.exit_code == 0
        assert "notes/a.txt" in result.output

    def test_list_accessible_is_plain(self, runner, sample_zip):
        result = runner.invoke(cli, ["--accessible", "list", str(sample_zip)])
        assert result.exit_code == 0
        assert "hello.txt, 12 bytes" in result.output
        assert "2 entries" in result.output

    def test_decompress(self, runner, sample_lz4, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(cli, ["decompress", str(sample_lz4), "-d", str(out)])
        assert result.exit_code == 0
        assert (out / "message.txt").exists()

    def test_extract(self, runner, sample_zip, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(cli, ["extract", str(sample_zip), "hello.txt", "-d", str(out)])
        assert result.exit_code == 0
        assert (out / "hello.txt").read_text() == "hello world\n"


class TestErrorReports:
    def test_missing_archive_report(self, runner, tmp_path):
        missing = tmp_path / "missing.zip"
        result = runner.invoke(cli, ["decompress", str(missing)])

        assert result.exit_code == 1
        assert "[ERROR]" in result.output
        assert " - File not found" in result.output
        assert "missing.zip" in result.output

    def test_report_has_no_escape_codes_off_tty(self, runner, tmp_path):
        result = runner.invoke(cli, ["decompress", str(tmp_path / "missing.zip")])
        assert "\x1b[" not in result.output

    def test_root_folder_report(self, runner, tmp_path):
        result = runner.invoke(cli, ["compress", "/", "-o", str(tmp_path / "root.zip")])

        assert result.exit_code == 1
        assert "compress the root folder" in result.output
        assert "in-memory" in result.output
        assert result.output.count("hint:") == 1
        assert "rsync" in result.output

    def test_accessible_report(self, runner, tmp_path):
        result = runner.invoke(cli, ["-A", "compress", "/", "-o", str(tmp_path / "root.zip")])

        assert result.exit_code == 1
        assert "ERROR: It seems you're trying to compress the root folder." in result.output
        assert "[ERROR]" not in result.output
        assert result.output.count("hints:") == 1
        assert "hint: " not in result.output

    def test_accessible_from_env(self, runner, tmp_path):
        result = runner.invoke(
            cli,
            ["compress", "/", "-o", str(tmp_path / "root.zip")],
            env={"ACCESSIBLE": "1"},
        )
        assert "ERROR: It seems" in result.output

    def test_missing_member_report(self, runner, sample_zip):
        result = runner.invoke(cli, ["extract", str(sample_zip), "nope.txt"])

        assert result.exit_code == 1
        assert "Unexpected error in zip archive" in result.output
        assert " - File not found" in result.output

    def test_invalid_zip_report(self, runner, garbage_file):
        result = runner.invoke(cli, ["list", str(garbage_file("bad.zip"))])

        assert result.exit_code == 1
        assert "[ERROR] Invalid zip archive" in result.output
        assert " - File is not a zip file" in result.output

    def test_single_report_per_failure(self, runner, tmp_path):
        result = runner.invoke(cli, ["decompress", str(tmp_path / "missing.zip")])
        assert result.output.count("[ERROR]") == 1

    def test_existing_output_report(self, runner, source_tree, tmp_path):
        output = tmp_path / "notes.zip"
        with zipfile.ZipFile(output, "w") as zf:
            zf.writestr("x", "y")

        result = runner.invoke(cli, ["compress", str(source_tree), "-o", str(output)])
        assert result.exit_code == 1
        assert " - File already exists" in result.output

    def test_unusable_state_dir_report(self, runner, tmp_path, monkeypatch):
        blocker = tmp_path / "state-file"
        blocker.write_text("")
        monkeypatch.setenv("XDG_STATE_HOME", str(blocker))

        result = runner.invoke(cli, ["--log-file", "squash.log", "list", "nothing.zip"])

        assert result.exit_code == 1
        assert result.output.count("[ERROR]") == 1
        assert "Not a directory" in result.output

    def test_old_file_compresses(self, runner, source_tree, tmp_path):
        os.utime(source_tree / "a.txt", (0, 0))
        result = runner.invoke(cli, ["compress", str(source_tree), "-o", str(tmp_path / "old.zip")])

        assert result.exit_code == 0
        assert "[ERROR]" not in result.output
