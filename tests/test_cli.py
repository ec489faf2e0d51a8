"""Tests for the command-line interface."""

import json
import os
import sys

import pytest
from typer.testing import CliRunner

from folder_tools import __version__
from folder_tools.cli import app

runner = CliRunner()


class TestVersion:
    """Test version option."""

    def test_version(self):
        """Test --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestLocationsCommand:
    """Test the locations command."""

    def test_locations(self, folder_overrides):
        """Test every folder is shown with its path."""
        result = runner.invoke(app, ["locations"])

        assert result.exit_code == 0
        assert "Downloads" in result.output
        assert str(folder_overrides["downloads"]) in result.output
        assert "Documents" in result.output


class TestListCommand:
    """Test the list command."""

    def test_list_folder(self, folder_overrides):
        """Test rows are printed directories first."""
        result = runner.invoke(app, ["list", "downloads"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].startswith("Photos/")
        assert lines[1].startswith("report.pdf")
        assert ".hidden" not in result.output

    def test_list_is_case_insensitive(self, folder_overrides):
        """Test the folder name may be given in any case."""
        result = runner.invoke(app, ["list", "Downloads"])

        assert result.exit_code == 0

    def test_list_empty_folder(self, folder_overrides):
        """Test an empty folder prints a notice."""
        result = runner.invoke(app, ["list", "desktop"])

        assert result.exit_code == 0
        assert "This folder is empty." in result.output

    def test_list_show_path(self, folder_overrides):
        """Test the resolved path header."""
        result = runner.invoke(app, ["list", "desktop", "--show-path"])

        assert result.exit_code == 0
        assert folder_overrides["desktop"].name in result.output.splitlines()[0]

    def test_list_missing_folder(self, folder_overrides):
        """Test a missing folder prints the error and exits with 1."""
        result = runner.invoke(app, ["list", "documents"])

        assert result.exit_code == 1
        assert "could not be found" in result.output

    def test_list_json(self, folder_overrides):
        """Test JSON output of the snapshot."""
        result = runner.invoke(app, ["list", "downloads", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["error"] is None
        assert [entry["name"] for entry in payload["entries"]] == [
            "Photos",
            "report.pdf",
        ]
        assert payload["entries"][1]["size_bytes"] == 2048

    def test_list_json_error(self, folder_overrides):
        """Test JSON output for a failed listing."""
        result = runner.invoke(app, ["list", "documents", "--json"])

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["error"]["kind"] == "not_found"
        assert payload["error"]["label"] == "Documents"

    def test_list_unknown_location(self):
        """Test an unknown folder name is rejected."""
        result = runner.invoke(app, ["list", "pictures"])

        assert result.exit_code == 1
        assert "Unknown location: pictures" in result.output
        assert "downloads, desktop, documents" in result.output


@pytest.mark.skipif(
    sys.platform != "linux", reason="needs a filesystem accepting any name bytes"
)
class TestListUndecodableNames:
    """Test folders holding file names that are not valid UTF-8."""

    @pytest.fixture
    def latin1_name(self, folder_overrides):
        name = os.fsdecode(b"caf\xe9.txt")
        (folder_overrides["downloads"] / name).write_text("menu")
        return name

    def test_list_rows(self, latin1_name):
        """Test the undecodable byte is printed as an escape."""
        result = runner.invoke(app, ["list", "downloads"])

        assert result.exit_code == 0
        assert "caf\\xe9.txt" in result.output
        assert "report.pdf" in result.output

    def test_list_json(self, latin1_name):
        """Test JSON output escapes the undecodable byte."""
        result = runner.invoke(app, ["list", "downloads", "--json"])

        assert result.exit_code == 0
        names = [entry["name"] for entry in json.loads(result.stdout)["entries"]]
        assert names == ["Photos", "caf\\xe9.txt", "report.pdf"]
