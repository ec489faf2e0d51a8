"""Test configuration and fixtures for folder-tools."""

import pytest

from folder_tools.core import settings


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def sample_folder(temp_dir):
    """Create a folder with files, a subdirectory and hidden entries."""
    folder = temp_dir / "sample"
    folder.mkdir()

    (folder / "b.txt").write_text("bravo")
    (folder / "a.txt").write_text("alpha" * 100)
    (folder / "A").mkdir()
    (folder / "A" / "nested.txt").write_text("not listed")

    # Hidden entries
    (folder / ".DS_Store").write_text("hidden")
    (folder / ".cache").mkdir()

    return folder


@pytest.fixture
def folder_overrides(temp_dir, monkeypatch):
    """Point the well-known folders at temporary directories.

    Downloads gets the sample layout, Desktop is empty and Documents does not
    exist.
    """
    downloads = temp_dir / "Downloads"
    downloads.mkdir()
    (downloads / "report.pdf").write_bytes(b"%PDF" * 512)
    (downloads / "Photos").mkdir()
    (downloads / ".hidden").write_text("hidden")

    desktop = temp_dir / "Desktop"
    desktop.mkdir()

    documents = temp_dir / "Documents"

    monkeypatch.setattr(settings, "downloads_dir", str(downloads))
    monkeypatch.setattr(settings, "desktop_dir", str(desktop))
    monkeypatch.setattr(settings, "documents_dir", str(documents))

    return {"downloads": downloads, "desktop": desktop, "documents": documents}
