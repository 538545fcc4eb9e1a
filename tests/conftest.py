# ABOUTME: Pytest fixtures for squash tests
# ABOUTME: Resets process-wide output flags and builds sample archives
import logging
import zipfile

import lz4.frame
import pytest

from squash import accessibility, colors


@pytest.fixture(autouse=True)
def reset_output_flags(monkeypatch):
    """Each test starts with accessible mode unset and colour not forced off"""
    monkeypatch.setattr(accessibility, "_accessible", None)
    monkeypatch.setattr(colors, "_forced_off", False)
    monkeypatch.delenv("ACCESSIBLE", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("SQUASH_LOG_LEVEL", raising=False)
    # setup_logging replaces the package logger's handlers
    yield
    logging.getLogger("squash").handlers.clear()


@pytest.fixture
def source_tree(tmp_path):
    """Small directory tree to compress"""
    root = tmp_path / "notes"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("alpha\n")
    (root / "b.txt").write_text("bravo\n")
    (root / "sub" / "c.txt").write_text("charlie\n")
    return root


@pytest.fixture
def sample_zip(tmp_path):
    """Zip archive with two members"""
    path = tmp_path / "sample.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("hello.txt", "hello world\n")
        zf.writestr("docs/readme.md", "# readme\n")
    return path


@pytest.fixture
def sample_lz4(tmp_path):
    """LZ4 frame holding a short text file"""
    path = tmp_path / "message.txt.lz4"
    path.write_bytes(lz4.frame.compress(b"compressed payload\n"))
    return path


@pytest.fixture
def garbage_file(tmp_path):
    """Bytes that are neither a zip archive nor an LZ4 frame"""
    def make(name):
        path = tmp_path / name
        path.write_bytes(b"this is definitely not an archive, just some text " * 4)
        return path

    return make
