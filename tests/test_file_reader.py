import os
import pytest
from unittest.mock import patch

from context_engineer.core.file_reader import FileReader
from context_engineer.core.exceptions import FileReadError
from context_engineer.core.models import Config


class TestFileReader:
    @pytest.fixture
    def workspace(self, temp_workspace):
        (temp_workspace / "notes.txt").write_bytes(b"line one\r\nline two\n")
        (temp_workspace / "blob.dat").write_bytes(b"abc\x00def")
        (temp_workspace / "latin.txt").write_bytes(b"caf\xe9")
        (temp_workspace / "sub").mkdir()
        return temp_workspace

    @pytest.fixture
    def reader(self, workspace):
        return FileReader(Config(), workspace)

    def test_read_keeps_content_exactly(self, reader):
        assert reader.read("notes.txt") == "line one\r\nline two\n"

    def test_absolute_identifier(self, reader, workspace):
        assert reader.read(str(workspace / "notes.txt")).startswith("line one")

    def test_default_root_is_cwd(self, workspace, monkeypatch):
        monkeypatch.chdir(workspace)
        assert FileReader(Config()).read("notes.txt").startswith("line one")

    def test_missing_file(self, reader):
        content, error = reader.read_file_content("missing.txt")
        assert content is None
        assert error == "File not found"

    def test_directory(self, reader):
        content, error = reader.read_file_content("sub")
        assert content is None
        assert error == "Is a directory"

    def test_binary_content(self, reader):
        content, error = reader.read_file_content("blob.dat")
        assert content is None
        assert error == "Binary file"

    def test_invalid_text(self, reader):
        content, error = reader.read_file_content("latin.txt")
        assert content is None
        assert "Not valid utf-8 text" in error

    def test_configured_encoding(self, workspace):
        reader = FileReader(Config(file_encoding="latin-1"), workspace)
        assert reader.read("latin.txt") == "café"

    def test_permission_error(self, reader):
        with patch('builtins.open', side_effect=PermissionError("Access denied")):
            content, error = reader.read_file_content("notes.txt")
        assert content is None
        assert error == "Permission denied"

    def test_read_raises_with_reason(self, reader):
        with pytest.raises(FileReadError) as exc_info:
            reader.read("missing.txt")
        assert exc_info.value.identifier == "missing.txt"
        assert exc_info.value.reason == "File not found"
        assert "missing.txt" in str(exc_info.value)

    def test_is_readable(self, reader):
        assert reader.is_readable("notes.txt")
        assert not reader.is_readable("missing.txt")
        assert not reader.is_readable("sub")
