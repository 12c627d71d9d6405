import pytest
import tempfile
import shutil
from pathlib import Path

from context_engineer.core.models import Config
from context_engineer.core.file_reader import FileReader


class CharTokenizer:
    """One token per character; deterministic and needs no encoding download."""

    def count(self, text: str) -> int:
        return len(text)


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_project(temp_workspace):
    """Create a sample project structure for testing."""
    root = temp_workspace / "sample_project"
    root.mkdir()

    (root / "src").mkdir()
    (root / "src" / "utils").mkdir()
    (root / "docs").mkdir()
    (root / ".git").mkdir()
    (root / "node_modules").mkdir()
    (root / "dist").mkdir()

    (root / "README.md").write_text("# Sample Project\n")
    (root / "src" / "main.py").write_text("def main():\n    print('Hello, World!')")
    (root / "src" / "utils" / "helpers.py").write_text("def helper():\n    return 42")
    (root / "docs" / "guide.md").write_text("Guide")
    (root / "debug.log").write_text("log line")
    (root / "yarn.lock").write_text("lock")
    (root / ".env").write_text("SECRET=1")
    (root / ".git" / "config").write_text("[core]\n    repositoryformatversion = 0")
    (root / "node_modules" / "package.json").write_text('{"name": "test"}')
    (root / "dist" / "bundle.js").write_text("var a;")

    (root / "image.png").write_bytes(b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR')

    return root


@pytest.fixture
def tokenizer():
    return CharTokenizer()


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def text_files(temp_workspace):
    """a.txt / b.txt / c.txt with short contents."""
    (temp_workspace / "a.txt").write_text("hello")
    (temp_workspace / "b.txt").write_text("world")
    (temp_workspace / "c.txt").write_text("again")
    return temp_workspace


@pytest.fixture
def reader(config, text_files):
    return FileReader(config, text_files)
