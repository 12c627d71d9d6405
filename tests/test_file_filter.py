import pytest

from context_engineer.core.models import Config
from context_engineer.utils.file_filter import FileFilter, glob_to_regex


class TestGlobToRegex:
    @pytest.mark.parametrize("pattern, path, expected", [
        ("**/node_modules/**", "node_modules/pkg/index.js", True),
        ("**/node_modules/**", "web/node_modules/pkg/index.js", True),
        ("**/node_modules/**", "src/node_modules_helper.py", False),
        ("**/*.log", "debug.log", True),
        ("**/*.log", "logs/app/debug.log", True),
        ("**/*.log", "debug.log.txt", False),
        ("*.md", "README.md", True),
        ("*.md", "docs/guide.md", False),
        ("src/?.py", "src/a.py", True),
        ("src/?.py", "src/ab.py", False),
    ])
    def test_patterns(self, pattern, path, expected):
        assert bool(glob_to_regex(pattern).match(path)) is expected


class TestFileFilter:
    @pytest.fixture
    def file_filter(self):
        return FileFilter(Config())

    def test_ignored_paths(self, file_filter):
        assert file_filter.is_ignored("node_modules/a/b.js")
        assert file_filter.is_ignored(".git/config")
        assert file_filter.is_ignored("packages/web/dist/main.js")
        assert file_filter.is_ignored("yarn.lock")
        assert file_filter.is_ignored("sub/package-lock.json")
        assert not file_filter.is_ignored("src/main.py")

    def test_windows_separators(self, file_filter):
        assert file_filter.is_ignored("web\\node_modules\\x.js")

    def test_binary_extension(self, file_filter):
        assert file_filter.is_binary_extension("assets/logo.PNG")
        assert file_filter.is_binary_extension("a.pdf")
        assert not file_filter.is_binary_extension("src/main.py")

    def test_filter_files(self, file_filter):
        files = ["src/main.py", "logo.png", "dist/out.js", "README.md"]
        assert file_filter.filter_files(files) == ["src/main.py", "README.md"]

    def test_excluded_reason(self, file_filter):
        assert file_filter.get_excluded_reason("debug.log") == "Matches ignore pattern"
        assert file_filter.get_excluded_reason("logo.png") == "Binary file extension"
        assert file_filter.get_excluded_reason("src/main.py") is None

    def test_custom_patterns(self):
        file_filter = FileFilter(Config(ignored_patterns=["**/generated/**"]))
        assert file_filter.is_ignored("src/generated/api.py")
        assert not file_filter.is_ignored("debug.log")
