"""
File filtering utilities for context-engineer.

This module decides which paths are eligible candidates, based on ignore
glob patterns and known binary extensions.
"""

import re
from pathlib import PurePosixPath
from typing import List, Optional, Pattern

from ..core.models import Config
from .path_utils import PathUtils


def glob_to_regex(pattern: str) -> Pattern:
    """
    Translate a glob with ``**`` support into a compiled regex.

    ``**/`` matches zero or more directories, ``**`` matches anything,
    ``*`` and ``?`` never cross a ``/``.
    """
    pattern = PathUtils.normalize_path(pattern)
    i = 0
    out = []
    while i < len(pattern):
        if pattern.startswith('**/', i):
            out.append('(?:.*/)?')
            i += 3
        elif pattern.startswith('**', i):
            out.append('.*')
            i += 2
        elif pattern[i] == '*':
            out.append('[^/]*')
            i += 1
        elif pattern[i] == '?':
            out.append('[^/]')
            i += 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    return re.compile('^' + ''.join(out) + '$')


class FileFilter:
    """Handles file filtering logic."""

    def __init__(self, config: Config):
        self.config = config
        self._ignore_regexes = [glob_to_regex(p) for p in config.ignored_patterns]

    def is_ignored(self, rel_path: str) -> bool:
        """
        Check if a path relative to the discovery root matches an ignore pattern.

        Args:
            rel_path: Path relative to the root.

        Returns:
            True if the path should be ignored.
        """
        path = PathUtils.normalize_path(rel_path)
        return any(regex.match(path) for regex in self._ignore_regexes)

    def is_binary_extension(self, file_path: str) -> bool:
        """
        Check if file has a known binary extension.

        Args:
            file_path: Path to the file.

        Returns:
            True if file has binary extension, False otherwise.
        """
        suffix = PurePosixPath(PathUtils.normalize_path(file_path)).suffix
        return suffix.lower() in self.config.binary_extensions

    def filter_files(self, file_paths: List[str]) -> List[str]:
        """
        Filter a list of relative file paths on every criterion.

        Args:
            file_paths: List of file paths to filter.

        Returns:
            Filtered list of file paths, order preserved.
        """
        return [
            path for path in file_paths
            if not self.is_ignored(path) and not self.is_binary_extension(path)
        ]

    def get_excluded_reason(self, file_path: str) -> Optional[str]:
        """
        Get the reason why a file would be excluded.

        Args:
            file_path: Path to the file.

        Returns:
            Reason string if file would be excluded, None otherwise.
        """
        if self.is_ignored(file_path):
            return "Matches ignore pattern"
        if self.is_binary_extension(file_path):
            return "Binary file extension"
        return None
