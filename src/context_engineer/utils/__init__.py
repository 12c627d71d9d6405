"""Utility modules for context-engineer."""

from .file_filter import FileFilter, glob_to_regex
from .path_utils import PathUtils

__all__ = ["FileFilter", "glob_to_regex", "PathUtils"]
