"""Path normalization utilities for cross-platform compatibility."""

import os
from pathlib import Path
from typing import Union


class PathUtils:
    """Utilities for consistent file identifiers across platforms."""

    @staticmethod
    def normalize_path(path: str) -> str:
        """
        Normalize path separators to forward slashes.

        Args:
            path: File path with potentially mixed separators

        Returns:
            Path with forward slashes only
        """
        return path.replace('\\\\', '/').replace('\\', '/')

    @staticmethod
    def to_identifier(path: Union[str, Path], root: Union[str, Path]) -> str:
        """
        Express a path found under root as a forward-slash relative identifier.

        Args:
            path: Absolute or root-joined path to a file
            root: Discovery root

        Returns:
            Relative identifier such as ``src/main.py``
        """
        return PathUtils.normalize_path(os.path.relpath(str(path), str(root)))
