"""Recursive directory discovery of candidate files."""
import os
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..core.models import Config
from ..core.exceptions import NoFilesError
from ..utils.path_utils import PathUtils
from .base import CandidateSource

logger = logging.getLogger(__name__)


class DirectorySource(CandidateSource):
    """Discovers every eligible text file under a root directory."""

    interactive = True

    def __init__(self, root: Union[str, Path], config: Config):
        """Initialize source with the discovery root."""
        super().__init__(config)

        if not os.path.isdir(root):
            raise ValueError(f"Path is not a directory: {root}")

        self.root = os.path.abspath(root)
        self.total_found = 0
        self.excluded_binary = 0
        self._files: Optional[List[str]] = None

    def get_name(self) -> str:
        return self.root

    def _walk(self) -> List[str]:
        """All non-hidden, non-ignored files below the root, sorted."""
        found = []
        for current, dirs, files in os.walk(self.root):
            rel_dir = PathUtils.to_identifier(current, self.root)
            prefix = '' if rel_dir == '.' else rel_dir + '/'

            # Prune in place so os.walk never descends into them
            dirs[:] = sorted(
                d for d in dirs
                if not d.startswith('.')
                and not os.path.islink(os.path.join(current, d))
                and not self.file_filter.is_ignored(f"{prefix}{d}/")
            )

            for name in files:
                if name.startswith('.'):
                    continue
                rel_path = f"{prefix}{name}"
                if self.file_filter.is_ignored(rel_path):
                    continue
                found.append(rel_path)
        return sorted(found)

    def get_file_list(self) -> List[str]:
        """
        Get candidate files relative to the root.

        Raises:
            NoFilesError: If nothing suitable is found.
        """
        if self._files is None:
            all_files = self._walk()
            files = [f for f in all_files if not self.file_filter.is_binary_extension(f)]

            self.total_found = len(all_files)
            self.excluded_binary = len(all_files) - len(files)
            self._files = files
            logger.debug(
                f"Discovered {len(files)} files under {self.root} "
                f"({self.excluded_binary} binary excluded)"
            )

        if not self._files:
            raise NoFilesError("No suitable files found in this directory.")
        return list(self._files)
