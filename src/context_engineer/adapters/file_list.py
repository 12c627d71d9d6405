"""Explicit file lists, given on the command line or in a list file."""
import os
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..core.models import Config
from ..core.exceptions import ConfigFileError, NoFilesError
from .base import CandidateSource

logger = logging.getLogger(__name__)


def read_list_file(list_path: Union[str, Path]) -> List[str]:
    """
    Read a file list separated by any whitespace, line breaks included.

    Raises:
        ConfigFileError: If the list file cannot be read.
    """
    full_path = Path(list_path).resolve()
    try:
        content = full_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Error reading config file '{list_path}': {e}") from e
    return content.split()


class FileListSource(CandidateSource):
    """A caller-chosen list of files, validated but not browsed."""

    def __init__(self, files: Sequence[str], config: Config,
                 root: Optional[Union[str, Path]] = None, origin: str = "arguments"):
        super().__init__(config)
        self.files = list(files)
        self.root = os.path.abspath(root) if root is not None else os.getcwd()
        self.origin = origin
        self.skipped_binary: List[str] = []
        self.missing: List[str] = []

    @classmethod
    def from_config_file(cls, list_path: Union[str, Path], config: Config,
                         root: Optional[Union[str, Path]] = None) -> 'FileListSource':
        files = read_list_file(list_path)
        logger.info(f"Loaded {len(files)} files from config: {list_path}")
        return cls(files, config, root=root, origin=f"config file {list_path}")

    def get_name(self) -> str:
        return self.origin

    def _full_path(self, file_path: str) -> str:
        return os.path.join(self.root, file_path)

    def validate(self) -> List[str]:
        """Keep entries that exist, are readable and are not binary by extension."""
        valid = []
        self.skipped_binary, self.missing, self.errors = [], [], []
        for file_path in self.files:
            full_path = self._full_path(file_path)
            if not os.path.isfile(full_path) or not os.access(full_path, os.R_OK):
                logger.warning(f"File not found or not readable: {file_path}")
                self.missing.append(file_path)
                self.errors.append(f"File not found or not readable: {file_path}")
                continue

            if self.file_filter.is_binary_extension(file_path):
                logger.warning(f"Skipping binary file: {file_path}")
                self.skipped_binary.append(file_path)
                self.errors.append(f"Skipping binary file: {file_path}")
                continue

            if file_path in valid:
                continue
            valid.append(file_path)
        return valid

    def get_file_list(self) -> List[str]:
        """
        Get the validated files in the given order.

        Raises:
            NoFilesError: If no entry survives validation.
        """
        valid = self.validate()
        if not valid:
            raise NoFilesError(f"No valid files found from {self.origin}.")
        return valid
