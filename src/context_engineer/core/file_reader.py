"""
File reading for context-engineer.

Reads a file identifier's full text content, refusing anything that is
not decodable text in the configured encoding.
"""

import os
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from .models import Config
from .exceptions import FileReadError

logger = logging.getLogger(__name__)


class FileReader:
    """Reads file identifiers relative to a root directory."""

    def __init__(self, config: Config, root: Optional[Union[str, Path]] = None):
        self.config = config
        self.root = Path(root) if root is not None else Path.cwd()

    def resolve(self, identifier: str) -> Path:
        """Absolute identifiers are kept, relative ones are joined to the root."""
        path = Path(identifier)
        if path.is_absolute():
            return path
        return self.root / path

    def read_file_content(self, identifier: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Read a file's text content.

        Returns:
            Tuple of (content, error_message)
            If successful, content is the file text and error_message is None
            If failed, content is None and error_message describes the issue
        """
        path = self.resolve(identifier)
        try:
            if not path.exists():
                return None, "File not found"
            if path.is_dir():
                return None, "Is a directory"

            with open(path, 'rb') as f:
                raw_content = f.read()

            if b'\x00' in raw_content[:self.config.binary_sample_size]:
                return None, "Binary file"

            try:
                # Newlines are kept exactly as stored on disk
                return raw_content.decode(self.config.file_encoding), None
            except UnicodeDecodeError as e:
                return None, f"Not valid {self.config.file_encoding} text (byte {e.start})"

        except PermissionError:
            return None, "Permission denied"
        except OSError as e:
            return None, f"Error reading file: {e.strerror or e}"

    def read(self, identifier: str) -> str:
        """
        Read a file's text content.

        Raises:
            FileReadError: If the file cannot be read as text.
        """
        content, error = self.read_file_content(identifier)
        if content is None:
            raise FileReadError(identifier, error or "Unknown error")
        return content

    def is_readable(self, identifier: str) -> bool:
        """Cheap access check without reading the content."""
        path = self.resolve(identifier)
        return path.is_file() and os.access(path, os.R_OK)
