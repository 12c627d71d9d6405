"""
Base candidate source interface.

A source supplies the flat list of file identifiers the core works on,
either as a pool to browse or as an already-final selection.
"""

from abc import ABC, abstractmethod
from typing import List

from ..core.models import Config
from ..utils.file_filter import FileFilter


class CandidateSource(ABC):
    """
    Abstract base class for candidate sources.

    ``errors`` collects per-entry problems that were skipped rather than
    treated as fatal.
    """

    # True when the files still need to be chosen interactively
    interactive: bool = False

    def __init__(self, config: Config):
        """Initialize source with configuration."""
        self.config = config
        self.file_filter = FileFilter(config)
        self.errors: List[str] = []

    @abstractmethod
    def get_name(self) -> str:
        """Short description of where the files come from."""
        pass

    @abstractmethod
    def get_file_list(self) -> List[str]:
        """
        Get the file identifiers supplied by this source.

        Returns:
            Ordered list of file identifiers.

        Raises:
            NoFilesError: If the source yields no usable files.
        """
        pass
