"""Candidate sources for the selection and assembly core."""
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from ..core.models import Config
from .base import CandidateSource
from .file_list import FileListSource, read_list_file
from .local import DirectorySource


def create_source(files: Optional[Sequence[str]] = None,
                  config_file: Optional[Union[str, Path]] = None,
                  root: Optional[Union[str, Path]] = None,
                  config: Optional[Config] = None) -> CandidateSource:
    """
    Create the appropriate candidate source.

    A list file wins over explicit files; with neither, the root directory
    is discovered recursively and the result is browsed interactively.

    Args:
        files: Explicit file identifiers.
        config_file: Path to a whitespace-separated file list.
        root: Directory identifiers are relative to (default: cwd).
        config: Configuration object.

    Returns:
        Appropriate CandidateSource instance
    """
    config = config or Config()
    root = root if root is not None else os.getcwd()

    if config_file:
        return FileListSource.from_config_file(config_file, config, root=root)
    if files:
        return FileListSource(files, config, root=root)
    return DirectorySource(root, config)


__all__ = ['CandidateSource', 'DirectorySource', 'FileListSource', 'read_list_file', 'create_source']
