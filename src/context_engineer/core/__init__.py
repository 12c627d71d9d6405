"""Core components for context-engineer."""

from .models import Config, SelectionState, WrappedBlock, AssembledDocument, wrap_file
from .exceptions import (
    ContextEngineerError,
    FileReadError,
    EmptyRequestError,
    NoFilesError,
    ConfigFileError,
    TokenizerError,
)
from .file_reader import FileReader
from .tokenizer import TokenCounter
from .fuzzy import FuzzyMatch, rank
from .selection import (
    SelectionEngine,
    SelectionView,
    Outcome,
    OutcomeKind,
    SetFilter,
    ClearFilter,
    SelectFile,
    Preview,
    ClearAll,
    Done,
)
from .assembly import AssemblyPipeline

__all__ = [
    "Config",
    "SelectionState",
    "WrappedBlock",
    "AssembledDocument",
    "wrap_file",
    "ContextEngineerError",
    "FileReadError",
    "EmptyRequestError",
    "NoFilesError",
    "ConfigFileError",
    "TokenizerError",
    "FileReader",
    "TokenCounter",
    "FuzzyMatch",
    "rank",
    "SelectionEngine",
    "SelectionView",
    "Outcome",
    "OutcomeKind",
    "SetFilter",
    "ClearFilter",
    "SelectFile",
    "Preview",
    "ClearAll",
    "Done",
    "AssemblyPipeline",
]
