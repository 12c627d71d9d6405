"""
Core data models for context-engineer.

This module contains the fundamental data structures used throughout
the application for configuration, selection state and the assembled
output document.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Set, Optional, Tuple
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class Config:
    """Configuration settings for context-engineer."""

    output_file: str = field(
        default_factory=lambda: os.getenv('CONTEXT_ENGINEER_OUTPUT', 'context-output.txt')
    )
    tokenizer_encoding: str = field(
        default_factory=lambda: os.getenv('CONTEXT_ENGINEER_ENCODING', 'cl100k_base')
    )

    # Advisory only, never a hard stop
    token_warning_threshold: int = 100000

    page_size: int = 20  # Max candidates offered per iteration
    file_encoding: str = 'utf-8'
    binary_sample_size: int = 8192

    # Glob patterns relative to the discovery root
    ignored_patterns: List[str] = field(default_factory=lambda: [
        '**/node_modules/**',
        '**/.git/**',
        '**/dist/**',
        '**/build/**',
        '**/.next/**',
        '**/coverage/**',
        '**/*.log',
        '**/*.lock',
        '**/package-lock.json',
        '**/yarn.lock',
        '**/.DS_Store',
        '**/Thumbs.db',
    ])

    binary_extensions: Set[str] = field(default_factory=lambda: {
        # Images
        '.png', '.jpg', '.jpeg', '.gif', '.bmp', '.ico', '.svg',
        # Video
        '.mp4', '.avi', '.mov', '.wmv', '.flv', '.webm',
        # Audio
        '.mp3', '.wav', '.flac', '.aac', '.ogg',
        # Archives
        '.zip', '.rar', '.7z', '.tar', '.gz',
        # Documents
        '.pdf', '.doc', '.docx', '.xls', '.xlsx',
        # Executables & Libraries
        '.exe', '.dll', '.so', '.dylib',
    })


@dataclass(frozen=True)
class WrappedBlock:
    """A file's content enclosed by tags named after the file identifier."""

    identifier: str
    content: str

    @property
    def text(self) -> str:
        return f"<{self.identifier}>\n{self.content}\n</{self.identifier}>"


def wrap_file(identifier: str, content: str) -> str:
    """Return the wrapped block text for a file."""
    return WrappedBlock(identifier, content).text


def build_request_block(request: str) -> str:
    """Return the closing request block for already-trimmed request text."""
    return f"<request>\n{request}\n</request>"


@dataclass
class SelectionState:
    """
    Mutable state of one interactive selection session.

    ``running_token_total`` is accumulated from the cost measured when each
    file was added; it is not recomputed from disk afterwards.
    """

    selected: List[str] = field(default_factory=list)
    running_token_total: int = 0
    filter_term: Optional[str] = None
    file_tokens: Dict[str, int] = field(default_factory=dict)

    def is_selected(self, identifier: str) -> bool:
        return identifier in self.file_tokens

    def add(self, identifier: str, tokens: int) -> None:
        """Append a file and add its cost to the running total."""
        self.selected.append(identifier)
        self.file_tokens[identifier] = tokens
        self.running_token_total += tokens

    def clear(self) -> None:
        """Drop every selection and reset the running total to zero."""
        self.selected.clear()
        self.file_tokens.clear()
        self.running_token_total = 0

    def preview(self) -> List[Tuple[int, str, int]]:
        """1-indexed listing of (position, identifier, tokens)."""
        return [
            (i, path, self.file_tokens.get(path, 0))
            for i, path in enumerate(self.selected, start=1)
        ]


@dataclass(frozen=True)
class AssembledDocument:
    """Final output of the assembly pipeline."""

    text: str
    token_count: int
    files: Tuple[str, ...]
    file_tokens: Tuple[Tuple[str, int], ...] = ()
    request_tokens: int = 0

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def files_token_total(self) -> int:
        """Token cost of the file blocks alone."""
        return sum(tokens for _, tokens in self.file_tokens)
