"""
Token counting functionality for context-engineer.

This module provides token counting using OpenAI's tiktoken library.
Counts must be exact, so a missing or broken encoding is a hard error
rather than a silent zero.
"""

import logging
from typing import Dict, List

import tiktoken

from .exceptions import TokenizerError

logger = logging.getLogger(__name__)


class TokenCounter:
    """
    Handles token counting for text content.

    Any object exposing ``count(text) -> int`` can stand in for this class
    wherever a tokenizer is injected.
    """

    def __init__(self, encoding_name: str = "cl100k_base"):
        """
        Initialize the token counter.

        Args:
            encoding_name: The name of the tiktoken encoding to use.
                         Default is cl100k_base (used by GPT-4).

        Raises:
            TokenizerError: If the encoding cannot be loaded.
        """
        self.encoding_name = encoding_name
        try:
            self.encoder = tiktoken.get_encoding(encoding_name)
        except Exception as e:
            raise TokenizerError(
                f"Failed to initialize token encoder '{encoding_name}': {e}"
            ) from e
        logger.debug(f"Loaded token encoder {encoding_name}")

    def encode(self, text: str) -> List[int]:
        """Encode text into token ids."""
        if not text:
            return []
        # Special-token text inside source files is counted as plain text
        return self.encoder.encode(text, disallowed_special=())

    def count(self, text: str) -> int:
        """
        Count tokens in the given text.

        Args:
            text: The text to count tokens for.

        Returns:
            Number of tokens.
        """
        return len(self.encode(text))

    def count_batch(self, texts: Dict[str, str]) -> Dict[str, int]:
        """
        Count tokens for multiple texts.

        Args:
            texts: Dictionary mapping identifiers to text content.

        Returns:
            Dictionary mapping identifiers to token counts.
        """
        return {key: self.count(text) for key, text in texts.items()}
