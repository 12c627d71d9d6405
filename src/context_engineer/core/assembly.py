"""
Assembly of the final context document.

Given an ordered file list and a request, reads each file fresh, wraps it in
tags named after its identifier and appends a single request block. Token
counts are recomputed here; nothing measured during selection is reused.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .models import Config, AssembledDocument, WrappedBlock, build_request_block
from .exceptions import EmptyRequestError, NoFilesError

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


class AssemblyPipeline:
    """Builds an AssembledDocument from a finalized file list."""

    def __init__(self, reader, tokenizer, config: Optional[Config] = None):
        self.reader = reader
        self.tokenizer = tokenizer
        self.config = config or Config()

    def _wrapped_blocks(self, files: Sequence[str]) -> List[WrappedBlock]:
        # FileReader.read raises FileReadError, which aborts the run
        return [WrappedBlock(path, self.reader.read(path)) for path in files]

    def _block_costs(self, blocks: Sequence[WrappedBlock]) -> List[Tuple[str, int]]:
        return [(block.identifier, self.tokenizer.count(block.text)) for block in blocks]

    def measure(self, files: Sequence[str]) -> int:
        """
        Advisory token total for the file blocks alone.

        Lets the caller warn about size before asking for the request text.

        Raises:
            FileReadError: If any file cannot be read.
        """
        total = sum(tokens for _, tokens in self._block_costs(self._wrapped_blocks(files)))
        logger.debug(f"Measured {len(files)} files at {total:,} tokens")
        return total

    def exceeds_threshold(self, total: int) -> bool:
        return total > self.config.token_warning_threshold

    def assemble(self, files: Sequence[str], request: str) -> AssembledDocument:
        """
        Build the final document.

        Args:
            files: Distinct, readable identifiers in output order.
            request: Request text; surrounding whitespace is trimmed.

        Returns:
            The assembled document and its exact token count.

        Raises:
            NoFilesError: If files is empty.
            EmptyRequestError: If the trimmed request is empty.
            FileReadError: If any file cannot be read. No partial output
                is produced.
        """
        if not files:
            raise NoFilesError("No files to assemble.")

        request = (request or "").strip()
        if not request:
            raise EmptyRequestError()

        blocks = self._wrapped_blocks(files)
        file_tokens = self._block_costs(blocks)

        request_block = build_request_block(request)
        request_tokens = self.tokenizer.count(request_block)

        text = "".join(block.text + BLOCK_SEPARATOR for block in blocks) + request_block
        token_count = sum(tokens for _, tokens in file_tokens) + request_tokens

        logger.debug(f"Assembled {len(blocks)} files, {token_count:,} tokens")
        return AssembledDocument(
            text=text,
            token_count=token_count,
            files=tuple(files),
            file_tokens=tuple(file_tokens),
            request_tokens=request_tokens,
        )
