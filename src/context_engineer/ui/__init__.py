"""Terminal user interface for context-engineer."""

from .prompter import TerminalPrompter, token_warning

__all__ = ["TerminalPrompter", "token_warning"]
