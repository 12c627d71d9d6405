"""Themed console output for context-engineer.

Wraps a Rich console with a small set of retro terminal themes and the
status-line helpers used by the command line and the selection menu.
"""

import os
import random
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Sequence

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")
    INFO = ("[i]", "info", "cyan")
    DEBUG = ("[D]", "debug", "magenta")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    prompt: str
    path: str
    number: str
    dim: str
    interactive: str       # Menu control options
    match: str             # Characters matched by the search filter
    token_count: str
    heading: str = "bright_yellow"
    debug: str = "magenta"


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        prompt='bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
        interactive='bold bright_cyan',
        match='bold bright_yellow',
        token_count='bright_blue',
        debug='bright_magenta',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        prompt='bright_green',
        path='bright_green',
        number='green',
        dim='green',
        interactive='bold bright_green',
        match='bold bright_white',
        token_count='bright_white',
        heading='bright_cyan',
    ),
    'matrix': ThemeColors(
        info='bright_green',
        warning='yellow',
        error='red',
        success='green',
        highlight='bold bright_green',
        prompt='bright_green',
        path='green',
        number='bright_green',
        dim='green',
        interactive='bold bright_green',
        match='bold bright_white',
        token_count='bright_white',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        highlight='bold orange1',
        prompt='orange1',
        path='wheat1',
        number='orange1',
        dim='grey50',
        interactive='bold bright_cyan',
        match='bold bright_cyan',
        token_count='orange1',
        heading='dark_orange3',
    ),
}


class ConsoleManager:
    """Console output with theme support."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_terminal: Optional[bool] = None):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_terminal: Passed through to Rich; None lets Rich detect
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.console = Console(
            theme=self._create_rich_theme(),
            file=file,
            force_terminal=force_terminal,
            highlight=False,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'info': colors.info,
            'warning': colors.warning,
            'error': colors.error,
            'success': colors.success,
            'highlight': colors.highlight,
            'prompt': colors.prompt,
            'path': colors.path,
            'number': colors.number,
            'dim': colors.dim,
            'interactive': colors.interactive,
            'match': colors.match,
            'token_count': colors.token_count,
            'heading': colors.heading,
            'debug': colors.debug,
        })

    def print(self, *args, **kwargs):
        self.console.print(*args, **kwargs)

    def print_status(self, status: StatusType, message: str, prefix: str = ""):
        """Print a status line with icon."""
        icon, style, _ = status.value
        status_text = Text()
        if prefix:
            status_text.append(prefix + " ")
        status_text.append(f"{icon} ", style=style)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        self.print_status(StatusType.SUCCESS, message)

    def print_info(self, message: str):
        self.print_status(StatusType.INFO, message)

    def print_warning(self, message: str):
        self.print_status(StatusType.WARNING, message)

    def print_separator(self, char: str = "═", width: int = 60):
        self.console.print(char * width, style="dim")

    def print_exception(self):
        """Print the current exception traceback."""
        self.console.print_exception()

    def highlight_match(self, string: str, positions: Sequence[int]) -> Text:
        """Render a candidate with the characters matched by the filter emphasised."""
        text = Text(string, style="path")
        for pos in positions:
            text.stylize("match", pos, pos + 1)
        return text

    def print_file_list(self, files: Sequence[str], tokens: Optional[dict] = None):
        """Print a 1-indexed list of files, with token counts when known."""
        for i, path in enumerate(files, start=1):
            line = Text(f"  {i}. ")
            line.append(path, style="path")
            if tokens and path in tokens:
                line.append(f"  ~{tokens[path]:,} tokens", style="token_count")
            self.console.print(line)


def get_alternating_theme() -> str:
    """Manhattan during day, sunset in evening, with 20% chance for any theme."""
    local_hour = datetime.now().hour
    base_theme = 'manhattan' if 6 <= local_hour < 18 else 'sunset'

    if random.random() < 0.2:
        return random.choice(list(THEMES))
    return base_theme


def default_theme() -> str:
    """Theme from CONTEXT_ENGINEER_THEME, otherwise time of day."""
    theme = os.environ.get('CONTEXT_ENGINEER_THEME', '')
    return theme if theme in THEMES else get_alternating_theme()
