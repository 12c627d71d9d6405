"""
Terminal front end for the selection engine.

TerminalPrompter is the only piece that talks to the user: it renders each
SelectionView as a numbered menu, turns the reply into an action and prints
the outcome the engine hands back.
"""

import logging
from typing import Optional

from rich.prompt import Prompt
from rich.text import Text

from ..core.models import Config
from ..core.selection import (
    Action,
    ClearAll,
    ClearFilter,
    Done,
    Outcome,
    OutcomeKind,
    Preview,
    SelectFile,
    SelectionView,
    SetFilter,
)
from ..utils.console import ConsoleManager

logger = logging.getLogger(__name__)

# Menu keys
KEY_DONE = 'd'
KEY_PREVIEW = 'p'
KEY_CLEAR_ALL = 'x'
KEY_SEARCH = 's'
KEY_CLEAR_SEARCH = 'c'


class TerminalPrompter:
    """Reads selection actions from the terminal and reports outcomes."""

    def __init__(self, console: ConsoleManager, config: Optional[Config] = None):
        self.ui = console
        self.config = config or Config()

    def _ask(self, message: str) -> str:
        return Prompt.ask(message, console=self.ui.console, default="", show_default=False)

    def _title(self, view: SelectionView) -> str:
        status = f"{view.selected_count} selected, ~{view.total_tokens:,} tokens"
        if view.filter_term:
            status += f', filtered by "{view.filter_term}"'
        return f"Select a file to add ({status}):"

    def render(self, view: SelectionView) -> None:
        """Print the control options followed by the numbered candidates."""
        self.ui.print()
        self.ui.print(self._title(view), style="highlight", markup=False)

        controls = [(KEY_DONE, "Done selecting files")]
        if view.has_selection:
            controls.append((KEY_PREVIEW, "Preview current selection"))
            controls.append((KEY_CLEAR_ALL, "Clear all selections"))
        controls.append((KEY_SEARCH, "Search/filter files"))
        if view.filter_term:
            controls.append((KEY_CLEAR_SEARCH, f'Clear search ("{view.filter_term}")'))

        for key, label in controls:
            line = Text(f"  [{key}] ", style="interactive")
            line.append(label)
            self.ui.print(line)

        if not view.display:
            self.ui.print("  No files match the current search.", style="dim")
        for i, match in enumerate(view.display, start=1):
            line = Text(f"  {i:2d}. ", style="number")
            line.append_text(self.ui.highlight_match(match.string, match.positions))
            self.ui.print(line)

        if view.matched_count > len(view.display):
            self.ui.print(
                f"  ... {view.matched_count - len(view.display)} more, use search to narrow",
                style="dim",
            )

    def parse(self, reply: str, view: SelectionView) -> Optional[Action]:
        """
        Turn a menu reply into an action.

        A leading ``/`` sets the search term inline, e.g. ``/cli``.
        Returns None when the reply is not a valid choice.
        """
        reply = reply.strip()
        key = reply.lower()

        if not reply:
            return None
        if key == KEY_DONE:
            return Done()
        if key == KEY_PREVIEW and view.has_selection:
            return Preview()
        if key == KEY_CLEAR_ALL and view.has_selection:
            return ClearAll()
        if key == KEY_CLEAR_SEARCH and view.filter_term:
            return ClearFilter()
        if key == KEY_SEARCH:
            term = self._ask("[prompt]Enter search term to filter files[/prompt]")
            return SetFilter(term)
        if reply.startswith('/') and len(reply) > 1:
            return SetFilter(reply[1:])
        if reply.isdigit():
            index = int(reply)
            if 1 <= index <= len(view.display):
                return SelectFile(view.display[index - 1].string)
        return None

    def next_action(self, view: SelectionView) -> Action:
        """Show the menu and keep asking until the reply is a valid action."""
        self.render(view)
        while True:
            reply = self._ask("[prompt][?] Your choice[/prompt]")
            action = self.parse(reply, view)
            if action is not None:
                return action
            self.ui.print_warning("Invalid input. Please try again.")

    def report(self, outcome: Outcome) -> None:
        """Print the feedback for an outcome."""
        kind = outcome.kind

        if kind is OutcomeKind.ADDED:
            self.ui.print_success(outcome.message)
            if outcome.threshold_crossed:
                self.ui.print_warning(token_warning(self.config))
        elif kind is OutcomeKind.PREVIEW:
            self.ui.print_info(outcome.message)
            for position, path, tokens in outcome.listing:
                self.ui.print(f"  {position}. {path} (~{tokens:,} tokens)", markup=False)
            self.ui.print_info(f"Total tokens: ~{outcome.total_tokens:,}")
        elif kind is OutcomeKind.READ_FAILED:
            self.ui.print_error(outcome.message)
        elif outcome.is_diagnostic:
            self.ui.print_warning(outcome.message)
        elif kind is OutcomeKind.DONE:
            return
        else:
            self.ui.print_info(outcome.message)

    def ask_request(self) -> str:
        """Prompt until the request text is non-empty after trimming."""
        while True:
            request = self._ask("[prompt]Enter the request text[/prompt]").strip()
            if request:
                return request
            self.ui.print_warning("Request cannot be empty.")


def token_warning(config: Config) -> str:
    threshold = config.token_warning_threshold
    return (
        f"Warning: Token count is quite high (>{threshold:,}). "
        "Consider reducing selection for better LLM performance."
    )
