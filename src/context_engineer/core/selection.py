"""
Interactive selection engine.

The engine owns a SelectionState and advances it one discrete action at a
time. Soliciting those actions from a terminal is the job of an injected
prompter, so the transition logic runs the same with or without a user.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union, TYPE_CHECKING

from .models import Config, SelectionState, wrap_file
from .fuzzy import FuzzyMatch, rank

if TYPE_CHECKING:
    from .file_reader import FileReader

logger = logging.getLogger(__name__)


# Actions

@dataclass(frozen=True)
class SetFilter:
    term: str


@dataclass(frozen=True)
class ClearFilter:
    pass


@dataclass(frozen=True)
class SelectFile:
    identifier: str


@dataclass(frozen=True)
class Preview:
    pass


@dataclass(frozen=True)
class ClearAll:
    pass


@dataclass(frozen=True)
class Done:
    pass


Action = Union[SetFilter, ClearFilter, SelectFile, Preview, ClearAll, Done]


class SessionStatus(Enum):
    BROWSING = "browsing"
    FINISHED = "finished"


class OutcomeKind(Enum):
    """What happened in response to an action."""
    FILTER_SET = "filter_set"
    FILTER_CLEARED = "filter_cleared"
    NO_FILTER = "no_filter"
    ADDED = "added"
    ALREADY_SELECTED = "already_selected"
    NOT_AVAILABLE = "not_available"
    READ_FAILED = "read_failed"
    PREVIEW = "preview"
    NOTHING_SELECTED = "nothing_selected"
    CLEARED = "cleared"
    DONE = "done"
    EXHAUSTED = "exhausted"


# Outcomes that leave the state untouched and only report a problem
DIAGNOSTICS = {
    OutcomeKind.NO_FILTER,
    OutcomeKind.ALREADY_SELECTED,
    OutcomeKind.NOT_AVAILABLE,
    OutcomeKind.READ_FAILED,
    OutcomeKind.NOTHING_SELECTED,
}


@dataclass(frozen=True)
class Outcome:
    """Observable feedback for a single action."""

    kind: OutcomeKind
    message: str
    identifier: Optional[str] = None
    tokens: int = 0
    total_tokens: int = 0
    threshold_crossed: bool = False
    listing: Tuple[Tuple[int, str, int], ...] = ()

    @property
    def is_diagnostic(self) -> bool:
        return self.kind in DIAGNOSTICS


@dataclass(frozen=True)
class SelectionView:
    """Snapshot handed to the prompter before each action."""

    display: Tuple[FuzzyMatch, ...]
    selected_count: int
    total_tokens: int
    remaining_count: int
    filter_term: Optional[str] = None
    matched_count: int = 0

    @property
    def has_selection(self) -> bool:
        return self.selected_count > 0

    @property
    def choices(self) -> List[str]:
        return [m.string for m in self.display]


class SelectionEngine:
    """Builds an ordered file selection from a candidate pool."""

    def __init__(self, candidates: Sequence[str], reader: 'FileReader',
                 tokenizer, config: Optional[Config] = None):
        """
        Args:
            candidates: The candidate pool, in display order.
            reader: Reads file content; see FileReader.
            tokenizer: Any object with ``count(text) -> int``.
            config: Page size and warning threshold come from here.
        """
        self.candidates = tuple(candidates)
        self.reader = reader
        self.tokenizer = tokenizer
        self.config = config or Config()
        self.state = SelectionState()
        self.status = SessionStatus.BROWSING
        self._check_exhausted()

    @property
    def selected(self) -> List[str]:
        return list(self.state.selected)

    @property
    def total_tokens(self) -> int:
        return self.state.running_token_total

    @property
    def is_finished(self) -> bool:
        return self.status is SessionStatus.FINISHED

    def remaining(self) -> List[str]:
        """Candidates not yet selected, in pool order."""
        return [c for c in self.candidates if not self.state.is_selected(c)]

    def display_list(self) -> List[FuzzyMatch]:
        """Remaining candidates, narrowed by the filter and cut to a page."""
        return self._matches()[:self.config.page_size]

    def _matches(self) -> List[FuzzyMatch]:
        remaining = self.remaining()
        if self.state.filter_term:
            return rank(self.state.filter_term, remaining)
        return [FuzzyMatch(c, 0.0, i) for i, c in enumerate(remaining)]

    def view(self) -> SelectionView:
        matches = self._matches()
        return SelectionView(
            display=tuple(matches[:self.config.page_size]),
            selected_count=len(self.state.selected),
            total_tokens=self.state.running_token_total,
            remaining_count=len(self.remaining()),
            filter_term=self.state.filter_term,
            matched_count=len(matches),
        )

    def _check_exhausted(self) -> bool:
        if not self.remaining():
            self.status = SessionStatus.FINISHED
            return True
        return False

    def apply(self, action: Action) -> Outcome:
        """Apply one action to the session state and describe the result."""
        if self.is_finished:
            raise RuntimeError("Selection session has already finished")

        if isinstance(action, SetFilter):
            outcome = self._set_filter(action.term)
        elif isinstance(action, ClearFilter):
            outcome = self._clear_filter()
        elif isinstance(action, SelectFile):
            outcome = self._select(action.identifier)
        elif isinstance(action, Preview):
            outcome = self._preview()
        elif isinstance(action, ClearAll):
            outcome = self._clear_all()
        elif isinstance(action, Done):
            self.status = SessionStatus.FINISHED
            return self._outcome(OutcomeKind.DONE, "Selection finished.")
        else:
            raise TypeError(f"Unknown action: {action!r}")

        if self._check_exhausted():
            logger.info("All candidate files have been selected")
        return outcome

    def run(self, prompter) -> List[str]:
        """
        Drive the session until Done or until the pool is exhausted.

        Args:
            prompter: Object with ``next_action(view) -> Action`` and
                ``report(outcome)``.

        Returns:
            Selected identifiers in selection order.
        """
        outcome = None
        while not self.is_finished:
            action = prompter.next_action(self.view())
            outcome = self.apply(action)
            prompter.report(outcome)

        ended_by_user = outcome is not None and outcome.kind is OutcomeKind.DONE
        if self.candidates and not ended_by_user:
            prompter.report(self._outcome(OutcomeKind.EXHAUSTED, "All files have been selected."))
        return self.selected

    # Action handlers

    def _outcome(self, kind: OutcomeKind, message: str, **kwargs) -> Outcome:
        kwargs.setdefault('total_tokens', self.state.running_token_total)
        return Outcome(kind=kind, message=message, **kwargs)

    def _set_filter(self, term: str) -> Outcome:
        term = term.strip()
        if not term:
            self.state.filter_term = None
            return self._outcome(OutcomeKind.FILTER_CLEARED, "Search cleared.")
        self.state.filter_term = term
        return self._outcome(OutcomeKind.FILTER_SET, f'Filtering files by "{term}"')

    def _clear_filter(self) -> Outcome:
        if self.state.filter_term is None:
            return self._outcome(OutcomeKind.NO_FILTER, "No search filter is active.")
        self.state.filter_term = None
        return self._outcome(OutcomeKind.FILTER_CLEARED, "Search cleared.")

    def _select(self, identifier: str) -> Outcome:
        if self.state.is_selected(identifier):
            logger.info(f"File {identifier} already selected")
            return self._outcome(
                OutcomeKind.ALREADY_SELECTED,
                f"File {identifier} already selected.",
                identifier=identifier,
            )

        if identifier not in {m.string for m in self.display_list()}:
            logger.info(f"File {identifier} is not in the current list")
            return self._outcome(
                OutcomeKind.NOT_AVAILABLE,
                f"File {identifier} is not in the current list.",
                identifier=identifier,
            )

        content, error = self.reader.read_file_content(identifier)
        if content is None:
            logger.warning(f"Error reading file {identifier}: {error}")
            return self._outcome(
                OutcomeKind.READ_FAILED,
                f"Error reading file {identifier}: {error}",
                identifier=identifier,
            )

        tokens = self.tokenizer.count(wrap_file(identifier, content))
        before = self.state.running_token_total
        self.state.add(identifier, tokens)
        after = self.state.running_token_total

        threshold = self.config.token_warning_threshold
        crossed = before <= threshold < after
        if crossed:
            logger.info(f"Running total crossed {threshold:,} tokens")

        return self._outcome(
            OutcomeKind.ADDED,
            f"Added {identifier} ({tokens:,} tokens). Total: ~{after:,} tokens.",
            identifier=identifier,
            tokens=tokens,
            threshold_crossed=crossed,
        )

    def _preview(self) -> Outcome:
        if not self.state.selected:
            return self._outcome(OutcomeKind.NOTHING_SELECTED, "No files selected yet.")
        return self._outcome(
            OutcomeKind.PREVIEW,
            "Current selection:",
            listing=tuple(self.state.preview()),
        )

    def _clear_all(self) -> Outcome:
        self.state.clear()
        return self._outcome(OutcomeKind.CLEARED, "All selections cleared.")
