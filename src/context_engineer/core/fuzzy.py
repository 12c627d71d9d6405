"""
Subsequence fuzzy matching for narrowing the candidate list.

Every character of the term must appear in the candidate in order
(case-insensitive). Consecutive matched characters build a run whose bonus
doubles with each step, so contiguous matches outrank scattered ones.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class FuzzyMatch:
    """A candidate that matched a term."""

    string: str
    score: float
    index: int  # Position in the original candidate sequence
    positions: Tuple[int, ...] = ()


def _score_positions(positions: Sequence[int]) -> float:
    total = 0.0
    run = 0
    previous = None
    for pos in positions:
        if previous is not None and pos == previous + 1:
            run = 1 + 2 * run
        else:
            run = 1
        total += run
        previous = pos
    return total


def _greedy_positions(term: str, candidate: str) -> Optional[List[int]]:
    positions = []
    start = 0
    for ch in term:
        pos = candidate.find(ch, start)
        if pos < 0:
            return None
        positions.append(pos)
        start = pos + 1
    return positions


def match(term: str, candidate: str, index: int = 0) -> Optional[FuzzyMatch]:
    """
    Match a single candidate against a term.

    Args:
        term: The filter term.
        candidate: The string to test.
        index: Original position of the candidate, used for stable ordering.

    Returns:
        FuzzyMatch if every character of term appears in order, else None.
    """
    needle = term.lower()
    haystack = candidate.lower()

    if not needle:
        return FuzzyMatch(candidate, 0.0, index)

    if needle == haystack:
        return FuzzyMatch(candidate, math.inf, index, tuple(range(len(candidate))))

    # A literal substring is scored on its contiguous alignment, which is
    # the highest score any alignment of the term can reach.
    found = haystack.find(needle)
    if found >= 0:
        positions = list(range(found, found + len(needle)))
    else:
        positions = _greedy_positions(needle, haystack)
        if positions is None:
            return None

    return FuzzyMatch(candidate, _score_positions(positions), index, tuple(positions))


def rank(term: str, candidates: Sequence[str]) -> List[FuzzyMatch]:
    """
    Filter and order candidates by match quality.

    Higher scores first; equal scores keep their original order. An empty
    term returns every candidate in order.
    """
    matches = []
    for i, candidate in enumerate(candidates):
        result = match(term, candidate, i)
        if result is not None:
            matches.append(result)
    return sorted(matches, key=lambda m: (-m.score, m.index))
