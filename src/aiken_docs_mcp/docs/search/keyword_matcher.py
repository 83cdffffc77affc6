"""Shared matching primitives for the tiered query engine.

This module provides the string-level building blocks of tier evaluation:
bounded edit distance for the fuzzy tier, and highlight span computation
that maps case-folded match positions back onto the original text.
"""

from typing import List, Optional, Sequence, Tuple

Span = Tuple[int, int]


def levenshtein_distance(source: str, target: str, max_distance: Optional[int] = None) -> int:
    """Calculate the Levenshtein edit distance between two strings.

    When ``max_distance`` is given the computation stops as soon as every
    alignment exceeds it, returning ``max_distance + 1``.

    Examples:
        >>> levenshtein_distance("datum", "datum")
        0
        >>> levenshtein_distance("datun", "datum")
        1
        >>> levenshtein_distance("redeemer", "datum", max_distance=2)
        3
    """
    if source == target:
        return 0
    if len(source) < len(target):
        source, target = target, source
    if max_distance is not None and len(source) - len(target) > max_distance:
        return max_distance + 1
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        if max_distance is not None and min(current) > max_distance:
            return max_distance + 1
        previous = current

    return previous[-1]


def effective_tolerance(query: str, tolerance: int) -> int:
    """Scale the configured tolerance down for short queries.

    A short query within a large edit distance matches almost any short
    title, so at most one edit is allowed per three query characters.

    Examples:
        >>> effective_tolerance("dat", 2)
        1
        >>> effective_tolerance("spendng", 2)
        2
    """
    return min(tolerance, max(1, len(query) // 3)) if tolerance > 0 else 0


def best_fuzzy_token(query: str, tokens: Sequence[str], tolerance: int) -> Optional[Tuple[int, int]]:
    """Find the title token closest to the query within ``tolerance`` edits.

    Args:
        query: Normalized query
        tokens: Title tokens, the full folded title first
        tolerance: Maximum accepted edit distance

    Returns:
        (token_index, distance) of the best token, or None if none is close
        enough. Ties go to the earlier token.
    """
    best: Optional[Tuple[int, int]] = None
    for position, token in enumerate(tokens):
        bound = tolerance if best is None else min(tolerance, best[1] - 1)
        if bound < 0:
            break
        distance = levenshtein_distance(query, token, max_distance=bound)
        if distance <= bound:
            best = (position, distance)
    return best


def fold_with_offsets(text: str) -> Tuple[str, List[int]]:
    """Case-fold ``text`` and record where each folded character came from.

    Case folding can change length ("ß" folds to "ss"), so positions found in
    the folded text are translated through the returned offsets.

    Example:
        >>> fold_with_offsets("Straße")
        ('strasse', [0, 1, 2, 3, 4, 4, 5])
    """
    folded_chars = []
    offsets = []
    for position, char in enumerate(text):
        folded = char.casefold()
        folded_chars.append(folded)
        offsets.extend([position] * len(folded))
    return "".join(folded_chars), offsets


def find_spans(text: str, needle: str, first_only: bool = False) -> List[Span]:
    """Find case-insensitive occurrences of a folded ``needle`` in ``text``.

    Args:
        text: Original (unfolded) text
        needle: Already case-folded search string
        first_only: Stop after the first occurrence

    Returns:
        Non-overlapping half-open spans over the original text

    Examples:
        >>> find_spans("Datum in datum", "datum")
        [(0, 5), (9, 14)]
        >>> find_spans("Datum in datum", "datum", first_only=True)
        [(0, 5)]
    """
    if not needle:
        return []

    folded, offsets = fold_with_offsets(text)
    spans = []
    start = folded.find(needle)
    while start != -1:
        end = start + len(needle)
        spans.append((offsets[start], offsets[end - 1] + 1))
        if first_only:
            break
        start = folded.find(needle, end)
    return spans
