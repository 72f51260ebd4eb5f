"""
Near matches: dictionary words a small edit away from the title's initials.

For "Data Cache Engine" the initials are "dce"; "dice" is one insertion away
and reads as a plausible acronym even though the title letters cannot spell
it (the only "i" comes after the last "c"). Words
that can already be spelled from the title letters are exact matches and
are left out here.
"""

from __future__ import annotations
from typing import Callable, Iterable, List

from edit_distance import levenshtein
from niceness import WordMatch, round_score, sort_matches
from titles import TitleInfo, find_word_in_title, is_subsequence

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

DEFAULT_MAX_EDIT_DISTANCE = 2
MIN_INITIALS = 2
LENGTH_SLACK = 2           # extra room above initials + max distance
NEAR_SCORE_SCALE = 50.0
FIRST_LETTER_BONUS = 0.2
INITIALS_INSIDE_BONUS = 0.3


def near_match_score(candidate: str, initials: str, distance: int, max_edit_distance: int) -> float:
    closeness = 1 - distance / (max_edit_distance + 1)
    if candidate[:1] == initials[:1]:
        closeness += FIRST_LETTER_BONUS
    if is_subsequence(initials, candidate):
        closeness += INITIALS_INSIDE_BONUS
    return round_score(min(closeness, 1.0) * NEAR_SCORE_SCALE)


def initials_indices(title_info: TitleInfo, candidate: str) -> List[int]:
    """Title positions of the words whose initials the candidate spells out.

    Walks the candidate left to right with a cursor over the initials that
    never moves back; each hit records where that initial's word starts.
    """
    initials = title_info.initials
    indices: List[int] = []
    cursor = 0
    for ch in candidate:
        if cursor >= len(initials):
            break
        if ch == initials[cursor]:
            indices.append(title_info.words[cursor].start_index)
            cursor += 1
    return indices


def find_near_matches(
    title_info: TitleInfo,
    words: Iterable[str],
    *,
    max_results: int,
    max_edit_distance: int = DEFAULT_MAX_EDIT_DISTANCE,
    progress: Callable[..., Iterable[str]] | None = None,
) -> List[WordMatch]:
    initials = title_info.initials
    if len(initials) < MIN_INITIALS or max_results <= 0:
        return []

    min_len = max(2, len(initials) - max_edit_distance)
    max_len = len(initials) + max_edit_distance + LENGTH_SLACK
    # Cast a wider net than we return, then keep the best after sorting
    raw_limit = max_results * 2

    if progress is not None:
        words = progress(words, desc="Near matches")

    candidates: List[WordMatch] = []
    for word in words:
        if not min_len <= len(word) <= max_len:
            continue
        candidate = word.lower()
        distance = levenshtein(candidate, initials)
        if distance == 0 or distance > max_edit_distance:
            continue
        if find_word_in_title(title_info, candidate) is not None:
            continue

        candidates.append(WordMatch(
            word=word,
            indices=initials_indices(title_info, candidate),
            niceness=near_match_score(candidate, initials, distance, max_edit_distance),
            type="near",
            edit_distance=distance,
        ))
        if len(candidates) >= raw_limit:
            break

    return sort_matches(candidates)[:max_results]
