"""
Compound synthesis: fabricate new names by gluing two exact matches together.

A compound is only kept when the glued string is itself NOT a dictionary
word (a real word would already show up as an exact match) and still fits
inside the title as a subsequence.
"""

from __future__ import annotations
from typing import AbstractSet, List, Sequence, Set

from niceness import COMPOUND_PENALTY, WordMatch, calculate_niceness, round_score, sort_matches
from titles import TitleInfo, find_word_in_title

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

MIN_COMPONENT_LENGTH = 3
COMPONENT_POOL_SIZE = 80


def generate_compound_matches(
    title_info: TitleInfo,
    exact_matches: Sequence[WordMatch],
    word_set: AbstractSet[str],
    *,
    search_term: str = "",
    min_length: int = 1,
    max_results: int = 50,
    min_component_length: int = MIN_COMPONENT_LENGTH,
    component_pool_size: int = COMPONENT_POOL_SIZE,
) -> List[WordMatch]:
    if max_results <= 0:
        return []

    usable = [m for m in exact_matches if len(m.word) >= min_component_length]
    if len(usable) < 2:
        return []

    pool = usable[:component_pool_size]
    search_lower = search_term.strip().lower()
    # Bound the O(pool^2) walk; the final cut happens after sorting
    max_candidates = max(max_results * 3, len(pool))
    max_letters = len(title_info.letters)

    seen: Set[str] = set()
    compounds: List[WordMatch] = []
    for i, first in enumerate(pool):
        for j, second in enumerate(pool):
            if i == j:
                continue
            combined = first.word + second.word

            if len(combined) < min_length or len(combined) > max_letters:
                continue
            if search_lower and search_lower not in combined:
                continue
            if combined in word_set or combined in seen:
                continue

            indices = find_word_in_title(title_info, combined)
            if indices is None:
                continue

            niceness = calculate_niceness(title_info, combined, indices) * COMPOUND_PENALTY
            compounds.append(WordMatch(
                word=combined,
                indices=indices,
                niceness=round_score(niceness),
                type="compound",
                components=[first.word, second.word],
            ))
            seen.add(combined)

            if len(compounds) >= max_candidates:
                break
        if len(compounds) >= max_candidates:
            break

    return sort_matches(compounds)[:max_results]
