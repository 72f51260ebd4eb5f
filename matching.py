"""
Search entry point: exact, compound and near matches for one title.

All functions here are plain synchronous calls over in-memory values. The
dictionary is a sequence of lowercase words; the membership set built from
it by ``build_word_set`` can be reused across searches.

Usage:
    words = load_words(Path("words_alpha.txt"))
    word_set = build_word_set(words)
    results = search(analyze_title("Distributed Consensus Engine"), words,
                     SearchOptions(min_length=4), word_set=word_set)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import AbstractSet, Callable, Dict, FrozenSet, Iterable, List, Sequence

from compounds import COMPONENT_POOL_SIZE, generate_compound_matches
from near_matches import DEFAULT_MAX_EDIT_DISTANCE, find_near_matches
from niceness import WordMatch, calculate_niceness, sort_matches
from titles import TitleInfo, find_word_in_title

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

DEFAULT_MIN_LENGTH = 4
DEFAULT_MAX_RESULTS = 100

ProgressFn = Callable[..., Iterable[str]]


@dataclass
class SearchOptions:
    min_length: int = DEFAULT_MIN_LENGTH
    max_results: int = DEFAULT_MAX_RESULTS
    search_term: str = ""
    include_compounds: bool = True
    include_near_matches: bool = True
    max_edit_distance: int = DEFAULT_MAX_EDIT_DISTANCE
    component_pool_size: int = COMPONENT_POOL_SIZE

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise ValueError(f"min_length must be at least 1, got {self.min_length}")
        if self.max_results < 1:
            raise ValueError(f"max_results must be at least 1, got {self.max_results}")
        if self.max_edit_distance < 0:
            raise ValueError(f"max_edit_distance must be non-negative, got {self.max_edit_distance}")
        if self.component_pool_size < 2:
            raise ValueError(f"component_pool_size must be at least 2, got {self.component_pool_size}")

    @property
    def secondary_limit(self) -> int:
        """Result cap for the compound and near categories."""
        return max(1, self.max_results // 2)

    @property
    def min_component_length(self) -> int:
        return max(2, min(4, self.min_length))


@dataclass
class SearchResults:
    title_info: TitleInfo
    exact: List[WordMatch] = field(default_factory=list)
    compound: List[WordMatch] = field(default_factory=list)
    near: List[WordMatch] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.exact) + len(self.compound) + len(self.near)

    def to_dict(self) -> Dict[str, object]:
        return {
            "title": self.title_info.original,
            "initials": self.title_info.initials,
            "exact": [m.to_dict() for m in self.exact],
            "compound": [m.to_dict() for m in self.compound],
            "near": [m.to_dict() for m in self.near],
        }


def build_word_set(words: Iterable[str]) -> FrozenSet[str]:
    return frozenset(w.lower() for w in words)


def find_exact_matches(
    title_info: TitleInfo,
    words: Iterable[str],
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    search_term: str = "",
    progress: ProgressFn | None = None,
) -> List[WordMatch]:
    """Every dictionary word spellable from the title letters, ranked.

    The list is not truncated; callers cut it to size.
    """
    search_lower = search_term.strip().lower()
    max_letters = len(title_info.letters)
    if progress is not None:
        words = progress(words, desc="Exact matches")

    matches: List[WordMatch] = []
    for word in words:
        if len(word) < min_length or len(word) > max_letters:
            continue
        if search_lower and search_lower not in word.lower():
            continue

        indices = find_word_in_title(title_info, word)
        if indices is not None:
            matches.append(WordMatch(
                word=word,
                indices=indices,
                niceness=calculate_niceness(title_info, word, indices),
                type="exact",
            ))

    return sort_matches(matches)


def search(
    title_info: TitleInfo,
    words: Sequence[str],
    options: SearchOptions | None = None,
    *,
    word_set: AbstractSet[str] | None = None,
    progress: ProgressFn | None = None,
) -> SearchResults:
    if options is None:
        options = SearchOptions()
    results = SearchResults(title_info=title_info)
    if not title_info.words or not words:
        return results

    all_exact = find_exact_matches(
        title_info,
        words,
        min_length=options.min_length,
        search_term=options.search_term,
        progress=progress,
    )
    results.exact = all_exact[:options.max_results]

    if options.include_compounds:
        if word_set is None:
            word_set = build_word_set(words)
        exact_words = {m.word for m in results.exact}
        generated = generate_compound_matches(
            title_info,
            all_exact,
            word_set,
            search_term=options.search_term,
            min_length=options.min_length,
            max_results=options.secondary_limit,
            min_component_length=options.min_component_length,
            component_pool_size=options.component_pool_size,
        )
        results.compound = [c for c in generated if c.word not in exact_words]

    if options.include_near_matches:
        results.near = find_near_matches(
            title_info,
            words,
            max_results=options.secondary_limit,
            max_edit_distance=options.max_edit_distance,
            progress=progress,
        )

    return results
