"""Niceness scoring: how good a matched word is as a name for the title."""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Set

from titles import TitleInfo

MATCH_TYPES = ("exact", "compound", "near")

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

FIRST_LETTER_BONUS = 25.0
WORD_COVERAGE_WEIGHT = 40.0
START_LETTER_WEIGHT = 30.0
INITIALS_PREFIX_WEIGHT = 20.0
LENGTH_WEIGHT = 10.0
LENGTH_SATURATION = 10

COMPOUND_PENALTY = 0.9  # fabricated words rank slightly below real ones


@dataclass
class WordMatch:
    word: str
    indices: List[int]
    niceness: float
    type: str = "exact"
    components: List[str] | None = None   # compounds only
    edit_distance: int | None = None      # near matches only

    def __post_init__(self) -> None:
        if self.type not in MATCH_TYPES:
            raise ValueError(f"Unknown match type: {self.type!r}")

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "word": self.word,
            "indices": list(self.indices),
            "niceness": self.niceness,
            "type": self.type,
        }
        if self.components is not None:
            data["components"] = list(self.components)
        if self.edit_distance is not None:
            data["editDistance"] = self.edit_distance
        return data


def round_score(score: float) -> float:
    """Round to 2 decimals, halves going up."""
    return math.floor(score * 100 + 0.5) / 100


def calculate_niceness(title_info: TitleInfo, word: str, indices: Sequence[int]) -> float:
    score = 0.0
    word_len = len(word)
    words = title_info.words

    position_to_letter = {pos: li for li, pos in enumerate(title_info.letter_positions)}
    letter_indices = [position_to_letter[i] for i in indices if i in position_to_letter]

    # 1. Using the very first letter of the title
    if words and words[0].letter_start_index in letter_indices:
        score += FIRST_LETTER_BONUS

    # 2. Spread across title words
    words_used: Set[int] = set()
    start_letter_score = 0.0
    for letter_idx in letter_indices:
        wi = title_info.word_index_at(letter_idx)
        if wi is None:
            continue
        words_used.add(wi)
        tw = words[wi]
        pos_in_word = letter_idx - tw.letter_start_index
        start_letter_score += 1 - pos_in_word / max(tw.length - 1, 1)
    if words:
        score += len(words_used) / len(words) * WORD_COVERAGE_WEIGHT

    # 3. Letters taken from the start of title words
    score += start_letter_score / max(word_len, 1) * START_LETTER_WEIGHT

    # 4. Word opens with the title's initials
    initials = title_info.initials
    matched = 0
    for a, b in zip(word.lower(), initials):
        if a != b:
            break
        matched += 1
    if matched > 0:
        score += matched / len(initials) * INITIALS_PREFIX_WEIGHT

    # 5. Longer words read better, up to a point
    score += min(word_len / LENGTH_SATURATION, 1) * LENGTH_WEIGHT

    return round_score(score)


# ============================================================================ #
#                              RANKING                                         #
# ============================================================================ #

def rank_key(match: WordMatch) -> tuple:
    """Niceness descending, then length descending, then alphabetical."""
    return (-match.niceness, -len(match.word), match.word)


def sort_matches(matches: Iterable[WordMatch]) -> List[WordMatch]:
    return sorted(matches, key=rank_key)
