"""
Title analysis for the name generator.

A title is reduced once per search to the lowercase ASCII letters it
contains, the original index of each of those letters, and the words
(maximal letter runs) they belong to. Everything downstream works on
``TitleInfo`` and only maps back to the raw string when reporting indices.
"""

from __future__ import annotations
import re
import string
from dataclasses import dataclass
from typing import List, Tuple

ASCII_LETTERS = frozenset(string.ascii_letters)
WORD_PATTERN = re.compile(r"[A-Za-z]+")


@dataclass(frozen=True)
class TitleWord:
    word: str                 # lowercase
    start_index: int          # first character in the original title
    letter_start_index: int   # into TitleInfo.letters
    letter_end_index: int     # exclusive

    @property
    def length(self) -> int:
        return self.letter_end_index - self.letter_start_index


@dataclass(frozen=True)
class TitleInfo:
    original: str
    letters: str
    letter_positions: Tuple[int, ...]
    words: Tuple[TitleWord, ...]
    initials: str

    def word_index_at(self, letter_index: int) -> int | None:
        """Return the index of the title word owning ``letter_index``."""
        for wi, tw in enumerate(self.words):
            if tw.letter_start_index <= letter_index < tw.letter_end_index:
                return wi
        return None


def analyze_title(title: str) -> TitleInfo:
    letter_positions: List[int] = []
    letters: List[str] = []
    for i, ch in enumerate(title):
        if ch in ASCII_LETTERS:
            letter_positions.append(i)
            letters.append(ch.lower())

    words: List[TitleWord] = []
    letter_index = 0
    for match in WORD_PATTERN.finditer(title):
        word = match.group(0).lower()
        start = letter_index
        letter_index += len(word)
        words.append(TitleWord(word, match.start(), start, letter_index))

    return TitleInfo(
        original=title,
        letters="".join(letters),
        letter_positions=tuple(letter_positions),
        words=tuple(words),
        initials="".join(w.word[0] for w in words),
    )


# ============================================================================ #
#                              SUBSEQUENCE MATCHING                            #
# ============================================================================ #

def find_word_in_title(title_info: TitleInfo, word: str) -> List[int] | None:
    """Match ``word`` as a subsequence of the title letters.

    Greedy left to right: each character takes the first unused title letter
    that equals it. Returns the original-title index of every matched letter,
    or None when the word cannot be formed.
    """
    word_lower = word.lower()
    letters = title_info.letters
    if len(word_lower) > len(letters):
        return None

    indices: List[int] = []
    title_idx = 0
    for ch in word_lower:
        while title_idx < len(letters) and letters[title_idx] != ch:
            title_idx += 1
        if title_idx == len(letters):
            return None
        indices.append(title_info.letter_positions[title_idx])
        title_idx += 1
    return indices


def is_subsequence(needle: str, haystack: str) -> bool:
    if len(needle) > len(haystack):
        return False
    pos = 0
    for ch in needle:
        pos = haystack.find(ch, pos)
        if pos < 0:
            return False
        pos += 1
    return True
