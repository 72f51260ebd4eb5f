"""
Dictionary loading for the name generator.

Two sources:
- a flat word list, one word per line (default ``words_alpha.txt``)
- the top-N English words from wordfreq

Either way the result is an ordered, deduplicated list of lowercase ASCII
words, ready for ``matching.build_word_set``.
"""

from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Set

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

DEFAULT_WORDLIST = Path("words_alpha.txt")
N_WORDS = 100000


def _is_ascii_alpha(word: str) -> bool:
    return word.isascii() and word.isalpha()


def filter_words(
    words: Iterable[str],
    *,
    min_length: int = 1,
    max_length: int | None = None,
    alphabetic_only: bool = True,
) -> List[str]:
    seen: Set[str] = set()
    output: List[str] = []

    for raw in words:
        word = raw.strip().lower()
        if not word:
            continue
        if alphabetic_only and not _is_ascii_alpha(word):
            continue
        if len(word) < min_length:
            continue
        if max_length is not None and len(word) > max_length:
            continue
        if word in seen:
            continue
        seen.add(word)
        output.append(word)

    return output


def load_words(
    path: Path,
    *,
    min_length: int = 1,
    max_length: int | None = None,
    alphabetic_only: bool = True,
) -> List[str]:
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        return filter_words(
            handle,
            min_length=min_length,
            max_length=max_length,
            alphabetic_only=alphabetic_only,
        )


def load_wordfreq_words(
    limit: int = N_WORDS,
    *,
    wordlist: str = "best",
    min_length: int = 1,
    max_length: int | None = None,
) -> List[str]:
    try:
        from wordfreq import top_n_list
    except ImportError as exc:  # pragma: no cover - environment-specific
        raise RuntimeError(
            "wordfreq package is required for --dictionary-source=wordfreq"
        ) from exc

    return filter_words(
        top_n_list("en", limit, wordlist=wordlist),
        min_length=min_length,
        max_length=max_length,
    )


@lru_cache(maxsize=None)
def get_zipf(word: str) -> float:
    """Return the wordfreq Zipf frequency for the given word."""
    try:
        from wordfreq import zipf_frequency
    except ImportError as exc:  # pragma: no cover - environment-specific
        raise RuntimeError("wordfreq package is required to fetch word frequencies") from exc

    return zipf_frequency(word, "en")


def filter_by_zipf(words: Iterable[str], min_zipf: float) -> List[str]:
    """Keep words at least as common as ``min_zipf`` (0 keeps everything)."""
    if min_zipf <= 0:
        return list(words)
    return [w for w in words if get_zipf(w) >= min_zipf]
