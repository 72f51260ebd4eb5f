"""Terminal formatting of search results."""

from __future__ import annotations
from typing import Iterable

from niceness import WordMatch
from titles import TitleInfo

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

HIGH_SCORE = 60
MEDIUM_SCORE = 40

GREEN = '\033[92m'
YELLOW = '\033[93m'
RED = '\033[91m'
CYAN = '\033[96m'
RESET = '\033[0m'

SCORE_COLORS = {"high": GREEN, "medium": YELLOW, "low": RED, "near": CYAN}


def highlight_title(title: str, indices: Iterable[int]) -> str:
    """Uppercase the matched positions of the title, lowercase the rest."""
    marked = set(indices)
    return "".join(ch.upper() if i in marked else ch.lower() for i, ch in enumerate(title))


def format_near_match_word(word: str, initials: str | None) -> str:
    """Capitalise the letters of ``word`` that spell out ``initials``.

    Leftmost greedy match; the cursor over the initials never moves back.
    """
    if not initials:
        return word
    initials = initials.lower()
    cursor = 0
    out = []
    for ch in word:
        if cursor < len(initials) and ch.lower() == initials[cursor]:
            out.append(ch.upper())
            cursor += 1
        else:
            out.append(ch.lower())
    return "".join(out)


def score_class(score: float, match_type: str) -> str:
    if match_type == "near":
        return "near"
    if score >= HIGH_SCORE:
        return "high"
    if score >= MEDIUM_SCORE:
        return "medium"
    return "low"


def match_badge(match: WordMatch) -> str:
    if match.type == "compound" and match.components:
        return f"{match.components[0]} + {match.components[1]}"
    if match.type == "near" and match.edit_distance is not None:
        plural = "" if match.edit_distance == 1 else "s"
        return f"~{match.edit_distance} edit{plural}"
    return ""


def display_word(match: WordMatch, title_info: TitleInfo) -> str:
    if match.type == "near":
        return format_near_match_word(match.word, title_info.initials)
    return match.word


def format_match(match: WordMatch, title_info: TitleInfo, rank: int, *, color: bool = False) -> str:
    score = f"{match.niceness:3.0f}"
    if color:
        score = f"{SCORE_COLORS[score_class(match.niceness, match.type)]}{score}{RESET}"
    badge = match_badge(match)
    badge = f"  [{badge}]" if badge else ""
    return (
        f"{rank:4d}. {display_word(match, title_info):<16} {score}  "
        f"({len(match.word)} letters){badge}  {highlight_title(title_info.original, match.indices)}"
    )
