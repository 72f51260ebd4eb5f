from highlight import (
    RESET, display_word, format_match, format_near_match_word, highlight_title,
    match_badge, score_class,
)
from niceness import WordMatch


def test_highlight_title():
    assert highlight_title("Cat Dog", [1, 5]) == "cAt dOg"
    assert highlight_title("Cat Dog", []) == "cat dog"


def test_format_near_match_word():
    assert format_near_match_word("dice", "dce") == "DiCE"
    assert format_near_match_word("dog", "DCE") == "Dog"
    assert format_near_match_word("Dice", "") == "Dice"
    assert format_near_match_word("Dice", None) == "Dice"


def test_format_near_match_word_is_leftmost_greedy():
    # only the first "d" is claimed; the cursor then waits for "c"
    assert format_near_match_word("ddce", "dce") == "DdCE"


def test_score_class():
    assert score_class(60, "exact") == "high"
    assert score_class(59.99, "compound") == "medium"
    assert score_class(40, "exact") == "medium"
    assert score_class(39.5, "exact") == "low"
    assert score_class(90, "near") == "near"


def test_match_badge():
    assert match_badge(WordMatch("cat", [0, 1, 2], 73.0)) == ""
    assert match_badge(WordMatch("catdog", [], 86.4, type="compound", components=["cat", "dog"])) == "cat + dog"
    assert match_badge(WordMatch("dice", [], 50.0, type="near", edit_distance=1)) == "~1 edit"
    assert match_badge(WordMatch("dog", [], 26.67, type="near", edit_distance=2)) == "~2 edits"


def test_display_word(cache_title):
    assert display_word(WordMatch("dice", [], 50.0, type="near", edit_distance=1), cache_title) == "DiCE"
    assert display_word(WordMatch("dace", [], 80.0), cache_title) == "dace"


def test_format_match(pet_title):
    line = format_match(WordMatch("cat", [0, 1, 2], 73.0), pet_title, 1)
    assert line.startswith("   1. cat")
    assert " 73 " in line
    assert "(3 letters)" in line
    assert line.endswith("CAT dog")


def test_format_match_color_and_badge(pet_title):
    match = WordMatch("catdog", [0, 1, 2, 4, 5, 6], 86.4, type="compound", components=["cat", "dog"])
    line = format_match(match, pet_title, 2, color=True)
    assert RESET in line
    assert "[cat + dog]" in line
    assert line.endswith("CAT DOG")
