import pytest

from niceness import WordMatch, calculate_niceness, rank_key, round_score, sort_matches
from titles import analyze_title, find_word_in_title


def _score(title_info, word):
    return calculate_niceness(title_info, word, find_word_in_title(title_info, word))


def test_known_scores(pet_title):
    # cat: 25 first letter + 20 coverage + 15 start letters + 10 initials + 3 length
    assert _score(pet_title, "cat") == 73.0
    # dog: no first letter, no initials prefix
    assert _score(pet_title, "dog") == 38.0
    # catdog: full coverage, 6 letters
    assert _score(pet_title, "catdog") == 96.0


def test_initials_prefix_bonus():
    info = analyze_title("Alpha Beta")
    # "ab": 25 + 40 + 30 + 20 + 2
    assert calculate_niceness(info, "ab", [0, 6]) == 117.0


def test_start_letter_single_letter_word():
    info = analyze_title("A Big")
    # "a" from a one-letter word still counts as a word start
    assert calculate_niceness(info, "a", [0]) == round_score(25 + 20 + 30 + 10 + 1)


def test_empty_title_scores_zero_for_coverage():
    info = analyze_title("")
    assert calculate_niceness(info, "", []) == 0.0


def test_empty_word_only_gets_nothing(pet_title):
    assert calculate_niceness(pet_title, "", []) == 0.0


def test_unknown_indices_are_ignored(pet_title):
    # index 3 is the space; it maps to no letter
    assert calculate_niceness(pet_title, "c", [0, 3]) == calculate_niceness(pet_title, "c", [0])


def test_score_is_rounded_to_two_decimals(engine_title):
    for word in ("dist", "sense", "engine", "tribune"):
        score = _score(engine_title, word)
        assert score == round(score, 2)
        assert 0 <= score <= 125


def test_round_score_rounds_halves_up():
    assert round_score(0.125) == 0.13
    assert round_score(26.666666) == 26.67
    assert round_score(10) == 10.0


def test_sort_by_niceness_then_length_then_alpha():
    matches = [
        WordMatch("bb", [], 10.0),
        WordMatch("aa", [], 10.0),
        WordMatch("ccc", [], 10.0),
        WordMatch("zz", [], 50.0),
    ]
    assert [m.word for m in sort_matches(matches)] == ["zz", "ccc", "aa", "bb"]
    assert [m.word for m in sort_matches(reversed(matches))] == ["zz", "ccc", "aa", "bb"]


def test_rank_key():
    assert rank_key(WordMatch("abc", [], 12.5)) == (-12.5, -3, "abc")


def test_word_match_to_dict():
    exact = WordMatch("cat", [0, 1, 2], 73.0)
    assert exact.to_dict() == {"word": "cat", "indices": [0, 1, 2], "niceness": 73.0, "type": "exact"}

    near = WordMatch("dice", [0, 5, 11], 50.0, type="near", edit_distance=1)
    assert near.to_dict()["editDistance"] == 1
    assert "components" not in near.to_dict()

    compound = WordMatch("catdog", [0, 1, 2, 4, 5, 6], 86.4, type="compound", components=["cat", "dog"])
    assert compound.to_dict()["components"] == ["cat", "dog"]


def test_word_match_rejects_unknown_type():
    with pytest.raises(ValueError):
        WordMatch("cat", [], 1.0, type="fuzzy")
