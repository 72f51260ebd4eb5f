from titles import TitleWord, analyze_title, find_word_in_title, is_subsequence


def test_analyze_simple_title(pet_title):
    assert pet_title.original == "Cat Dog"
    assert pet_title.letters == "catdog"
    assert pet_title.letter_positions == (0, 1, 2, 4, 5, 6)
    assert pet_title.words == (
        TitleWord("cat", 0, 0, 3),
        TitleWord("dog", 4, 3, 6),
    )
    assert pet_title.initials == "cd"


def test_analyze_punctuation_and_digits():
    info = analyze_title("Hello, World! 42")
    assert info.letters == "helloworld"
    assert info.letter_positions == (0, 1, 2, 3, 4, 7, 8, 9, 10, 11)
    assert [w.word for w in info.words] == ["hello", "world"]
    assert info.words[1].start_index == 7
    assert info.words[1].letter_start_index == 5
    assert info.words[1].letter_end_index == 10
    assert info.initials == "hw"


def test_analyze_mixed_case_is_lowercased():
    info = analyze_title("GraphQL API")
    assert info.letters == "graphqlapi"
    assert info.initials == "ga"


def test_non_ascii_letters_split_words():
    info = analyze_title("Café Noir")
    assert info.letters == "cafnoir"
    assert [w.word for w in info.words] == ["caf", "noir"]
    assert info.words[1].start_index == 5
    assert info.initials == "cn"


def test_empty_and_letterless_titles():
    for title in ("", "   ", "123 !?"):
        info = analyze_title(title)
        assert info.letters == ""
        assert info.letter_positions == ()
        assert info.words == ()
        assert info.initials == ""


def test_word_ranges_cover_letters(engine_title):
    assert len(engine_title.letter_positions) == len(engine_title.letters)
    covered = ""
    previous_end = 0
    for tw in engine_title.words:
        assert tw.letter_start_index >= previous_end
        assert tw.letter_end_index - tw.letter_start_index == len(tw.word)
        covered += engine_title.letters[tw.letter_start_index:tw.letter_end_index]
        previous_end = tw.letter_end_index
    assert covered == engine_title.letters
    assert list(engine_title.letter_positions) == sorted(set(engine_title.letter_positions))


def test_word_index_at(pet_title):
    assert pet_title.word_index_at(0) == 0
    assert pet_title.word_index_at(2) == 0
    assert pet_title.word_index_at(3) == 1
    assert pet_title.word_index_at(6) is None


def test_find_word_returns_original_indices(pet_title):
    assert find_word_in_title(pet_title, "cat") == [0, 1, 2]
    assert find_word_in_title(pet_title, "dog") == [4, 5, 6]
    assert find_word_in_title(pet_title, "catdog") == [0, 1, 2, 4, 5, 6]
    assert find_word_in_title(pet_title, "tog") == [2, 5, 6]


def test_find_word_is_case_insensitive(pet_title):
    assert find_word_in_title(pet_title, "CaT") == [0, 1, 2]


def test_find_word_rejects_out_of_order(pet_title):
    # after the "o" only "g" is left, so no "d" can follow it
    assert find_word_in_title(pet_title, "cod") is None
    assert find_word_in_title(pet_title, "god") is None


def test_find_word_longer_than_letters(pet_title):
    assert find_word_in_title(pet_title, "catdogs") is None


def test_find_word_in_empty_title():
    assert find_word_in_title(analyze_title(""), "a") is None
    assert find_word_in_title(analyze_title(""), "") == []


def test_is_subsequence():
    assert is_subsequence("dce", "dice")
    assert is_subsequence("", "anything")
    assert not is_subsequence("dce", "dog")
    assert not is_subsequence("abc", "ab")
