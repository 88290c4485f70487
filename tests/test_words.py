from labkit.words import WordStats, analyze_word, extract_letter_words, split_on_spaces


def test_default_stats_are_zero():
    stats = WordStats()
    assert (stats.frequency, stats.length, stats.vowels) == (0, 0, 0)
    assert (stats.repeated_vowels, stats.repeats) == (0, 0)


def test_single_occurrence_frequency_and_length():
    stats = analyze_word("banana")
    assert stats.frequency == 1
    assert stats.length == len("banana")


def test_vowels_are_case_insensitive():
    assert analyze_word("AEIOU").vowels == len("AEIOU")
    assert analyze_word("Aa").vowels == analyze_word("aa").vowels


def test_repeated_vowels_never_exceed_vowels():
    for word in ["banana", "queue", "rhythm", "Ooze", "bookkeeper"]:
        stats = analyze_word(word)
        assert 0 <= stats.repeated_vowels <= stats.vowels


def test_repeats_are_case_sensitive():
    assert analyze_word("Aa").repeats == 0
    assert analyze_word("aa").repeats == 1


def test_distinct_letters_have_no_repeats():
    assert analyze_word("abcdef").repeats == 0


def test_banana_counts():
    stats = analyze_word("banana")
    assert stats.vowels == 3
    assert stats.repeated_vowels == 2
    assert stats.repeats == 3


def test_split_drops_text_after_last_space():
    assert split_on_spaces("a b c") == ["a", "b"]
    assert split_on_spaces("one two ") == ["one", "two"]


def test_split_keeps_empty_pieces():
    assert split_on_spaces("a  b ") == ["a", "", "b"]
    assert split_on_spaces("noSpaces") == []


def test_extract_letter_words():
    assert extract_letter_words("hello,world!42x") == ["hello", "world", "x"]
    assert extract_letter_words("123") == []
    assert extract_letter_words("MiXeD") == ["MiXeD"]