# backend/tests/test_tokenizer.py
from trigrams.preprocessing.tokenizer import join_lines, tokenize


def test_sentence_is_split_into_lowercase_words():
    assert list(tokenize("I will not go. I will not stay.")) == [
        "i", "will", "not", "go", "i", "will", "not", "stay",
    ]


def test_internal_apostrophe_and_hyphen_stay_inside_the_token():
    assert list(tokenize("Don't stop the WELL-KNOWN snake_case band")) == [
        "don't", "stop", "the", "well-known", "snake_case", "band",
    ]


def test_double_hyphen_separates_words():
    assert list(tokenize("yes--no")) == ["yes", "no"]


def test_empty_and_whitespace_only_input_yield_nothing():
    assert list(tokenize("")) == []
    assert list(tokenize("   \n\t  \n")) == []
    assert list(tokenize("?!... ,;")) == []


def test_case_does_not_change_tokens():
    assert list(tokenize("I LOVE Sandwiches")) == list(tokenize("i love sandwiches"))


def test_tokenize_can_be_restarted():
    text = "one two three four"
    assert list(tokenize(text)) == list(tokenize(text))


def test_join_lines_keeps_one_separator_per_line():
    assert join_lines(["I love\n", "sandwiches.\r\n", "end"]) == "I love\nsandwiches.\nend\n"
    assert join_lines([]) == ""


def test_line_breaks_never_join_words():
    text = join_lines(["first", "second"])
    assert list(tokenize(text)) == ["first", "second"]
