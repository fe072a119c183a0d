from text_bubbles.models import Stats, Token, TokenKind
from text_bubbles.stats import accumulate
from text_bubbles.tokenization import tokenize


def test_accumulate_hello_world_example():
    text = "Hello, world! 2024"
    stats = accumulate(tokenize(text), source_text=text)

    assert stats.token_count == 5
    assert stats.word_count == 2
    assert stats.char_count == len(text)
    assert stats.alphanum_count == 14
    assert stats.letter_count == 10
    assert stats.average_word_length == 2.8
    assert stats.longest_word is not None
    assert stats.longest_word.text == "Hello"


def test_accumulate_empty():
    assert accumulate([]) == Stats()
    stats = accumulate(tokenize(""), source_text="")
    assert stats.token_count == 0
    assert stats.average_word_length == 0
    assert stats.longest_word is None


def test_breaks_are_not_counted_as_tokens():
    text = "one\r\ntwo"
    stats = accumulate(tokenize(text), source_text=text)
    assert stats.token_count == 2
    assert stats.char_count == 8


def test_char_count_falls_back_to_token_text():
    stats = accumulate(tokenize("ab, cd"))
    assert stats.char_count == 6


def test_only_fillers_average_is_zero():
    stats = accumulate(tokenize("... !!!"))
    assert stats.token_count == 2
    assert stats.alphanum_count == 0
    assert stats.average_word_length == 0
    assert stats.longest_word is None


def test_longest_word_keeps_first_of_ties():
    tokens = [
        Token("abc", TokenKind.WORD, 3, 3),
        Token("xyzw", TokenKind.WORD, 4, 4),
        Token("1234", TokenKind.WORD, 4, 0),
    ]
    stats = accumulate(tokens)
    assert stats.longest_word is tokens[1]
    assert stats.word_count == 2
    assert stats.average_word_length == 3.7


def test_accumulate_is_repeatable():
    tokens = tokenize("Same input, same stats.")
    assert accumulate(tokens) == accumulate(tokens)


def test_whitespace_fillers_count_as_tokens():
    stats = accumulate(tokenize("a  b"))
    assert stats.token_count == 3
    assert stats.word_count == 2
    assert stats.average_word_length == 0.7


def test_average_rounds_halves_up():
    stats = accumulate(tokenize("a . . ."))
    assert stats.token_count == 4
    assert stats.alphanum_count == 1
    assert stats.average_word_length == 0.3
