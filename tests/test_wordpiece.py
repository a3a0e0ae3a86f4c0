import pytest

from bert_tokenization.tokenizer import Vocabulary, WordpieceTokenizer

from tests.conftest import WORDPIECE_VOCAB


@pytest.fixture
def wordpiece(wordpiece_vocab):
    return WordpieceTokenizer(wordpiece_vocab)


def test_greedy_longest_match(wordpiece):
    assert wordpiece.tokenize("unwanted running") == ["un", "##want", "##ed", "runn", "##ing"]
    assert wordpiece.tokenize("unaffable") == ["un", "##aff", "##able"]


def test_unmatched_word_becomes_unk(wordpiece):
    assert wordpiece.tokenize("unwantedX running") == ["[UNK]", "runn", "##ing"]


def test_partial_match_discards_pieces(wordpiece):
    # "un" matches, then nothing matches "##x..."
    assert wordpiece.tokenize_word("unx") == ["[UNK]"]


def test_empty_input(wordpiece):
    assert wordpiece.tokenize("") == []


@pytest.mark.parametrize("token", [t for t in WORDPIECE_VOCAB if not t.startswith("##")])
def test_vocabulary_word_is_kept_whole(wordpiece, token):
    assert wordpiece.tokenize(token) == [token]


def test_longest_prefix_preferred():
    wordpiece = WordpieceTokenizer(Vocabulary(["[UNK]", "a", "aa", "aaa", "##a", "##aa"]))
    assert wordpiece.tokenize_word("aaaaa") == ["aaa", "##aa"]


def test_max_input_chars_per_word():
    vocab = Vocabulary(["[UNK]", "a", "##a"])
    wordpiece = WordpieceTokenizer(vocab, max_input_chars_per_word=5)
    assert wordpiece.tokenize_word("aaaaa") == ["a", "##a", "##a", "##a", "##a"]
    assert wordpiece.tokenize_word("aaaaaa") == ["[UNK]"]


def test_default_max_input_chars_per_word(wordpiece):
    assert wordpiece.tokenize("a" * 101) == ["[UNK]"]
    assert wordpiece.tokenize("a" * 100) == ["a"] + ["##a"] * 99


def test_custom_unk_token():
    wordpiece = WordpieceTokenizer(Vocabulary(["<unk>", "a"]), unk_token="<unk>")
    assert wordpiece.tokenize("b") == ["<unk>"]
