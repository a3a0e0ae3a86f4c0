"""
Shared fixtures: small vocabularies written to temporary files.
"""

import pytest

from bert_tokenization.tokenizer import BertTokenizer, Vocabulary

# Line order is the id order
EXAMPLE_VOCAB = ["[CLS]", "[SEP]", "[UNK]", "[PAD]", "hello", "world", ",", "##!"]

WORDPIECE_VOCAB = [
    "[PAD]", "[UNK]", "[CLS]", "[SEP]", "[MASK]",
    "un", "##aff", "##able", "want", "##want", "##ed", "wa", "runn", "##ing",
    ",", ".", "!", "hello", "world", "中", "文", "a", "##a", "b", "##b",
]


def write_vocab(path, tokens):
    path.write_text("".join(f"{token}\n" for token in tokens), encoding="utf-8")
    return path


@pytest.fixture
def example_vocab_file(tmp_path):
    return write_vocab(tmp_path / "vocab.txt", EXAMPLE_VOCAB)


@pytest.fixture
def wordpiece_vocab():
    return Vocabulary(WORDPIECE_VOCAB)


@pytest.fixture
def wordpiece_vocab_file(tmp_path):
    return write_vocab(tmp_path / "vocab.txt", WORDPIECE_VOCAB)


@pytest.fixture
def bert_tokenizer(wordpiece_vocab):
    return BertTokenizer(wordpiece_vocab, do_lower_case=True)
