import pytest

from bert_tokenization.errors import VocabLoadError
from bert_tokenization.tokenizer.vocab import Vocabulary, load_vocab

from tests.conftest import EXAMPLE_VOCAB, write_vocab


def test_load_assigns_line_numbers(example_vocab_file):
    vocab = load_vocab(str(example_vocab_file))
    assert vocab.size() == len(EXAMPLE_VOCAB)
    for index, token in enumerate(EXAMPLE_VOCAB):
        assert vocab.id_of(token) == index
        assert vocab.token_of(index) == token


def test_missing_lookups_return_none(example_vocab_file):
    vocab = load_vocab(str(example_vocab_file))
    assert vocab.id_of("missing") is None
    assert vocab.token_of(999) is None


def test_only_line_terminator_is_stripped(tmp_path):
    path = tmp_path / "vocab.txt"
    path.write_bytes(" padded \r\nlast".encode("utf-8"))
    vocab = load_vocab(str(path))
    assert vocab.tokens() == [" padded ", "last"]


def test_unreadable_path_raises(tmp_path):
    with pytest.raises(VocabLoadError) as excinfo:
        load_vocab(str(tmp_path / "does_not_exist.txt"))
    assert excinfo.value.path == str(tmp_path / "does_not_exist.txt")


def test_directory_path_raises(tmp_path):
    with pytest.raises(VocabLoadError):
        load_vocab(str(tmp_path))


def test_invalid_utf8_raises(tmp_path):
    path = tmp_path / "vocab.txt"
    path.write_bytes(b"ok\n\xff\xfe\n")
    with pytest.raises(VocabLoadError):
        load_vocab(str(path))


def test_duplicates_later_occurrence_wins(tmp_path, caplog):
    path = write_vocab(tmp_path / "vocab.txt", ["a", "b", "a"])
    vocab = load_vocab(str(path))
    assert vocab.id_of("a") == 2
    assert vocab.token_of(2) == "a"
    assert vocab.token_of(0) is None
    assert vocab.size() == 2
    assert "duplicate" in caplog.text


def test_vocabulary_is_read_only():
    vocab = Vocabulary(["a", "b"])
    with pytest.raises(TypeError):
        vocab.token_to_id["c"] = 2
    assert "a" in vocab
    assert "c" not in vocab
    assert len(vocab) == 2


def test_save_round_trip(tmp_path):
    vocab = Vocabulary(["[PAD]", "héllo", "##x"])
    path = tmp_path / "out" / "vocab.txt"
    vocab.save(str(path))
    assert load_vocab(str(path)).tokens() == ["[PAD]", "héllo", "##x"]
