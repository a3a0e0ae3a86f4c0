from bert_tokenization.tokenizer import BasicTokenizer


def test_default_config_keeps_case():
    assert BasicTokenizer().tokenize("Hello, world") == ["Hello", ",", "world"]


def test_empty_and_blank_input():
    tokenizer = BasicTokenizer()
    assert tokenizer.tokenize("") == []
    assert tokenizer.tokenize(" \t\n ") == []


def test_lower_case_strips_accents():
    tokenizer = BasicTokenizer(do_lower_case=True)
    assert tokenizer.tokenize(" \tHeLLo!how  \n Are yoU?  ") == ["hello", "!", "how", "are", "you", "?"]
    assert tokenizer.tokenize("Héllo Naïve") == ["hello", "naive"]


def test_never_split_skips_lower_case_and_punctuation():
    tokenizer = BasicTokenizer(do_lower_case=True, never_split=["[UNK]"])
    assert tokenizer.tokenize("Hello [UNK] there") == ["hello", "[UNK]", "there"]


def test_never_split_only_matches_whole_words():
    tokenizer = BasicTokenizer(never_split=["[UNK]"])
    assert tokenizer.tokenize("x[UNK]") == ["x", "[", "UNK", "]"]


def test_chinese_chars_split():
    tokenizer = BasicTokenizer()
    assert tokenizer.tokenize("ah博推zz") == ["ah", "博", "推", "zz"]


def test_chinese_chars_disabled():
    tokenizer = BasicTokenizer(tokenize_chinese_chars=False)
    assert tokenizer.tokenize("ah博推zz") == ["ah博推zz"]


def test_control_characters_removed():
    tokenizer = BasicTokenizer()
    assert tokenizer.tokenize("a\x00b\x07c d") == ["abc", "d"]


def test_ascii_symbols_split():
    tokenizer = BasicTokenizer()
    assert tokenizer.tokenize("a+b=$5") == ["a", "+", "b", "=", "$", "5"]
