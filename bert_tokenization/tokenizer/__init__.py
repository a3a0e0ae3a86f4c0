"""
WordPiece tokenizer components.
"""

from bert_tokenization.tokenizer.base import Tokenizer
from bert_tokenization.tokenizer.basic import BasicTokenizer
from bert_tokenization.tokenizer.bert import PAD_VALUE, BatchEncoding, BertTokenizer
from bert_tokenization.tokenizer.config import TokenizerConfig
from bert_tokenization.tokenizer.vocab import Vocabulary, load_vocab
from bert_tokenization.tokenizer.wordpiece import WordpieceTokenizer
