"""
WordPiece tokenization for BERT-family models.
"""

__version__ = "0.1.0"

from bert_tokenization.errors import TokenizationError, VocabLoadError, UnknownTokenError
from bert_tokenization.tokenizer import (
    BasicTokenizer,
    BatchEncoding,
    BertTokenizer,
    TokenizerConfig,
    Vocabulary,
    WordpieceTokenizer,
    load_vocab,
)
