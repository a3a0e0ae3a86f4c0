"""
End-to-end BERT tokenizer: text -> WordPiece tokens -> ids -> padded batches.
"""

import logging
import os
from dataclasses import replace
from typing import Dict, List, NamedTuple, Optional, Sequence, Union

import numpy as np

from bert_tokenization.errors import UnknownTokenError
from bert_tokenization.tokenizer.base import Tokenizer
from bert_tokenization.tokenizer.basic import BasicTokenizer
from bert_tokenization.tokenizer.config import CONFIG_FILE_NAME, TokenizerConfig
from bert_tokenization.tokenizer.vocab import VOCAB_FILE_NAME, Vocabulary, load_vocab
from bert_tokenization.tokenizer.wordpiece import CONTINUATION_PREFIX, WordpieceTokenizer

logger = logging.getLogger(__name__)

# input_ids are right-padded with this literal value, whatever id [PAD] has
PAD_VALUE = 0


class BatchEncoding(NamedTuple):
    """Model inputs for a batch of texts, each an int64 array of shape (batch, max_len)."""
    input_ids: np.ndarray
    attention_mask: np.ndarray
    token_type_ids: np.ndarray

    @property
    def shape(self):
        return self.input_ids.shape

    def to_dict(self) -> Dict[str, np.ndarray]:
        return dict(self._asdict())


class BertTokenizer(Tokenizer):
    """
    Runs BasicTokenizer and WordpieceTokenizer and maps the result to vocabulary ids.

    Args:
        vocab: A Vocabulary, or a path to a vocabulary file
        config: Tokenizer options; defaults to TokenizerConfig()
        **kwargs: Individual TokenizerConfig fields overriding ``config``

    Example:
        >>> tok = BertTokenizer("vocab.txt", do_lower_case=True)
        >>> tok.encode("Hello, world")
        [101, 7592, 1010, 2088, 102]
    """

    def __init__(self, vocab: Union[Vocabulary, str, os.PathLike],
                 config: Optional[TokenizerConfig] = None, **kwargs):
        if config is None:
            config = TokenizerConfig(**kwargs)
        elif kwargs:
            config = replace(config, **kwargs)
        self.config = config

        if not isinstance(vocab, Vocabulary):
            vocab = load_vocab(os.fspath(vocab))
        self.vocab = vocab

        self.basic_tokenizer = None
        if config.do_basic_tokenize:
            self.basic_tokenizer = BasicTokenizer(
                do_lower_case=config.do_lower_case,
                never_split=config.never_split,
                tokenize_chinese_chars=config.tokenize_chinese_chars,
            )
        self.wordpiece_tokenizer = WordpieceTokenizer(
            vocab,
            unk_token=config.unk_token,
            max_input_chars_per_word=config.max_input_chars_per_word,
        )

        missing = [token for token in config.special_tokens.values() if token not in vocab]
        if missing:
            logger.warning(f"Special token(s) missing from vocabulary: {', '.join(missing)}")
        if self.pad_token_id is not None and self.pad_token_id != PAD_VALUE:
            logger.warning(f"{config.pad_token} has id {self.pad_token_id}, but batches are "
                           f"padded with {PAD_VALUE}")

        logger.info(f"Initialized BertTokenizer, vocab size: {self.vocab_size}")

    @classmethod
    def from_pretrained(cls, directory: str, **kwargs) -> "BertTokenizer":
        """
        Load a tokenizer saved with save_pretrained.

        The directory must contain vocab.txt; tokenizer_config.json is optional.
        """
        config_path = os.path.join(directory, CONFIG_FILE_NAME)
        if os.path.exists(config_path):
            config = TokenizerConfig.from_json(config_path)
        else:
            logger.info(f"No {CONFIG_FILE_NAME} in {directory}, using default config")
            config = TokenizerConfig()
        return cls(os.path.join(directory, VOCAB_FILE_NAME), config=config, **kwargs)

    def save_pretrained(self, directory: str) -> str:
        os.makedirs(directory, exist_ok=True)
        self.vocab.save(os.path.join(directory, VOCAB_FILE_NAME))
        self.config.save_json(os.path.join(directory, CONFIG_FILE_NAME))
        logger.info(f"Saved tokenizer to {directory}")
        return directory

    @property
    def vocab_size(self) -> int:
        return self.vocab.size()

    @property
    def cls_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.config.cls_token)

    @property
    def sep_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.config.sep_token)

    @property
    def pad_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.config.pad_token)

    @property
    def unk_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.config.unk_token)

    @property
    def mask_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.config.mask_token)

    def tokenize(self, text: str) -> List[str]:
        if self.basic_tokenizer is None:
            return self.wordpiece_tokenizer.tokenize(text)
        split_tokens = []
        for token in self.basic_tokenizer.tokenize(text):
            split_tokens.extend(self.wordpiece_tokenizer.tokenize_word(token))
        return split_tokens

    def _id_of(self, token: str) -> int:
        index = self.vocab.id_of(token)
        if index is None:
            raise UnknownTokenError(token)
        return index

    def convert_tokens_to_ids(self, tokens: Sequence[str]) -> List[int]:
        """Map tokens to ids without adding special tokens."""
        return [self._id_of(token) for token in tokens]

    def convert_ids_to_tokens(self, ids: Sequence[int]) -> List[str]:
        tokens = []
        for index in ids:
            token = self.vocab.token_of(int(index))
            if token is None:
                raise UnknownTokenError(index)
            tokens.append(token)
        return tokens

    def encode(self, text: str) -> List[int]:
        """
        Encode text as ``[CLS] tokens... [SEP]`` ids.

        Raises:
            UnknownTokenError: if a special token or a produced subword has no id
        """
        cls_id = self._id_of(self.config.cls_token)
        sep_id = self._id_of(self.config.sep_token)
        return [cls_id] + self.convert_tokens_to_ids(self.tokenize(text)) + [sep_id]

    def encode_batch(self, texts: Sequence[str]) -> BatchEncoding:
        """
        Encode texts independently and right-pad them to the longest one.

        Padding positions hold PAD_VALUE in input_ids and 0 in attention_mask;
        token_type_ids is all zeros.
        """
        encoded = [self.encode(text) for text in texts]
        max_len = max((len(ids) for ids in encoded), default=0)

        input_ids = np.full((len(encoded), max_len), PAD_VALUE, dtype=np.int64)
        attention_mask = np.zeros((len(encoded), max_len), dtype=np.int64)
        token_type_ids = np.zeros((len(encoded), max_len), dtype=np.int64)

        for row, ids in enumerate(encoded):
            input_ids[row, :len(ids)] = ids
            attention_mask[row, :len(ids)] = 1
            if len(ids) > self.config.max_sequence_length:
                logger.warning(f"Sequence {row} has {len(ids)} tokens, longer than "
                               f"max_sequence_length={self.config.max_sequence_length}")

        return BatchEncoding(input_ids=input_ids, attention_mask=attention_mask, token_type_ids=token_type_ids)

    def decode(self, tokens: Sequence[str]) -> str:
        """
        Join tokens with spaces after removing the ``##`` markers.

        This is lossy: punctuation ends up space-separated and words split
        into pieces are not glued back together.
        """
        return " ".join(token.replace(CONTINUATION_PREFIX, "") for token in tokens).strip()

    def decode_ids(self, ids: Sequence[int]) -> str:
        return self.decode(self.convert_ids_to_tokens(ids))

    def __repr__(self) -> str:
        return (f"BertTokenizer(vocab_size={self.vocab_size}, do_lower_case={self.config.do_lower_case}, "
                f"do_basic_tokenize={self.config.do_basic_tokenize})")
