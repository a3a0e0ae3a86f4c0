"""
Vocabulary loading: one token per line, the zero-based line number is the id.
"""

import logging
import os
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from bert_tokenization.errors import VocabLoadError

logger = logging.getLogger(__name__)

VOCAB_FILE_NAME = "vocab.txt"


class Vocabulary:
    """
    Immutable token <-> id table.

    If a token appears on more than one line, the last line wins: the token
    maps to the later id and the earlier id has no reverse entry.
    """

    def __init__(self, tokens: Iterable[str]):
        self._tokens = tuple(tokens)

        token_to_id = {}
        for index, token in enumerate(self._tokens):
            token_to_id[token] = index
        id_to_token = {index: token for token, index in token_to_id.items()}

        self._token_to_id = MappingProxyType(token_to_id)
        self._id_to_token = MappingProxyType(id_to_token)

        duplicates = len(self._tokens) - len(token_to_id)
        if duplicates:
            logger.warning(f"Vocabulary contains {duplicates} duplicate line(s); "
                           f"later occurrences override earlier ids")

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Vocabulary":
        return cls(tokens)

    def id_of(self, token: str) -> Optional[int]:
        return self._token_to_id.get(token)

    def token_of(self, index: int) -> Optional[str]:
        return self._id_to_token.get(index)

    def size(self) -> int:
        """Number of distinct tokens."""
        return len(self._token_to_id)

    def tokens(self) -> List[str]:
        """All lines in their original order, duplicates included."""
        return list(self._tokens)

    @property
    def token_to_id(self) -> Mapping[str, int]:
        return self._token_to_id

    @property
    def id_to_token(self) -> Mapping[int, str]:
        return self._id_to_token

    def save(self, path: str) -> None:
        """Write the vocabulary back out in the same one-token-per-line format."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            for token in self._tokens:
                f.write(f"{token}\n")
        logger.info(f"Saved vocabulary of {len(self._tokens)} lines to {path}")

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, token) -> bool:
        return token in self._token_to_id

    def __repr__(self) -> str:
        return f"Vocabulary(size={self.size()})"


def load_vocab(path: str) -> Vocabulary:
    """
    Load a vocabulary file.

    Args:
        path: Path to a UTF-8 file with one token per line

    Returns:
        The loaded Vocabulary

    Raises:
        VocabLoadError: if the file cannot be opened, read or decoded
    """
    tokens = []
    try:
        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                if line.endswith("\n"):
                    line = line[:-1]
                tokens.append(line)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error loading vocabulary from {path}: {e}")
        raise VocabLoadError(f"Unable to load vocabulary from {path}: {e}", path=path) from e

    vocab = Vocabulary(tokens)
    logger.info(f"Loaded vocabulary from {path}, size: {vocab.size()}")
    return vocab
