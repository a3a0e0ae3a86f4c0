"""
Exceptions raised by the tokenization pipeline.
"""

from typing import Optional


class TokenizationError(Exception):
    """Base class for tokenizer errors."""


class VocabLoadError(TokenizationError):
    """The vocabulary source could not be opened or read."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class UnknownTokenError(TokenizationError, KeyError):
    """A token (or id) required for encoding is absent from the vocabulary."""

    def __init__(self, token):
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        return f"Token not in vocabulary: {self.token!r}"
