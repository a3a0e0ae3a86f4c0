"""
Common interface shared by the tokenizers in this package.
"""

from abc import ABC, abstractmethod
from typing import List


class Tokenizer(ABC):
    """Anything that turns a piece of text into a sequence of string tokens."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Split text into tokens."""
        pass
