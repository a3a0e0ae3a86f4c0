"""
Greedy longest-match-first WordPiece segmentation.
"""

from typing import List

from bert_tokenization.tokenizer.base import Tokenizer
from bert_tokenization.tokenizer.normalizer import whitespace_tokenize
from bert_tokenization.tokenizer.vocab import Vocabulary

CONTINUATION_PREFIX = "##"


class WordpieceTokenizer(Tokenizer):
    """
    Splits words into the longest subwords found in the vocabulary.

    Example:
        >>> wp = WordpieceTokenizer(Vocabulary(["[UNK]", "un", "##aff", "##able"]))
        >>> wp.tokenize("unaffable")
        ['un', '##aff', '##able']
    """

    def __init__(self, vocab: Vocabulary, unk_token: str = "[UNK]", max_input_chars_per_word: int = 100):
        self.vocab = vocab
        self.unk_token = unk_token
        self.max_input_chars_per_word = max_input_chars_per_word

    def tokenize(self, text: str) -> List[str]:
        """Segment every whitespace-separated word of text."""
        output_tokens = []
        for word in whitespace_tokenize(text):
            output_tokens.extend(self.tokenize_word(word))
        return output_tokens

    def tokenize_word(self, word: str) -> List[str]:
        """
        Segment a single word.

        Returns ``[unk_token]`` when the word is longer than
        ``max_input_chars_per_word`` or when some position cannot be matched
        by any vocabulary entry; pieces found before the failure are dropped.
        """
        if len(word) > self.max_input_chars_per_word:
            return [self.unk_token]

        sub_tokens = []
        start = 0
        while start < len(word):
            end = len(word)
            current = None
            while start < end:
                piece = word[start:end]
                if start > 0:
                    piece = CONTINUATION_PREFIX + piece
                if piece in self.vocab:
                    current = piece
                    break
                end -= 1
            if current is None:
                return [self.unk_token]
            sub_tokens.append(current)
            start = end
        return sub_tokens
