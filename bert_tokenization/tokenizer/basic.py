"""
Basic tokenization: cleanup, optional lower-casing, whitespace and punctuation splitting.
"""

from typing import Iterable, List, Optional

from bert_tokenization.tokenizer.base import Tokenizer
from bert_tokenization.tokenizer.normalizer import (
    clean_text,
    space_chinese_chars,
    split_on_punctuation,
    strip_accents,
    whitespace_tokenize,
)


class BasicTokenizer(Tokenizer):
    """Splits raw text into words and punctuation marks before WordPiece runs."""

    def __init__(self, do_lower_case: bool = False, never_split: Optional[Iterable[str]] = None,
                 tokenize_chinese_chars: bool = True):
        """
        Args:
            do_lower_case: Lower-case and strip accents from every word not in never_split
            never_split: Words that are neither lower-cased nor split on punctuation
            tokenize_chinese_chars: Make every CJK ideograph its own word
        """
        self.do_lower_case = do_lower_case
        self.never_split = frozenset(never_split or ())
        self.tokenize_chinese_chars = tokenize_chinese_chars

    def tokenize(self, text: str) -> List[str]:
        text = clean_text(text)
        if self.tokenize_chinese_chars:
            text = space_chinese_chars(text)

        split_tokens = []
        for token in whitespace_tokenize(text):
            if self.do_lower_case and token not in self.never_split:
                token = strip_accents(token.lower())
            split_tokens.extend(split_on_punctuation(token, self.never_split))
        return split_tokens
