"""
Character-level text normalization used before splitting text into words.

All predicates operate on single Unicode codepoints (Python ``str`` of length 1).
"""

import re
import unicodedata
from typing import Collection, List, Optional

# Categories removed by clean_text: Control, Format, Private-Use, Surrogate, Unassigned
_CONTROL_CATEGORIES = frozenset(("Cc", "Cf", "Co", "Cs", "Cn"))

# Connector, Dash, Close, Final-Quote, Initial-Quote, Other, Open
_PUNCTUATION_CATEGORIES = frozenset(("Pc", "Pd", "Pe", "Pf", "Pi", "Po", "Ps"))

_CJK_RANGES = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B73F),
    (0x2B740, 0x2B81F),
    (0x2B820, 0x2CEAF),
    (0xF900, 0xFAFF),
    (0x2F800, 0x2FA1F),
)

_ASCII_WHITESPACE = " \t\n\r\x0b\x0c"
_WHITESPACE_RUN = re.compile(r"[ \t\n\r\x0b\x0c]+")


def is_whitespace(char: str) -> bool:
    """Space, tab, newline, carriage return, or any Space-Separator (Zs)."""
    if char in (" ", "\t", "\n", "\r"):
        return True
    return unicodedata.category(char) == "Zs"


def is_control(char: str) -> bool:
    """Control-like characters that clean_text drops. Tab/newline/CR are not control here."""
    if char in ("\t", "\n", "\r"):
        return False
    return unicodedata.category(char) in _CONTROL_CATEGORIES


def is_punctuation(char: str) -> bool:
    """
    ASCII symbol ranges count as punctuation even when Unicode files them
    under Symbol (``$``, ``+``, ``^``, ``|`` ...).
    """
    cp = ord(char)
    if (33 <= cp <= 47) or (58 <= cp <= 64) or (91 <= cp <= 96) or (123 <= cp <= 126):
        return True
    return unicodedata.category(char) in _PUNCTUATION_CATEGORIES


def is_chinese_char(cp: int) -> bool:
    """Whether a codepoint lies in one of the CJK Unified Ideograph blocks."""
    for low, high in _CJK_RANGES:
        if low <= cp <= high:
            return True
    return False


def clean_text(text: str) -> str:
    """Remove invalid characters and map every whitespace character to a single ASCII space."""
    output = []
    for char in text:
        cp = ord(char)
        if cp == 0 or cp == 0xFFFD or is_control(char):
            continue
        if is_whitespace(char):
            output.append(" ")
        else:
            output.append(char)
    return "".join(output)


def space_chinese_chars(text: str) -> str:
    """
    Surround every CJK ideograph with whitespace so it becomes its own word.

    Only one space is ever inserted between neighbours, and none at the start
    or end of the string: ``"A中B" -> "A 中 B"``, ``"中文" -> "中 文"``.
    """
    output = []
    pending_space = False
    for char in text:
        if is_chinese_char(ord(char)):
            if output and output[-1] != " ":
                output.append(" ")
            output.append(char)
            pending_space = True
        else:
            if pending_space and char != " ":
                output.append(" ")
            output.append(char)
            pending_space = False
    return "".join(output)


def whitespace_tokenize(text: str) -> List[str]:
    """Trim text and split it on runs of whitespace."""
    text = text.strip(_ASCII_WHITESPACE)
    if not text:
        return []
    return _WHITESPACE_RUN.split(text)


def strip_accents(text: str) -> str:
    """Decompose (NFD) and drop nonspacing marks. The result is not recomposed."""
    text = unicodedata.normalize("NFD", text)
    return "".join(char for char in text if unicodedata.category(char) != "Mn")


def split_on_punctuation(word: str, never_split: Optional[Collection[str]] = None) -> List[str]:
    """
    Split a word so that every punctuation character is its own token.

    Runs of non-punctuation characters are kept together. A word listed in
    ``never_split`` is returned as-is.
    """
    if never_split and word in never_split:
        return [word]

    output = []
    current = []
    for char in word:
        if is_punctuation(char):
            if current:
                output.append("".join(current))
                current = []
            output.append(char)
        else:
            current.append(char)
    if current:
        output.append("".join(current))
    return output
