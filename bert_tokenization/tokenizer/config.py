"""
Configuration for the BERT tokenization pipeline.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, FrozenSet, Iterable, Union

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "tokenizer_config.json"


@dataclass
class TokenizerConfig:
    """Options recognized by BertTokenizer."""
    do_lower_case: bool = False
    do_basic_tokenize: bool = True
    never_split: Union[FrozenSet[str], Iterable[str]] = frozenset()  # exempt from lower-casing and splitting
    tokenize_chinese_chars: bool = True
    max_input_chars_per_word: int = 100  # longer words become unk_token
    max_sequence_length: int = 512  # declared only, encode never truncates

    unk_token: str = "[UNK]"
    sep_token: str = "[SEP]"
    pad_token: str = "[PAD]"
    cls_token: str = "[CLS]"
    mask_token: str = "[MASK]"

    def __post_init__(self):
        """Normalize never_split and validate the length limits."""
        if isinstance(self.never_split, str):
            raise ValueError("never_split must be a collection of strings, not a single string")
        self.never_split = frozenset(self.never_split or ())
        if self.max_input_chars_per_word <= 0:
            raise ValueError(f"max_input_chars_per_word must be positive, got {self.max_input_chars_per_word}")
        if self.max_sequence_length <= 0:
            raise ValueError(f"max_sequence_length must be positive, got {self.max_sequence_length}")

    @property
    def special_tokens(self) -> Dict[str, str]:
        return {
            "cls_token": self.cls_token,
            "sep_token": self.sep_token,
            "pad_token": self.pad_token,
            "unk_token": self.unk_token,
            "mask_token": self.mask_token,
        }

    def to_dict(self) -> Dict[str, Any]:
        config_dict = asdict(self)
        config_dict["never_split"] = sorted(self.never_split)
        return config_dict

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "TokenizerConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(config_dict) - known
        if unknown:
            raise ValueError(f"Unknown tokenizer config option(s): {', '.join(sorted(unknown))}")
        return cls(**config_dict)

    @classmethod
    def from_json(cls, path: str) -> "TokenizerConfig":
        with open(path, 'r', encoding='utf-8') as f:
            config_dict = json.load(f)
        logger.info(f"Loaded tokenizer config from {path}")
        return cls.from_dict(config_dict)

    def save_json(self, path: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Saved tokenizer config to {path}")
