"""
Dataset and collate function for batching raw texts through BertTokenizer.
"""

import logging
from typing import Dict, List, Optional

import torch
from torch.utils.data import Dataset

from bert_tokenization.tokenizer import BertTokenizer
from bert_tokenization.utils.data import load_texts, to_tensors

logger = logging.getLogger(__name__)


class TextDataset(Dataset):
    """Dataset of raw texts read from a file, one per line."""
    
    def __init__(self, file_path: str, num_samples: Optional[int] = None):
        """
        Initialize text dataset.
        
        Args:
            file_path: Path to a UTF-8 text file
            num_samples: Optional number of lines to keep
        """
        self.texts = load_texts(file_path, num_samples=num_samples)

    def __len__(self) -> int:
        return len(self.texts)

    def __getitem__(self, idx: int) -> str:
        return self.texts[idx]


class EncodingCollator:
    """
    collate_fn for DataLoader: encodes a list of texts into padded tensors.

    Example:
        >>> loader = DataLoader(TextDataset("texts.txt"), batch_size=8,
        ...                     collate_fn=EncodingCollator(tokenizer))
    """

    def __init__(self, tokenizer: BertTokenizer, device: Optional[str] = None):
        self.tokenizer = tokenizer
        self.device = device

    def __call__(self, texts: List[str]) -> Dict[str, torch.Tensor]:
        batch = self.tokenizer.encode_batch(texts)
        logger.debug(f"Collated {len(texts)} texts into batch of shape {batch.shape}")
        return to_tensors(batch, device=self.device)
