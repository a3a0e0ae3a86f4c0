"""
Data utilities for loading texts and turning encoded batches into model inputs.
"""

import os
import logging
from typing import Dict, List, Optional

import torch

from bert_tokenization.tokenizer import BatchEncoding, BertTokenizer

logger = logging.getLogger(__name__)

# Local tokenizer directory with vocab.txt and tokenizer_config.json
DEFAULT_TOKENIZER_PATH = 'tokenizer/'


def load_texts(text_file: str, num_samples: Optional[int] = None) -> List[str]:
    """
    Load texts from a file, one per non-blank line.
    
    Args:
        text_file: Path to a UTF-8 text file
        num_samples: Optional number of texts to keep from the start of the file
        
    Returns:
        List of texts
    """
    if not os.path.exists(text_file):
        raise FileNotFoundError(f"Text file not found: {text_file}")

    with open(text_file, 'r', encoding='utf-8') as f:
        texts = [line.rstrip('\n') for line in f if line.strip()]

    if num_samples and num_samples < len(texts):
        texts = texts[:num_samples]
    logger.info(f"Loaded {len(texts)} texts from {text_file}")
    return texts


def get_tokenizer(vocab_file: Optional[str] = None, model_dir: str = DEFAULT_TOKENIZER_PATH,
                  **kwargs) -> BertTokenizer:
    """
    Build a BertTokenizer from a vocabulary file or a saved tokenizer directory.
    
    Args:
        vocab_file: Path to vocab.txt (takes precedence over model_dir)
        model_dir: Directory written by BertTokenizer.save_pretrained
        **kwargs: TokenizerConfig overrides
            
    Returns:
        A BertTokenizer instance
    """
    if vocab_file is not None:
        return BertTokenizer(vocab_file, **kwargs)
    return BertTokenizer.from_pretrained(model_dir, **kwargs)


def get_device() -> str:
    """
    Get the best available device for model inputs.
    
    Returns:
        Device string: 'cuda', 'mps', or 'cpu'
    """
    if torch.cuda.is_available():
        return 'cuda'
    elif hasattr(torch, 'backends') and hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return 'mps'
    else:
        return 'cpu'


def to_tensors(batch: BatchEncoding, device: Optional[str] = None) -> Dict[str, torch.Tensor]:
    """
    Convert an encoded batch into int64 tensors keyed by model input name.
    
    Args:
        batch: Output of BertTokenizer.encode_batch
        device: Device to move the tensors to
        
    Returns:
        Dictionary with 'input_ids', 'attention_mask' and 'token_type_ids'
    """
    tensors = {name: torch.as_tensor(array, dtype=torch.long) for name, array in batch.to_dict().items()}
    if device:
        tensors = {name: tensor.to(device) for name, tensor in tensors.items()}
    return tensors
