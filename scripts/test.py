"""
Smoke test script for the tokenization pipeline.
"""

import os
import sys
import logging
import argparse
import tempfile

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bert_tokenization.tokenizer import BasicTokenizer, BertTokenizer, Vocabulary
from bert_tokenization.utils.data import get_device, to_tensors

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

SAMPLE_VOCAB = ["[PAD]", "[UNK]", "[CLS]", "[SEP]", "[MASK]",
                "hello", "world", ",", "!", "un", "##aff", "##able", "中", "文"]


def test_basic_tokenizer():
    """Test whitespace, punctuation and CJK splitting."""
    logger.info("Testing basic tokenizer...")
    tokenizer = BasicTokenizer()
    for text in ["Hello, world", "A中B", "  tabs\tand\nnewlines  "]:
        logger.info(f"'{text}' -> {tokenizer.tokenize(text)}")


def test_bert_tokenizer(vocab_dir: str):
    """Test tokenize/encode/encode_batch on a small vocabulary."""
    logger.info("Testing BERT tokenizer...")
    tokenizer = BertTokenizer(Vocabulary(SAMPLE_VOCAB), do_lower_case=True)

    for text in ["Hello, world!", "unaffable", "中文 hello", "unknownword"]:
        tokens = tokenizer.tokenize(text)
        ids = tokenizer.encode(text)
        logger.info(f"'{text}' -> {tokens} -> {ids} -> '{tokenizer.decode(tokens)}'")

    batch = tokenizer.encode_batch(["hello", "hello, world!"])
    logger.info(f"Batch shape: {batch.shape}")
    logger.info(f"input_ids: {batch.input_ids.tolist()}")
    logger.info(f"attention_mask: {batch.attention_mask.tolist()}")

    tensors = to_tensors(batch, device=get_device())
    logger.info(f"Tensors: { {name: tuple(t.shape) for name, t in tensors.items()} }")

    tokenizer.save_pretrained(vocab_dir)
    reloaded = BertTokenizer.from_pretrained(vocab_dir)
    logger.info(f"Reloaded {reloaded}")


def main():
    """Main function to run tests."""
    parser = argparse.ArgumentParser(description='Run smoke tests for the BERT tokenizer')
    parser.add_argument('--skip-basic', action='store_true',
                        help='Skip basic tokenizer tests')
    parser.add_argument('--skip-bert', action='store_true',
                        help='Skip BERT tokenizer tests')
    args = parser.parse_args()

    if not args.skip_basic:
        test_basic_tokenizer()

    if not args.skip_bert:
        with tempfile.TemporaryDirectory() as tmp_dir:
            test_bert_tokenizer(tmp_dir)

    logger.info("All tests completed!")


if __name__ == "__main__":
    main()
