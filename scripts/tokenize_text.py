"""
Command-line tool for tokenizing and encoding texts with a BERT vocabulary.
"""

import os
import sys
import argparse
import logging

import numpy as np
from tqdm import tqdm

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bert_tokenization.errors import TokenizationError
from bert_tokenization.tokenizer import BertTokenizer, TokenizerConfig
from bert_tokenization.utils.data import load_texts

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


def build_tokenizer(args) -> BertTokenizer:
    """Create the tokenizer described by the command-line arguments."""
    overrides = {}
    if args.lower_case:
        overrides['do_lower_case'] = True
    if not args.basic_tokenize:
        overrides['do_basic_tokenize'] = False
    if not args.chinese_chars:
        overrides['tokenize_chinese_chars'] = False
    if args.never_split:
        overrides['never_split'] = args.never_split

    if args.pretrained:
        return BertTokenizer.from_pretrained(args.pretrained, **overrides)
    if args.config:
        return BertTokenizer(args.vocab, config=TokenizerConfig.from_json(args.config), **overrides)
    return BertTokenizer(args.vocab, **overrides)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Tokenize texts into BERT WordPiece tokens and ids')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--vocab', type=str,
                        help='Path to vocab.txt (one token per line)')
    source.add_argument('--pretrained', type=str,
                        help='Directory containing vocab.txt and tokenizer_config.json')
    parser.add_argument('--config', type=str, default=None,
                        help='Optional tokenizer_config.json to use with --vocab')
    parser.add_argument('--text', type=str, action='append', default=[],
                        help='Text to tokenize (may be repeated)')
    parser.add_argument('--input-file', type=str, default=None,
                        help='File with one text per line')
    parser.add_argument('--num-samples', type=int, default=None,
                        help='Only use the first N lines of --input-file')
    parser.add_argument('--lower-case', action='store_true',
                        help='Lower-case and strip accents')
    parser.add_argument('--no-basic-tokenize', action='store_false', dest='basic_tokenize',
                        help='Skip basic tokenization and run WordPiece on whitespace-split input')
    parser.add_argument('--no-chinese-chars', action='store_false', dest='chinese_chars',
                        help='Do not split CJK ideographs into separate tokens')
    parser.add_argument('--never-split', type=str, nargs='*', default=None,
                        help='Words exempt from lower-casing and punctuation splitting')
    parser.add_argument('--output', type=str, default=None,
                        help='Write input_ids/attention_mask/token_type_ids to this .npz file')
    args = parser.parse_args(argv)

    texts = list(args.text)
    if args.input_file:
        texts.extend(load_texts(args.input_file, num_samples=args.num_samples))
    if not texts:
        parser.error('no input: pass --text or --input-file')

    try:
        tokenizer = build_tokenizer(args)
        for text in tqdm(texts, desc="Tokenizing", disable=len(texts) < 100):
            tokens = tokenizer.tokenize(text)
            ids = tokenizer.encode(text)
            print(f"{text}\t{' '.join(tokens)}\t{' '.join(str(i) for i in ids)}")

        if args.output:
            batch = tokenizer.encode_batch(texts)
            output_dir = os.path.dirname(args.output)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
            np.savez(args.output, **batch.to_dict())
            logger.info(f"Saved batch of shape {batch.shape} to {args.output}")
    except TokenizationError as e:
        logger.error(f"Tokenization failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
