"""Command-line interface for training and generation."""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from charlm.data.corpus import CharStream
from charlm.models.config import ModelConfig
from charlm.models.language_model import LanguageModel


logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Train a character-level n-gram model and generate text'
    )
    parser.add_argument('window_length', type=int, help='Number of preceding characters to condition on')
    parser.add_argument('initial_text', type=str, help='Seed text to extend')
    parser.add_argument('text_length', type=int, help='Total length of the generated text')
    parser.add_argument(
        'mode',
        type=str,
        help="'random' for fresh randomness, anything else for a fixed seed"
    )
    parser.add_argument('corpus', type=Path, help='Training corpus file')
    parser.add_argument(
        '--show-model',
        action='store_true',
        help='Print the learned distributions before the generated text'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
    )
    return parser


def run(args) -> str:
    """Train on the corpus and return the generated text."""
    config = ModelConfig.from_mode(args.window_length, args.mode)
    logger.info(
        f"Window length {config.window_length}, "
        f"{'seed ' + str(config.seed) if config.reproducible else 'unseeded'}"
    )

    model = LanguageModel(config.window_length, config.make_random_source())
    model.train(CharStream.from_file(args.corpus))
    if args.show_model:
        print(model, end='')

    return model.generate(args.initial_text, args.text_length)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    print(run(args))


if __name__ == '__main__':
    main()
