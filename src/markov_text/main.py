"""
Trigram Markov Text Generator

Command-line entry point: reads a source text, trains a trigram Markov
model on its words and prints up to N generated words.

Usage:
    markov-text doctorwho.txt                 # 50 words from the file
    markov-text doctorwho.txt -n 200 -s 7     # 200 words, fixed seed
    markov-text                               # prompt for the filename
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .builder import build_model_from_file
from .config import GeneratorConfig
from .exceptions import MarkovTextError, MissingContinuationError, SourceUnavailableError
from .generator import generate_text

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate pseudo-random text from a trigram Markov model of a source text"
    )

    parser.add_argument(
        "source",
        nargs="?",
        help="Path to the source text (prompted for when omitted)"
    )

    parser.add_argument(
        "--words", "-n",
        type=int,
        help="Maximum number of words to generate (default: 50)"
    )

    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Seed for the random source"
    )

    parser.add_argument(
        "--encoding",
        type=str,
        help="Encoding of the source text (default: utf-8)"
    )

    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Strip control characters and collapse whitespace before tokenizing"
    )

    parser.add_argument(
        "--lowercase",
        action="store_true",
        help="Lowercase the text (implies --normalize)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        help="Write the generated text to this file instead of stdout"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def _load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the optional config file with command-line overrides."""
    if args.config:
        settings = GeneratorConfig.from_json_file(args.config).to_dict()
    else:
        settings = GeneratorConfig().to_dict()

    if args.words is not None:
        settings["max_words"] = args.words
    if args.seed is not None:
        settings["seed"] = args.seed
    if args.encoding is not None:
        settings["encoding"] = args.encoding
    if args.normalize or args.lowercase:
        settings["normalize"] = True
    if args.lowercase:
        settings["lowercase"] = True

    return GeneratorConfig.from_dict(settings)


def _prompt_for_source() -> Optional[str]:
    try:
        name = input("Enter filename (i.e. doctorwho.txt): ").strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return None
    return name or None


def run(source: str, config: GeneratorConfig) -> str:
    """
    Build a model from `source` and generate text with it.

    Args:
        source: Path to the source text
        config: Generation settings

    Returns:
        The generated text
    """
    model = build_model_from_file(
        source,
        encoding=config.encoding,
        normalize=config.normalize_config(),
        seed=config.seed
    )
    return generate_text(model, config.max_words)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = _load_config(args)
    except (ValueError, SourceUnavailableError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    source = args.source or _prompt_for_source()
    if not source:
        logger.error("No source text given")
        return 2

    try:
        text = run(source, config)
    except SourceUnavailableError as e:
        logger.error(f"Source unavailable: {e}")
        return 1
    except MissingContinuationError as e:
        logger.error(f"Generation failed: {e}")
        return 1
    except MarkovTextError as e:
        logger.error(str(e))
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(text + "\n")
        except OSError as e:
            logger.error(f"Cannot write output {output_path}: {e}")
            return 1
        logger.info(f"Generated text saved to: {output_path}")
    else:
        print(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
