#!/usr/bin/env python3
"""Entry point for running the chat interface as a module.

Usage:
    python -m intentbot.chat
    python -m intentbot.chat --corpus ./data/my_corpus.txt --report
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

logger = logging.getLogger("intentbot.chat")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Intent-classifying console chatbot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Packaged corpus, en_core_web_sm annotators
  python -m intentbot.chat

  # Annotators from another spaCy pipeline
  python -m intentbot.chat --model en_core_web_md

  # Custom training corpus, print training accuracy first
  python -m intentbot.chat --corpus ./data/corpus.txt --report

  # Verbose pipeline output
  python -m intentbot.chat --log-level DEBUG
        """,
    )
    parser.add_argument("--corpus", help="Training corpus file (label<space>text per line)")
    parser.add_argument("--model", help="spaCy pipeline name or directory (default en_core_web_sm)")
    parser.add_argument("--cutoff", type=int, help="Minimum feature frequency")
    parser.add_argument("--iterations", type=int, help="Maximum training iterations")
    parser.add_argument(
        "--algorithm",
        choices=["gis", "lbfgs"],
        help="Classifier training algorithm",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default from INTENTBOT_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a classification report on the training corpus before chatting",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    # Import here so .env is applied before settings are read
    from intentbot.chat.interface import ChatInterface
    from intentbot.classification.maxent import evaluate
    from intentbot.config.settings import Settings
    from intentbot.container import ChatbotContainer
    from intentbot.errors import IntentBotError

    overrides = {
        "corpus_path": args.corpus,
        "spacy_model": args.model,
        "cutoff": args.cutoff,
        "iterations": args.iterations,
        "algorithm": args.algorithm,
        "log_level": args.log_level,
    }
    try:
        settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("Invalid configuration: %s", e)
        return 1

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logger.info("Current log level is set to : %s", settings.log_level)

    try:
        container = ChatbotContainer(settings)
    except IntentBotError as e:
        logger.error("Startup failed: %s", e.message)
        return 1

    if args.report:
        report = evaluate(container.model, container.samples, container.extractor)
        print(f"Training accuracy: {report['accuracy']:.3f}")
        print(report["report"])

    ChatInterface(container.create_controller()).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
