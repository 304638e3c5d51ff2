from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import VADER_LOG_LEVEL
from .services.nlp.engine import get_pipeline, get_store, score_sentences
from .services.nlp.errors import VaderError
from .services.nlp.tokens import tokens_to_string

FILE_HELP = "input text-file (--file) to read and analyse using Vader"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vaderscore", description="Score the sentences of a text file with VADER.")
    parser.add_argument("--file", "-file", dest="file", default=None, help=FILE_HELP)
    parser.add_argument("--workers", type=int, default=None, help="Thread pool size for sentence scoring.")
    return parser


def analyse_file(path: Path, workers: int | None = None) -> None:
    text = path.read_text(encoding="utf-8")
    store = get_store()
    sentences = get_pipeline().parse(text)
    for sentence, score in zip(sentences, score_sentences(sentences, store, max_workers=workers)):
        print(f"sentence: {tokens_to_string(sentence)}")
        print(f"Vader score: {score}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=VADER_LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if args.file is None:
        print(FILE_HELP)
        return 0
    path = Path(args.file)
    if not path.exists():
        print(f"file does not exist: {args.file}")
        return 1

    try:
        analyse_file(path, workers=args.workers)
    except VaderError as exc:
        print(f"error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
