from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Sequence

import numpy as np

from ...config import VADER_SCORER_WORKERS
from . import text_pipeline
from .errors import VaderError
from .lexicon_store import LexiconStore, get_lexicon_store
from .scorer import score_sentence
from .text_pipeline import TextPipeline
from .tokens import Token, tokens_to_string
from .vscore import VScore

logger = logging.getLogger(__name__)

_STORE: LexiconStore | None = None
_PIPELINE: TextPipeline | None = None
_INITIALIZED = False


def initialize() -> None:
    global _STORE, _PIPELINE, _INITIALIZED
    if _INITIALIZED:
        return
    try:
        _STORE = get_lexicon_store()
        # load the NLTK models now so a missing one fails startup, not the first request
        _PIPELINE = TextPipeline(
            tagger=text_pipeline.load_default_tagger(),
            sentence_splitter=text_pipeline.load_default_sentence_splitter(),
        )
        _INITIALIZED = True
    except VaderError as exc:
        logger.exception("Sentiment engine initialization failed", exc_info=exc)
        raise


def get_store() -> LexiconStore:
    initialize()
    if _STORE is None:
        raise VaderError("sentiment engine is not initialized")
    return _STORE


def get_pipeline() -> TextPipeline:
    initialize()
    if _PIPELINE is None:
        raise VaderError("sentiment engine is not initialized")
    return _PIPELINE


def score_sentences(
    sentences: Sequence[Sequence[Token]],
    store: LexiconStore,
    max_workers: int | None = None,
) -> list[VScore]:
    workers = max_workers or VADER_SCORER_WORKERS
    if workers <= 1 or len(sentences) <= 1:
        return [score_sentence(sentence, store) for sentence in sentences]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda sentence: score_sentence(sentence, store), sentences))


def summarize(scores: Sequence[VScore]) -> dict[str, Any]:
    if not scores:
        return {"sentences": 0, "compound": 0.0, "pos": 0.0, "neu": 0.0, "neg": 0.0}
    matrix = np.array([[s.compound, s.positive, s.neutral, s.negative] for s in scores], dtype=np.float64)
    means = matrix.mean(axis=0)
    return {
        "sentences": len(scores),
        "compound": round(float(means[0]), 4),
        "pos": round(float(means[1]), 3),
        "neu": round(float(means[2]), 3),
        "neg": round(float(means[3]), 3),
    }


def _sentence_payload(tokens: Sequence[Token], score: VScore) -> dict[str, Any]:
    return {
        "text": tokens_to_string(tokens).strip(),
        "tokens": [
            {"value": token.value, "pos": token.pos_tag, "score": round(token.word_score, 4)}
            for token in tokens
        ],
        "scores": score.as_dict(),
    }


def analyse_tokens(tokens: Sequence[Token]) -> dict[str, Any]:
    score = score_sentence(tokens, get_store())
    return _sentence_payload(tokens, score)


def analyse_text(text: str, max_workers: int | None = None) -> dict[str, Any]:
    sentences = get_pipeline().parse(text or "")
    scores = score_sentences(sentences, get_store(), max_workers=max_workers)
    return {
        "sentences": [_sentence_payload(tokens, score) for tokens, score in zip(sentences, scores)],
        "summary": summarize(scores),
    }


__all__ = ["analyse_text", "analyse_tokens", "initialize", "score_sentences", "summarize"]
