from __future__ import annotations

import logging
from typing import Callable, Sequence

from nltk.tokenize import NLTKWordTokenizer

from .errors import ResourceMissingError, TokenizationError
from .tokens import Token

logger = logging.getLogger(__name__)

Tagger = Callable[[Sequence[str]], Sequence[tuple[str, str]]]
SentenceSplitter = Callable[[str], Sequence[str]]

TAGGER_RESOURCE = "averaged_perceptron_tagger_eng"
SENTENCE_RESOURCE = "punkt_tab"
SENTENCE_LANGUAGE = "english"


def load_default_tagger() -> Tagger:
    from nltk.tag.perceptron import PerceptronTagger

    try:
        tagger = PerceptronTagger()
    except LookupError as exc:
        raise ResourceMissingError(
            TAGGER_RESOURCE,
            hint=f"install it with nltk.download('{TAGGER_RESOURCE}')",
        ) from exc
    return tagger.tag


def load_default_sentence_splitter() -> SentenceSplitter:
    """Trained English Punkt model, so abbreviations like "Dr." do not end a sentence."""
    from nltk.tokenize.punkt import PunktTokenizer

    try:
        splitter = PunktTokenizer(SENTENCE_LANGUAGE)
    except LookupError as exc:
        raise ResourceMissingError(
            SENTENCE_RESOURCE,
            hint=f"install it with nltk.download('{SENTENCE_RESOURCE}')",
        ) from exc
    return splitter.tokenize


class TextPipeline:
    """Splits text into sentences of POS-tagged tokens."""

    def __init__(self, tagger: Tagger | None = None, sentence_splitter: SentenceSplitter | None = None) -> None:
        self._sentence_splitter = sentence_splitter
        self._tokenizer = NLTKWordTokenizer()
        self._tagger = tagger

    @property
    def tagger(self) -> Tagger:
        if self._tagger is None:
            logger.info("Loading NLTK part-of-speech tagger")
            self._tagger = load_default_tagger()
        return self._tagger

    @property
    def sentence_splitter(self) -> SentenceSplitter:
        if self._sentence_splitter is None:
            logger.info("Loading NLTK Punkt sentence model")
            self._sentence_splitter = load_default_sentence_splitter()
        return self._sentence_splitter

    def sentences(self, text: str) -> list[str]:
        return [sentence for sentence in self.sentence_splitter(text or "") if sentence.strip()]

    def words(self, sentence: str) -> list[str]:
        return self._tokenizer.tokenize(sentence)

    def tag(self, words: Sequence[str]) -> list[str]:
        tagged = list(self.tagger(list(words)))
        if len(tagged) != len(words):
            raise TokenizationError(
                f"unmatched words / pos tags in nlp parser: {len(words)} words, {len(tagged)} tags"
            )
        return [tag for _, tag in tagged]

    def parse(self, text: str) -> list[list[Token]]:
        parsed: list[list[Token]] = []
        for sentence_text in self.sentences(text):
            words = self.words(sentence_text)
            if not words:
                continue
            tags = self.tag(words)
            parsed.append([Token(word, tag) for word, tag in zip(words, tags)])
        return parsed
