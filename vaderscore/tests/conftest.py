from __future__ import annotations

from pathlib import Path

import pytest
from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer

from vaderscore.services.nlp import engine
from vaderscore.services.nlp import lexicon_store
from vaderscore.services.nlp import text_pipeline
from vaderscore.services.nlp.lexicon_store import LexiconStore

TEST_LEXICON = {
    "good": 1.9,
    "great": 3.1,
    "bad": -2.5,
    "smart": 1.7,
    "handsome": 2.2,
    "funny": 1.9,
    "happy": 2.7,
    "hate": -2.7,
    "kiss": 1.8,
    "death": -2.9,
    "love": 3.2,
    "like": 2.0,
    "kind": 2.4,
}

TEST_IDIOMS = {
    "kiss of death": -1.5,
    "bad ass": 1.5,
}


def fake_tagger(words):
    return [(word, "NN") for word in words]


def fake_sentence_splitter():
    # untrained Punkt that still knows a few title abbreviations
    params = PunktParameters()
    params.abbrev_types = {"dr", "mr", "mrs", "ms"}
    return PunktSentenceTokenizer(params).tokenize


def write_lexicon(directory: Path) -> tuple[Path, Path]:
    lexicon_path = directory / "lexicon.txt"
    idioms_path = directory / "idioms.txt"
    lexicon_path.write_text(
        "".join(f"{word}\t{value}\t0.5\t[1, 2, 3]\n" for word, value in TEST_LEXICON.items()),
        encoding="utf-8",
    )
    idioms_path.write_text(
        "".join(f"{phrase},{value}\n" for phrase, value in TEST_IDIOMS.items()),
        encoding="utf-8",
    )
    return lexicon_path, idioms_path


@pytest.fixture(autouse=True)
def isolate_nlp_runtime(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    # Deterministic runs: small fixture lexicon, no NLTK model downloads.
    lexicon_path, idioms_path = write_lexicon(tmp_path)
    monkeypatch.setattr(lexicon_store, "VADER_LEXICON_PATH", str(lexicon_path))
    monkeypatch.setattr(lexicon_store, "VADER_IDIOMS_PATH", str(idioms_path))
    monkeypatch.setattr(text_pipeline, "load_default_tagger", lambda: fake_tagger)
    monkeypatch.setattr(text_pipeline, "load_default_sentence_splitter", fake_sentence_splitter)

    lexicon_store.reset_lexicon_store()
    engine._STORE = None
    engine._PIPELINE = None
    engine._INITIALIZED = False
    yield
    lexicon_store.reset_lexicon_store()


@pytest.fixture
def store(tmp_path: Path) -> LexiconStore:
    lexicon_path, idioms_path = write_lexicon(tmp_path)
    return LexiconStore.load(lexicon_path, idioms_path)
