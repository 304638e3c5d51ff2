from __future__ import annotations

import nltk
import nltk.tag.perceptron
import nltk.tokenize.punkt
import pytest

from vaderscore.services.nlp import text_pipeline
from vaderscore.services.nlp.errors import ResourceMissingError, TokenizationError
from vaderscore.services.nlp.text_pipeline import TextPipeline

# captured at import, before the autouse fixture swaps in the fakes
REAL_LOAD_DEFAULT_TAGGER = text_pipeline.load_default_tagger
REAL_LOAD_DEFAULT_SENTENCE_SPLITTER = text_pipeline.load_default_sentence_splitter


def _has_punkt_tab() -> bool:
    try:
        nltk.data.find("tokenizers/punkt_tab/english/")
    except LookupError:
        return False
    return True


def test_parse_splits_sentences_and_tags_tokens():
    pipeline = TextPipeline(tagger=lambda words: [(word, "NN") for word in words])
    sentences = pipeline.parse("The food is good. I hate the rain!")
    assert [[token.value for token in sentence] for sentence in sentences] == [
        ["The", "food", "is", "good", "."],
        ["I", "hate", "the", "rain", "!"],
    ]
    assert all(token.pos_tag == "NN" for sentence in sentences for token in sentence)


def test_parse_splits_contractions():
    pipeline = TextPipeline(tagger=lambda words: [(word, "NN") for word in words])
    [sentence] = pipeline.parse("I don't like it")
    assert [token.value for token in sentence] == ["I", "do", "n't", "like", "it"]


def test_parse_empty_text():
    pipeline = TextPipeline(tagger=lambda words: [(word, "NN") for word in words])
    assert pipeline.parse("") == []
    assert pipeline.parse("   ") == []


def test_tag_count_mismatch_raises():
    pipeline = TextPipeline(tagger=lambda words: [(word, "NN") for word in words[:-1]])
    with pytest.raises(TokenizationError):
        pipeline.parse("The food is good.")


def test_default_tagger_is_loaded_lazily():
    pipeline = TextPipeline()
    [sentence] = pipeline.parse("Great day")
    assert [token.pos_tag for token in sentence] == ["NN", "NN"]


def test_missing_tagger_model_raises(monkeypatch):
    class _MissingTagger:
        def __init__(self, *args, **kwargs):
            raise LookupError("Resource averaged_perceptron_tagger_eng not found.")

    monkeypatch.setattr(nltk.tag.perceptron, "PerceptronTagger", _MissingTagger)
    with pytest.raises(ResourceMissingError) as excinfo:
        REAL_LOAD_DEFAULT_TAGGER()
    assert "nltk.download" in str(excinfo.value)


def test_abbreviations_stay_inside_their_sentence():
    pipeline = TextPipeline(tagger=lambda words: [(word, "NN") for word in words])
    sentences = pipeline.parse("Dr. Smith is not good. Mr. Jones is great.")
    assert [[token.value for token in sentence] for sentence in sentences] == [
        ["Dr.", "Smith", "is", "not", "good", "."],
        ["Mr.", "Jones", "is", "great", "."],
    ]


def test_default_sentence_splitter_uses_english_punkt(monkeypatch):
    languages = []

    class _Punkt:
        def __init__(self, lang="english"):
            languages.append(lang)

        def tokenize(self, text):
            return [text]

    monkeypatch.setattr(nltk.tokenize.punkt, "PunktTokenizer", _Punkt)
    splitter = REAL_LOAD_DEFAULT_SENTENCE_SPLITTER()
    assert languages == ["english"]
    assert splitter("One. Two.") == ["One. Two."]


def test_missing_sentence_model_raises(monkeypatch):
    class _MissingPunkt:
        def __init__(self, *args, **kwargs):
            raise LookupError("Resource punkt_tab not found.")

    monkeypatch.setattr(nltk.tokenize.punkt, "PunktTokenizer", _MissingPunkt)
    with pytest.raises(ResourceMissingError) as excinfo:
        REAL_LOAD_DEFAULT_SENTENCE_SPLITTER()
    assert "nltk.download('punkt_tab')" in str(excinfo.value)


@pytest.mark.skipif(not _has_punkt_tab(), reason="punkt_tab data is not installed")
def test_trained_punkt_keeps_title_abbreviations():
    splitter = REAL_LOAD_DEFAULT_SENTENCE_SPLITTER()
    assert splitter("Dr. Smith is not good. Mr. Jones is great.") == [
        "Dr. Smith is not good.",
        "Mr. Jones is great.",
    ]
