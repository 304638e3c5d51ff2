from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import nltk

from ...config import VADER_IDIOMS_PATH, VADER_LEXICON_PATH
from .errors import MalformedEntryError, ResourceMissingError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
IDIOMS_PATH = DATA_DIR / "vader_idioms.txt"

# full VADER valence table as shipped in the nltk_data "vader_lexicon" package
LEXICON_RESOURCE = "sentiment/vader_lexicon.zip/vader_lexicon/vader_lexicon.txt"

# empirically derived mean sentiment intensity change for booster words
B_INCR = 0.293
B_DECR = -0.293

NEGATE = frozenset(
    {
        "aint", "arent", "cannot", "cant", "couldnt", "darent", "didnt", "doesnt",
        "ain't", "aren't", "can't", "couldn't", "daren't", "didn't", "doesn't",
        "dont", "hadnt", "hasnt", "havent", "mightnt", "mustnt", "neither",
        "don't", "hadn't", "hasn't", "haven't", "isn't", "isnt", "mightn't",
        "mustn't", "neednt", "needn't", "never", "none", "nope", "nor", "not",
        "nothing", "nowhere", "oughtnt", "shant", "shouldnt", "uhuh", "wasnt",
        "werent", "oughtn't", "shan't", "shouldn't", "uh-uh", "wasn't", "weren't",
        "without", "wont", "wouldnt", "won't", "wouldn't", "rarely", "seldom",
        "despite",
    }
)

BOOSTER_INCREASE = (
    "absolutely", "amazingly", "awfully", "completely", "considerably",
    "decidedly", "deeply", "effing", "enormously", "entirely", "especially",
    "exceptionally", "extremely", "fabulously", "flipping", "flippin",
    "fricking", "frickin", "frigging", "friggin", "fully", "fucking",
    "greatly", "hella", "highly", "hugely", "incredibly", "intensely",
    "majorly", "more", "most", "particularly", "purely", "quite", "really",
    "remarkably", "so", "substantially", "thoroughly", "totally",
    "tremendously", "uber", "unbelievably", "unusually", "utterly", "very",
)

BOOSTER_DECREASE = (
    "almost", "barely", "hardly", "just enough", "kind of", "kinda", "kindof",
    "kind-of", "less", "little", "marginally", "occasionally", "partly",
    "scarcely", "slightly", "somewhat", "sort of", "sorta", "sortof", "sort-of",
)

BOOSTER_MAP: Mapping[str, float] = MappingProxyType(
    {
        **{word: B_INCR for word in BOOSTER_INCREASE},
        **{word: B_DECR for word in BOOSTER_DECREASE},
    }
)


@dataclass(frozen=True)
class LexiconStore:
    """Read-only word tables shared by every scoring call."""

    mood_set: Mapping[str, float]
    booster_map: Mapping[str, float]
    idiom_map: Mapping[str, float]
    negated_set: frozenset[str]

    @classmethod
    def load(cls, lexicon_path: Path | str | None = None, idioms_path: Path | str | None = None) -> "LexiconStore":
        """Load the valence and idiom tables.

        Without ``lexicon_path`` the valence table comes from NLTK's
        ``vader_lexicon`` data package.
        """
        lexicon_source = Path(lexicon_path) if lexicon_path else None
        idioms_target = Path(idioms_path) if idioms_path else IDIOMS_PATH
        # both resources must exist before anything is parsed
        for target in (lexicon_source, idioms_target):
            if target is not None and not target.is_file():
                raise ResourceMissingError(target)
        if lexicon_source is None:
            lexicon_source = find_default_lexicon()

        mood_set = load_valence_table(lexicon_source)
        idiom_map = load_idiom_table(idioms_target)
        return cls(
            mood_set=MappingProxyType(mood_set),
            booster_map=BOOSTER_MAP,
            idiom_map=MappingProxyType(idiom_map),
            negated_set=NEGATE,
        )

    def __len__(self) -> int:
        return len(self.mood_set)

    def valence(self, word: str) -> float | None:
        return self.mood_set.get(word)

    def is_mood_word(self, word: str) -> bool:
        return word.lower() in self.mood_set

    def booster_scalar(self, word: str) -> float | None:
        return self.booster_map.get(word.lower())

    def idiom_valence(self, phrase: str) -> float | None:
        return self.idiom_map.get(phrase)

    def is_negation(self, word: str) -> bool:
        return word.lower() in self.negated_set

    def is_known_word(self, word: str) -> bool:
        return self.is_mood_word(word) or self.booster_scalar(word) is not None or self.is_negation(word)


def find_default_lexicon():
    try:
        return nltk.data.find(LEXICON_RESOURCE)
    except LookupError as exc:
        raise ResourceMissingError(
            "vader_lexicon",
            hint="install it with nltk.download('vader_lexicon') or set VADER_LEXICON_PATH",
        ) from exc


def _read_lines(source) -> list[str]:
    # source is a pathlib.Path or an nltk_data path pointer; both open text streams
    with source.open(encoding="utf-8") as handle:
        return handle.read().splitlines()


def _parse_float(raw: str, source, line_number: int, line: str) -> float:
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise MalformedEntryError(source, line_number, line) from exc


def load_valence_table(source) -> dict[str, float]:
    logger.info("Loading sentiment lexicon from %s", source)
    mood_set: dict[str, float] = {}
    skipped = 0
    for line_number, line in enumerate(_read_lines(source), start=1):
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < 3:
            skipped += 1
            logger.warning("Skipping invalid lexicon line %s: %s", line_number, line)
            continue
        mood_set[parts[0].strip()] = _parse_float(parts[1], source, line_number, line)
    logger.info("Loaded %s lexicon entries (%s skipped)", len(mood_set), skipped)
    return mood_set


def load_idiom_table(source) -> dict[str, float]:
    logger.info("Loading idioms from %s", source)
    idiom_map: dict[str, float] = {}
    for line_number, line in enumerate(_read_lines(source), start=1):
        parts = line.split(",")
        if len(parts) != 2:
            if line.strip():
                logger.debug("Ignoring idiom line %s: %s", line_number, line)
            continue
        idiom_map[parts[0].strip()] = _parse_float(parts[1], source, line_number, line)
    logger.info("Loaded %s idioms", len(idiom_map))
    return idiom_map


_STORE: LexiconStore | None = None


def get_lexicon_store() -> LexiconStore:
    global _STORE
    if _STORE is None:
        _STORE = LexiconStore.load(VADER_LEXICON_PATH, VADER_IDIOMS_PATH)
    return _STORE


def reset_lexicon_store() -> None:
    global _STORE
    _STORE = None
