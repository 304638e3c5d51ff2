"""VADER sentence scoring.

Each sentence is scored on its own: a per-token valence pass with a
three-word lookback, then the "but" pivot, punctuation amplifiers and
normalization into a :class:`VScore`.
"""

from __future__ import annotations

import math
import string
from typing import Sequence

from .lexicon_store import B_DECR, LexiconStore
from .tokens import Token
from .vscore import VScore

# empirically derived mean sentiment intensity rating increase for ALLCAPS emphasis
C_INCR = 0.733
N_SCALAR = -0.74
ALPHA = 15.0
IDIOM_MAX_SIZE = 5

EXCLAMATION_WEIGHT = 0.292
EXCLAMATION_CAP = 4
QUESTION_WEIGHT = 0.18
QUESTION_SATURATION = 0.96

# negation words that act as polite qualifiers in front of these ("don't know")
NEGATION_QUALIFIERS = frozenset({"know", "take", "feel", "like", "want", "wanna"})
NEVER_INTENSIFIERS = ("so", "this")


def is_upper(word: str) -> bool:
    """True when the word holds no lower-case ``a``-``z`` characters."""
    return not any("a" <= ch <= "z" for ch in word)


def is_all_caps_differential(sentence: Sequence[Token]) -> bool:
    caps_count = sum(1 for token in sentence if is_upper(token.value))
    differential = len(sentence) - caps_count
    return 0 < differential < len(sentence)


def normalize(score: float) -> float:
    return score / math.sqrt(score * score + ALPHA)


def filter_punctuation(sentence: Sequence[Token]) -> list[Token]:
    return [token for token in sentence if token.value.strip()]


def strip_punctuation(word: str, store: LexiconStore) -> str:
    """Drop punctuation glued to a word ("smart," -> "smart", "so," -> "so").

    Lexicon entries such as emoticons are kept as they are, and so is any
    short remainder the tables do not know (":-D" stays intact).
    """
    if store.is_mood_word(word):
        return word
    stripped = word.strip(string.punctuation)
    if len(stripped) > 2 or (stripped and store.is_known_word(stripped)):
        return stripped
    return word


def _word_at(words: Sequence[str], index: int) -> str:
    if 0 <= index < len(words):
        return words[index].lower()
    return ""


def _word_equals(words: Sequence[str], index: int, word: str) -> bool:
    return _word_at(words, index) == word


def _is_mood_word_at(words: Sequence[str], index: int, store: LexiconStore) -> bool:
    return 0 <= index < len(words) and store.is_mood_word(words[index])


def scalar_inc_dec(word: str, valence: float, caps_differential: bool, store: LexiconStore) -> float:
    """Booster or damper contribution of ``word`` towards a word of the given valence."""
    scalar = store.booster_scalar(word)
    if scalar is None:
        return 0.0
    if valence < 0:
        scalar = -scalar
    if caps_differential and is_upper(word):
        scalar += C_INCR if valence > 0.0 else -C_INCR
    return scalar


def negated(words: Sequence[str], index: int, store: LexiconStore) -> bool:
    word = words[index].lower()
    if store.is_negation(word):
        if _word_at(words, index + 1) in NEGATION_QUALIFIERS:
            return False
        return True
    if "n't" in word:
        return True
    return word == "least" and index > 0 and _word_equals(words, index - 1, "at")


def _apply_idioms(words: Sequence[str], i: int, valence: float, store: LexiconStore) -> float:
    window: list[str] = []
    for offset in range(min(IDIOM_MAX_SIZE, len(words))):
        window.append(_word_at(words, i + offset))
        phrase = " ".join(window)
        idiom = store.idiom_valence(phrase)
        if idiom is not None:
            valence = idiom
        if phrase in store.booster_map:
            valence += B_DECR
    return valence


def token_valence(words: Sequence[str], i: int, store: LexiconStore, caps_differential: bool) -> float:
    """Valence of ``words[i]`` adjusted by the up-to-three words before it."""
    word = words[i]
    lower = word.lower()

    # "kind of" and boosters carry no sentiment of their own
    if (lower == "kind" and _word_equals(words, i + 1, "of")) or lower in store.booster_map:
        return 0.0

    base = store.valence(lower)
    if base is None:
        return 0.0

    v = base
    if caps_differential and is_upper(word):
        v += C_INCR if v > 0.0 else -C_INCR

    if i > 0 and not _is_mood_word_at(words, i - 1, store):
        v += scalar_inc_dec(words[i - 1], v, caps_differential, store)
        # "least" right before the word is handled below
        if not _word_equals(words, i - 1, "least") and negated(words, i - 1, store):
            v *= N_SCALAR

    if i > 1 and not _is_mood_word_at(words, i - 2, store):
        v += scalar_inc_dec(words[i - 2], v, caps_differential, store) * 0.95
        # "never so good" is an intensifier, not a negation
        if _word_equals(words, i - 2, "never") and any(_word_equals(words, i - 1, w) for w in NEVER_INTENSIFIERS):
            v *= 1.5
        elif negated(words, i - 2, store):
            v *= N_SCALAR

    if i > 2 and not _is_mood_word_at(words, i - 3, store):
        v += scalar_inc_dec(words[i - 3], v, caps_differential, store) * 0.9
        if _word_equals(words, i - 3, "never") and any(
            _word_equals(words, i - 2, w) or _word_equals(words, i - 1, w) for w in NEVER_INTENSIFIERS
        ):
            v *= 1.25
        elif negated(words, i - 3, store):
            v *= N_SCALAR
        v = _apply_idioms(words, i, v, store)

    if i > 0 and not _is_mood_word_at(words, i - 1, store) and _word_equals(words, i - 1, "least"):
        # "at least" and "very least" do not negate
        if i == 1 or not (_word_equals(words, i - 2, "at") or _word_equals(words, i - 2, "very")):
            v *= N_SCALAR

    return v


def _but_pivot(sentence: Sequence[Token], sentiments: list[float]) -> list[float]:
    but_index = next((j for j, token in enumerate(sentence) if token.value in ("but", "BUT")), -1)
    if but_index < 0:
        return sentiments
    pivoted: list[float] = []
    for j, value in enumerate(sentiments):
        if j < but_index:
            pivoted.append(value * 0.5)
        elif j > but_index:
            pivoted.append(value * 1.5)
        else:
            pivoted.append(value)
    return pivoted


def exclamation_amplifier(sentence: Sequence[Token]) -> float:
    count = sum(1 for token in sentence if token.value == "!")
    return min(count, EXCLAMATION_CAP) * EXCLAMATION_WEIGHT


def question_amplifier(sentence: Sequence[Token]) -> float:
    count = sum(1 for token in sentence if token.value == "?")
    if count <= 1:
        return 0.0
    if count <= 3:
        return count * QUESTION_WEIGHT
    return QUESTION_SATURATION


def _amplify(total: float, amplifier: float) -> float:
    if total > 0.0:
        return total + amplifier
    if total < 0.0:
        return total - amplifier
    return total


def _proportions(sentiments: Sequence[float], amplifier: float, compound: float) -> VScore:
    pos_sum = 0.0
    neg_sum = 0.0
    neutral_count = 0.0
    for value in sentiments:
        if value > 0.0:
            # +1 compensates for neutral words being counted as 1
            pos_sum += value + 1.0
        elif value < 0.0:
            neg_sum += value - 1.0
        else:
            neutral_count += 1

    if pos_sum > abs(neg_sum):
        pos_sum += amplifier
    elif pos_sum < abs(neg_sum):
        neg_sum -= amplifier

    total = pos_sum + abs(neg_sum) + neutral_count
    if total <= 0.0:
        return VScore(0.0, 0.0, 0.0, compound)
    return VScore(
        positive=abs(pos_sum / total),
        neutral=abs(neutral_count / total),
        negative=abs(neg_sum / total),
        compound=compound,
    )


def score_sentence(sentence: Sequence[Token], store: LexiconStore) -> VScore:
    """Score one sentence; writes each non-blank token's ``word_score``."""
    caps_differential = is_all_caps_differential(sentence)
    snt = filter_punctuation(sentence)
    words = [strip_punctuation(token.value, store) for token in snt]

    sentiments = [token_valence(words, i, store, caps_differential) for i in range(len(words))]
    for token, value in zip(snt, sentiments):
        token.word_score = value

    sentiments = _but_pivot(sentence, sentiments)

    ep_amplifier = exclamation_amplifier(sentence)
    qm_amplifier = question_amplifier(sentence)
    total = _amplify(sum(sentiments), ep_amplifier)
    total = _amplify(total, qm_amplifier)

    return _proportions(sentiments, ep_amplifier + qm_amplifier, normalize(total))
