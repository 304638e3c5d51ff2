from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass
class Token:
    """A single word or punctuation mark with its part-of-speech tag.

    ``word_score`` is written by the scorer and holds the token's adjusted
    valence for the last sentence it was scored in.
    """

    value: str
    pos_tag: str = ""
    word_score: float = 0.0

    def __str__(self) -> str:
        return f"{self.value}:{self.pos_tag}"


def make_tokens(words: Iterable[str], tags: Iterable[str] | None = None) -> list[Token]:
    word_list = list(words)
    tag_list = list(tags) if tags is not None else [""] * len(word_list)
    return [Token(word, tag) for word, tag in zip(word_list, tag_list)]


def tokens_to_string(tokens: Iterable[Token]) -> str:
    return "".join(f"{token.value} " for token in tokens)
