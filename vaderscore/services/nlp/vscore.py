from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal
from typing import NamedTuple


def _format_decimal(value: float, places: int) -> str:
    # Matches "#.###"-style patterns: half-even rounding, no trailing zeros.
    quantum = Decimal(1).scaleb(-places)
    text = format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_EVEN), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class VScore(NamedTuple):
    positive: float = 0.0
    neutral: float = 0.0
    negative: float = 0.0
    compound: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {
            "neg": round(self.negative, 3),
            "neu": round(self.neutral, 3),
            "pos": round(self.positive, 3),
            "compound": round(self.compound, 4),
        }

    def __str__(self) -> str:
        return (
            f"{{'neg': {_format_decimal(self.negative, 3)}, "
            f"'neu': {_format_decimal(self.neutral, 3)}, "
            f"'pos': {_format_decimal(self.positive, 3)}, "
            f"'compound': {_format_decimal(self.compound, 4)}}}"
        )
