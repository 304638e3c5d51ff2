from __future__ import annotations

from pydantic import BaseModel, Field


class TextSentimentRequest(BaseModel):
    text: str = Field(..., min_length=1)
    workers: int | None = Field(default=None, ge=1, le=32)


class TokenInput(BaseModel):
    value: str
    pos: str = ""


class TokenSentimentRequest(BaseModel):
    tokens: list[TokenInput] = Field(default_factory=list)


class SentimentScores(BaseModel):
    neg: float
    neu: float
    pos: float
    compound: float


class TokenScore(BaseModel):
    value: str
    pos: str = ""
    score: float


class SentenceSentiment(BaseModel):
    text: str
    tokens: list[TokenScore]
    scores: SentimentScores


class DocumentSummary(BaseModel):
    sentences: int
    compound: float
    pos: float
    neu: float
    neg: float


class TextSentimentResponse(BaseModel):
    sentences: list[SentenceSentiment]
    summary: DocumentSummary
