from fastapi import APIRouter, HTTPException

from ..models.request_models import (
    SentenceSentiment,
    TextSentimentRequest,
    TextSentimentResponse,
    TokenSentimentRequest,
)
from ..services.nlp.engine import analyse_text, analyse_tokens
from ..services.nlp.errors import TokenizationError
from ..services.nlp.tokens import Token

router = APIRouter(prefix="/sentiment", tags=["sentiment"])


@router.post("", response_model=TextSentimentResponse)
async def score_text(request: TextSentimentRequest):
    try:
        return analyse_text(request.text, max_workers=request.workers)
    except TokenizationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/tokens", response_model=SentenceSentiment)
async def score_tokens(request: TokenSentimentRequest):
    tokens = [Token(item.value, item.pos) for item in request.tokens]
    return analyse_tokens(tokens)
