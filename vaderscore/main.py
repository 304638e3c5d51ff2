import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.sentiment_routes import router as sentiment_router
from .config import CORS_ORIGINS
from .services.nlp import engine

app = FastAPI(title="VADER Sentiment API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(sentiment_router)


@app.on_event("startup")
async def startup_lexicon():
    # A missing lexicon, idiom table or tagger model must stop the service from booting.
    engine.initialize()
    logger.info("Sentiment engine ready")


@app.get("/health")
async def health_check():
    return {"status": "ok"}
