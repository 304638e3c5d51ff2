import os

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(__file__)
load_dotenv(os.path.join(BASE_DIR, ".env"))

# unset: valence table from nltk_data "vader_lexicon", idioms bundled under services/nlp/data
VADER_LEXICON_PATH = os.getenv("VADER_LEXICON_PATH") or None
VADER_IDIOMS_PATH = os.getenv("VADER_IDIOMS_PATH") or None

VADER_SCORER_WORKERS = max(1, int(os.getenv("VADER_SCORER_WORKERS", "1")))
VADER_LOG_LEVEL = os.getenv("VADER_LOG_LEVEL", "WARNING").upper()

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",")]
