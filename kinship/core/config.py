# kinship/core/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# === Storage
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./kinship.db")
STORAGE_KEY = os.getenv("STORAGE_KEY", "kinship_connections_v5")

# === Summarizer
# No key means offline mode: placeholder summaries, no network calls.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY") or None
SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "gpt-4o-mini")
SUMMARY_OFFLINE_DELAY = float(os.getenv("SUMMARY_OFFLINE_DELAY", "1.5"))

# === App
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
