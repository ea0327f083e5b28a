import os

DATABASE_URL = os.getenv("DISEASEMATCH_DATABASE_URL", "sqlite:///./diseasematch.db")
API_URL = os.getenv("DISEASEMATCH_API_URL", "http://127.0.0.1:8000")
LOG_LEVEL = os.getenv("DISEASEMATCH_LOG_LEVEL", "INFO").upper()
HISTORY_LIMIT = int(os.getenv("DISEASEMATCH_HISTORY_LIMIT", "20"))
