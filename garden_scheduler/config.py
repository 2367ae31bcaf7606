import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./garden_scheduler.db")

# "Today" for the suggestion engine is evaluated in the business time zone
BUSINESS_TIMEZONE = os.getenv("BUSINESS_TIMEZONE", "Asia/Jerusalem")

# Visits booked from a suggestion
DEFAULT_VISIT_START_TIME = os.getenv("DEFAULT_VISIT_START_TIME", "08:00")
DEFAULT_VISIT_DURATION_MINUTES = int(os.getenv("DEFAULT_VISIT_DURATION_MINUTES", "60"))

# Booking assistant (Gemini REST API)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_API_URL = os.getenv(
    "GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta/models"
)
ASSISTANT_TIMEOUT_SECONDS = float(os.getenv("ASSISTANT_TIMEOUT_SECONDS", "20"))

# Frontend base URL, used as the default CORS origin
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", FRONTEND_URL).split(",")
    if origin.strip()
]
