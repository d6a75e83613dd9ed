"""
Backend configuration - settings for the Ship & Port API.
"""
import os
from dotenv import load_dotenv
from pathlib import Path

# Load .env from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

API_TITLE = "Ship & Port API"
API_VERSION = "1.0.0"

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
DEBUG = os.getenv("DEBUG", "false").lower() in ("true", "1", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

# Comma separated list of allowed origins
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]

# Number of Faker demo vessels added when the app starts (0 = empty fleet)
SEED_DEMO_VESSELS = int(os.getenv("SEED_DEMO_VESSELS", "0"))
