"""
Configuration for the Ship & Port tracker core.
"""
import os
from dotenv import load_dotenv
from pathlib import Path

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

# Earth's radius in kilometers (haversine)
EARTH_RADIUS_KM = 6371

# Vessel id assignment: "count" (len + 1) or "max" (max id + 1)
VESSEL_ID_POLICY = os.getenv("VESSEL_ID_POLICY", "count").lower()

# Vessel speeds for demo data (in knots)
VESSEL_SPEED_MIN = float(os.getenv("VESSEL_SPEED_MIN", "12"))
VESSEL_SPEED_MAX = float(os.getenv("VESSEL_SPEED_MAX", "24"))

# Demo positions stay inside the Gulf of Kutch
DEMO_LAT_MIN = 22.30
DEMO_LAT_MAX = 23.10
DEMO_LON_MIN = 68.90
DEMO_LON_MAX = 70.40

# Ship & Port API used by the seed script
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
