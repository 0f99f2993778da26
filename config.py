import os
from dotenv import load_dotenv

load_dotenv()


# ---------- Server ----------
HOST = os.getenv("RIVER_HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
DEBUG = os.getenv("RIVER_DEBUG", "false").lower() in ("1", "true", "yes")

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("RIVER_CORS_ORIGINS", "*").split(",")
    if o.strip()
]

# ---------- Interval policy (milliseconds) ----------
INTERVAL_MIN_FLOOR = int(os.getenv("RIVER_INTERVAL_MIN_FLOOR", "1000"))
INTERVAL_MAX_FLOOR = int(os.getenv("RIVER_INTERVAL_MAX_FLOOR", "1000"))
INTERVAL_CEILING = int(os.getenv("RIVER_INTERVAL_CEILING", "86400000"))

# ---------- Consumer ----------
RIVER_URL = os.getenv("RIVER_URL", "http://127.0.0.1:8000")
