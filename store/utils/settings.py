# store/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

CART_TTL_SECONDS = int(os.getenv("CART_TTL_SECONDS", 30*60))
SESSION_SWEEP_INTERVAL_SECONDS = int(os.getenv("SESSION_SWEEP_INTERVAL_SECONDS", 60))
ORDER_ID_START = int(os.getenv("ORDER_ID_START", 1000))
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "store_session")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
