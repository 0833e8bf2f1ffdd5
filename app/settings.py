# app/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CATALOG_BASE_URL = os.getenv("CATALOG_BASE_URL", f"http://127.0.0.1:{PORT}")
