# app/config.py
import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT") or 3000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PRODUCT_API_URL = os.getenv("PRODUCT_API_URL", f"http://127.0.0.1:{PORT}")
