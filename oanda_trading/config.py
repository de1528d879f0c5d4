# oanda_trading/config.py
import os

from dotenv import load_dotenv

load_dotenv()

API_URL = os.getenv("OANDA_API_URL", "https://api-fxpractice.oanda.com")
ACCOUNT_ID = os.getenv("OANDA_ACCOUNT_ID", "")
API_TOKEN = os.getenv("OANDA_API_TOKEN", "")
REQUEST_TIMEOUT = float(os.getenv("OANDA_REQUEST_TIMEOUT", "10"))
