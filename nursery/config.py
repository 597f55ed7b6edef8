# nursery/config.py
import os

# Dışarıdan erişilen HTTPS adresi; PROD'da env'den gelmeli
BASE_URL = os.getenv("BASE_URL", "http://localhost:8000")

STORE_NAME = os.getenv("STORE_NAME", "Paradise Nursery")

# Tek para birimi; vergi / kur hesabı yok
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PORT = int(os.getenv("PORT", "8000"))
