import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))

    # Billing
    CURRENCY_SYMBOL = data.get("CURRENCY_SYMBOL", "৳")
    DEFAULT_VALIDITY_DAYS = data.get("DEFAULT_VALIDITY_DAYS", 30)  # Days per recharge month
    MIN_PAYMENT_AMOUNT = data.get("MIN_PAYMENT_AMOUNT", 10)
    COMPANY_NAME = data.get("COMPANY_NAME", "ISP Back Office")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "")

    # Customer wallet debit RPC (None = debit in the local database)
    WALLET_DEBIT_URL = data.get("WALLET_DEBIT_URL", None)
    WALLET_DEBIT_TIMEOUT = data.get("WALLET_DEBIT_TIMEOUT", 10.0)

    # Balance Reconciliation
    RECONCILIATION_ENABLED = bool(data.get("RECONCILIATION_ENABLED", True))
    RECONCILIATION_INTERVAL_SECONDS = data.get("RECONCILIATION_INTERVAL_SECONDS", 86400)  # Daily
    RECONCILIATION_NOTIFICATION_WEBHOOK = data.get("RECONCILIATION_NOTIFICATION_WEBHOOK", None)
