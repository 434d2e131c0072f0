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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./isp_billing.db")
    DB_POOL_SIZE = data.get("DB_POOL_SIZE", 10)
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Recurring invoice generation
    RECURRING_INVOICES_ENABLED = bool(data.get("RECURRING_INVOICES_ENABLED", True))
    RECURRING_INVOICES_INTERVAL_SECONDS = data.get("RECURRING_INVOICES_INTERVAL_SECONDS", 86400)  # Daily

    # Invoice documents
    COMPANY_NAME = data.get("COMPANY_NAME", "FireISP")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "")
    CURRENCY = data.get("CURRENCY", "USD")
