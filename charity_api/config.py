import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from dotenv import load_dotenv

# Force-load .env (Windows-safe, reload-safe)
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)

DEFAULT_BANK_DETAILS = (
    "Bank details: Commercial Bank of Ethiopia, Account: 1000123456789, "
    "Swift: CBETETAA. Please send receipt to kuraagalaan2024@gmail.com"
)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    database_url: str
    port: int = 5000

    org_name: str = "Kuraa Galaan Charity"
    notify_email: str = "kuraagalaan2024@gmail.com"
    bank_details: str = DEFAULT_BANK_DETAILS

    email_host: str = "smtp.gmail.com"
    email_port: int = 587
    email_use_tls: bool = True
    email_user: str | None = None
    email_pass: str | None = None

    gateway_base_url: str = "https://api.chapa.co/v1"
    gateway_secret_key: str | None = None
    gateway_currency: str = "ETB"
    gateway_charge_type: str = "telebirr"

    paypal_client_id: str | None = None
    paypal_client_secret: str | None = None
    paypal_mode: str = "sandbox"
    paypal_currency: str = "USD"

    provider_timeout_seconds: float = 30.0

    log_level: str = "info"
    log_format: str = "console"

    @classmethod
    def from_env(cls) -> "Settings":
        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            raise RuntimeError("DATABASE_URL is not set. Check your .env file.")

        return cls(
            database_url=database_url,
            port=int(os.getenv("PORT", 5000)),
            org_name=os.getenv("ORG_NAME", cls.org_name),
            notify_email=os.getenv("NOTIFY_EMAIL", cls.notify_email),
            bank_details=os.getenv("BANK_DETAILS", DEFAULT_BANK_DETAILS),
            email_host=os.getenv("EMAIL_HOST", cls.email_host),
            email_port=int(os.getenv("EMAIL_PORT", 587)),
            email_use_tls=_flag("EMAIL_USE_TLS", "true"),
            email_user=os.getenv("EMAIL_USER"),
            email_pass=os.getenv("EMAIL_PASS"),
            gateway_base_url=os.getenv("GATEWAY_BASE_URL", cls.gateway_base_url),
            gateway_secret_key=os.getenv("GATEWAY_SECRET_KEY"),
            gateway_currency=os.getenv("GATEWAY_CURRENCY", cls.gateway_currency),
            gateway_charge_type=os.getenv("GATEWAY_CHARGE_TYPE", cls.gateway_charge_type),
            paypal_client_id=os.getenv("PAYPAL_CLIENT_ID"),
            paypal_client_secret=os.getenv("PAYPAL_CLIENT_SECRET"),
            paypal_mode=os.getenv("PAYPAL_MODE", cls.paypal_mode).lower(),
            paypal_currency=os.getenv("PAYPAL_CURRENCY", cls.paypal_currency),
            provider_timeout_seconds=float(os.getenv("PROVIDER_TIMEOUT_SECONDS", 30)),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).lower(),
            log_format=os.getenv("LOG_FORMAT", cls.log_format).lower(),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
