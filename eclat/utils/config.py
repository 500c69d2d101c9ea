import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


class Settings():
    def __init__(self, **overrides):
        self.APP_NAME: str = os.getenv("APP_NAME", "Éclat Bistro API")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.PORT: int = int(os.getenv("PORT", "3000"))

        # CORS
        self.ALLOWED_ORIGINS: list = os.getenv("ALLOWED_ORIGINS", "*").split(",")

        # Storage: "memory" keeps plain lists, "sql" goes through SQLAlchemy
        self.STORE_BACKEND: str = os.getenv("STORE_BACKEND", "memory").lower()
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://")
        self.SEED_MENU: bool = _as_bool(os.getenv("SEED_MENU", "true"))

        # Pricing
        self.TAX_RATE: float = float(os.getenv("TAX_RATE", "0.10"))
        self.DELIVERY_FEE: float = float(os.getenv("DELIVERY_FEE", "5.00"))

        # Off by default: any status value may follow any other
        self.ENFORCE_STATUS_TRANSITIONS: bool = _as_bool(os.getenv("ENFORCE_STATUS_TRANSITIONS", "false"))

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)


settings = Settings()
