# hotel_api/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    # Single shared admin secret; the login token is this value itself
    ADMIN_PASSWORD: str = "Password1"

    DATA_DIR: str = "data"
    BOOKINGS_FILE: str = "bookings.json"

    CORS_ORIGINS: str = "*"  # comma-separated
    ENABLE_PUBLIC_BOOKING_LIST: bool = True  # dev/demo only, disable in production
    STATIC_DIR: Optional[str] = None

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    HOST: str = "0.0.0.0"
    PORT: int = 5000

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()

def get_settings() -> Settings:
    return settings
