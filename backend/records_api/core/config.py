from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    APP_NAME: str = "Clinic Records API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1"

    DATABASE_URL: str = "sqlite:///./records.db"
    DATABASE_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # Demo records for walkthroughs; never enable against a real database
    SEED_DEMO_DATA: bool = False

    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
