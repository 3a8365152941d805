from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Customer Service"
    APP_VERSION: str = "1.0.0"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = Field(default=5001, validation_alias="PORT")
    DEBUG: bool = False
    
    # Database (in-memory SQLite unless overridden)
    DATABASE_URL: str = "sqlite://"
    SEED_DATA: bool = True
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "standard"  # standard, json
    
    class Config:
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True

@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
