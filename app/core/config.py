from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Furniture Catalog API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    DATABASE_URL: str = "sqlite:///./catalog.db"

    HOST: str = "0.0.0.0"
    PORT: int = 5000

    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_FILES: int = 10

    WHATSAPP_CONTACT_NUMBER: str = "38348222209"
    WHATSAPP_SALES_NUMBER: str = "38349514788"

    ALLOWED_ORIGIN_REGEX: str = r"^http://localhost(:\d+)?$"

    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()


def get_settings() -> Settings:
    return settings
