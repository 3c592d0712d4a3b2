from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./todo.db")
    DEFAULT_PAGE_SIZE = int(getenv("DEFAULT_PAGE_SIZE", "10"))
    MAX_PAGE_SIZE = int(getenv("MAX_PAGE_SIZE", "100"))  # au-dela -> 400
    DEFAULT_CATEGORY_COLOR = getenv("DEFAULT_CATEGORY_COLOR", "#1890ff")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = [o.strip() for o in getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

settings = Settings()
