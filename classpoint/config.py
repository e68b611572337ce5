from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "ClassPoint"
    DATA_FILE: str = "classpoint.json"
    DEFAULT_CLASS_NAME: str = "My class"
    NEW_CLASS_NAME: str = "New class"
    LOG_LEVEL: str = "INFO"

settings = Settings()
