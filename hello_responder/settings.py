from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    GREETING: str = "Hello World from Python!"

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

settings = Settings()
