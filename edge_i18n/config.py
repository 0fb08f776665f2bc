from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "edge-i18n"
    app_version: str = "1.0.0"
    debug: bool = False

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = True
    log_file: str | None = None

    # i18n settings
    i18n_config_path: str | None = "i18n.config.json"
    base_path: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
