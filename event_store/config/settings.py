from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EVENT_STORE_")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOGGER_NAME: str = "event_store"
    LOG_MUTATIONS: bool = True  # insert / remove_all / discard entries


settings = Settings()
