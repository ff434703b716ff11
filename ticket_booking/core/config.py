from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", populate_by_name=True
    )

    app_name: str = "Train Ticket Booking"
    users_path: str = Field("data/users.json", validation_alias="USERS_PATH")
    trains_path: str = Field("data/trains.json", validation_alias="TRAINS_PATH")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    # Cancellation only touches the session user unless this is switched on.
    persist_cancellations: bool = Field(False, validation_alias="PERSIST_CANCELLATIONS")


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()


settings = get_settings()
