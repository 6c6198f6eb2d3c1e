from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    UNGRADED_LETTER: str = "-"
    FALLBACK_LETTER: str = "F"

    NOT_AVAILABLE_LABEL: str = "N/A"
    DISPLAY_DECIMALS: int = 2

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
