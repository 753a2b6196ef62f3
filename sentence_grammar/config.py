from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):  # type: ignore
    debug: bool = False

    app_title: str = 'Sentence Grammar API'
    api_prefix: str = '/api/v1'

    max_sentence_length: int = 2000

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    @field_validator('max_sentence_length')
    @classmethod
    def check_max_sentence_length(cls, value: int) -> int:
        if value <= 0:
            raise ValueError('MAX_SENTENCE_LENGTH must be positive')
        return value


settings = Settings()
