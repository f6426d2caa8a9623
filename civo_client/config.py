from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from civo_client import logs  # noqa


class Config(BaseSettings):
    model_config = SettingsConfigDict(frozen=True)

    CIVO_API_KEY: str
    CIVO_REGION: str = 'LON1'
    CIVO_API_URL: str = 'https://api.civo.com'
    CIVO_TIMEOUT: float = 60

    @field_validator('CIVO_API_URL')
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip('/')
