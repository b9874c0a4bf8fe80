"""Application configuration via Pydantic Settings.

NOTE: We explicitly map the .env variable names (WEBFLOW_API_TOKEN,
WEBFLOW_COLLECTION_ID, LIKE_COUNT_FIELD, etc.) to avoid silent misconfiguration.
Settings are frozen: they are built once at startup and passed into the
adapter and use cases, never mutated by request handling.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from app.domain.value_objects.enums import CoercionMode


class Settings(BaseSettings):
    # Webflow CMS
    webflow_api_token: str = Field(default="", validation_alias="WEBFLOW_API_TOKEN")
    webflow_collection_id: str = Field(default="", validation_alias="WEBFLOW_COLLECTION_ID")
    webflow_api_url: str = Field(
        default="https://api.webflow.com/v2",
        validation_alias="WEBFLOW_API_URL",
    )
    http_timeout: float = Field(default=10.0, validation_alias="WEBFLOW_HTTP_TIMEOUT")

    # Like counter
    like_count_field: str = Field(default="like-count", validation_alias="LIKE_COUNT_FIELD")
    coercion_mode: CoercionMode = Field(
        default=CoercionMode.LENIENT,
        validation_alias="LIKE_COUNT_COERCION",
    )

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "frozen": True}

    def is_store_configured(self) -> bool:
        return bool(self.webflow_api_token and self.webflow_collection_id)


settings = Settings()
