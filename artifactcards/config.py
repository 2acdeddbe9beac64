from pydantic_settings import BaseSettings, SettingsConfigDict

from artifactcards.models.registry import CARD_SET_REQUEST_URL, SET_IDS


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "ArtifactCards"
    debug: bool = False

    card_set_request_url: str = CARD_SET_REQUEST_URL

    # Loaded in this order by the card aggregator
    set_ids: list[str] = list(SET_IDS)

    request_timeout: float = 30.0
    user_agent: str = "ArtifactCards/1.0"

    # Card set descriptors carry an expire_time.
    # When False, expired descriptors are still followed.
    enforce_descriptor_expiry: bool = False


settings = Settings()
