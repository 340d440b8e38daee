import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    api_url: str = "https://www.wikidata.org/w/api.php"
    user_agent: str = "WikidataLite/1.0 (python-requests; wikidata-lite client)"
    request_timeout: float = 30.0
    language: str = "en"
    suggestion_delay: float = 0.15
    suggestion_limit: int = 10
    search_page_size: int = 50
    label_batch_size: int = Field(default=50, ge=1, le=50)
    label_workers: int = 4
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="WIKIDATA_LITE_", env_file=".env", extra="ignore")

    def to_client_config(self):
        from wikidata_lite.api.models import ClientConfig
        return ClientConfig(
            api_url=self.api_url,
            user_agent=self.user_agent,
            timeout=self.request_timeout,
        )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging the same way for scripts and test sessions"""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )


# noinspection PyArgumentList
settings = Settings()

logger.debug("=== Settings Debug ===")
logger.debug(f"API URL: {settings.api_url}")
logger.debug(f"Language: {settings.language}")
logger.debug(f"Request timeout: {settings.request_timeout}")
logger.debug(f"Suggestion delay: {settings.suggestion_delay}")
logger.debug(f"Search page size: {settings.search_page_size}")
logger.debug(f"Label batch size: {settings.label_batch_size}")
logger.debug("=== End Settings Debug ===")
