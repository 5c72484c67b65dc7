import logging
import sys
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ShopifyClientConfig(BaseModel):
    """Connection values shared read-only by every tool handler"""

    model_config = ConfigDict(frozen=True)

    base_url: str
    access_token: str


class Settings(BaseSettings):
    # Application Settings
    APP_NAME: str = "shopify-mcp-server"
    APP_VERSION: str = "1.0.0"

    # Shopify Configuration
    SHOPIFY_STORE_URL: str = ""
    SHOPIFY_API_VERSION: str = "2024-04"
    SHOPIFY_ACCESS_TOKEN: str = ""

    # Logging Configuration
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @property
    def base_url(self) -> str:
        return f"https://{self.SHOPIFY_STORE_URL}/admin/api/{self.SHOPIFY_API_VERSION}"

    @property
    def masked_access_token(self) -> str:
        return f"{self.SHOPIFY_ACCESS_TOKEN[:5]}..."

    def client_config(self) -> ShopifyClientConfig:
        return ShopifyClientConfig(
            base_url=self.base_url,
            access_token=self.SHOPIFY_ACCESS_TOKEN,
        )


@lru_cache()
def get_settings() -> Settings:
    """Settings are resolved once per process"""
    return Settings()


def configure_logging(level: str = "INFO"):
    """Send all diagnostics to stderr so stdout stays free for MCP traffic"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
