import logging
from typing import Any, Dict, Optional

import httpx

from shopify_mcp.config import ShopifyClientConfig

logger = logging.getLogger(__name__)


class ShopifyService:
    """Thin async client for the Shopify Admin REST API"""

    def __init__(self, config: ShopifyClientConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.client = client or httpx.AsyncClient()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self.config.access_token,
        }

    def url_for(self, endpoint: str) -> str:
        return f"{self.config.base_url}/{endpoint}"

    async def get_json(self, endpoint: str) -> Dict[str, Any]:
        """GET an endpoint relative to the base URL and decode the JSON body.

        Raises httpx.HTTPStatusError on non-2xx responses and
        httpx.RequestError on transport failures.
        """
        url = self.url_for(endpoint)
        logger.info(f"Requesting: {url}")

        response = await self.client.request("GET", url, headers=self.headers)
        logger.info(f"Response status: {response.status_code}")
        response.raise_for_status()
        return response.json()

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def describe_http_error(error: httpx.HTTPStatusError) -> str:
    """Axios-style status message plus Shopify's `errors` field when present"""
    message = f"Request failed with status code {error.response.status_code}"
    try:
        body = error.response.json()
    except ValueError:
        return message
    if isinstance(body, dict) and body.get("errors"):
        message += f" ({body['errors']})"
    return message


def describe_request_error(error: httpx.RequestError) -> str:
    return str(error) or error.__class__.__name__
