"""HTTP client for fetching recipe pages."""

from dataclasses import dataclass
from typing import Protocol

import httpx

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; DinnerPlanner/1.0)"


class RecipePageClient(Protocol):
    """Interface for downloading recipe page HTML."""

    async def fetch_html(self, url: str) -> str:
        """Return the HTML body of a page."""


@dataclass
class HttpxRecipePageClient(RecipePageClient):
    """HTTPX-backed recipe page client."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, user_agent: str = DEFAULT_USER_AGENT, timeout_seconds: float = 15
    ) -> "HttpxRecipePageClient":
        """Create a client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(
                headers={"User-Agent": user_agent}, follow_redirects=True
            ),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_html(self, url: str) -> str:
        """Fetch a page and return its text."""
        response = await self.http_client.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
