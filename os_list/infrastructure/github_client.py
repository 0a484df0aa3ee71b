import aiohttp
import asyncio
import logging
from typing import Any, Dict

from os_list.domain.exceptions import FetchException, RateLimitExceededException

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com/graphql"
DEFAULT_TIMEOUT = 60


class GitHubGraphQLClient:
    """
    Client for executing queries against the GitHub GraphQL API.
    Handles authentication and turns every failure into a FetchException.
    Requests are never retried.
    """

    def __init__(self, token: str, api_url: str = DEFAULT_API_URL, timeout: float = DEFAULT_TIMEOUT):
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": "os-list",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        self.api_url = api_url
        self.timeout = aiohttp.ClientTimeout(total=timeout, connect=10)

    async def execute(self, session: aiohttp.ClientSession, query: str) -> Dict[str, Any]:
        """
        Executes a single GraphQL query.

        Returns:
            Dict[str, Any]: The parsed response body, including the ``data`` key.

        Raises:
            RateLimitExceededException: When GitHub reports the rate limit as exhausted.
            FetchException: On any other HTTP, network or GraphQL failure.
        """
        payload = {"query": query}
        logger.debug(f"POST {self.api_url}")

        try:
            async with session.post(self.api_url, json=payload, headers=self.headers, timeout=self.timeout) as response:
                if response.status in {403, 429} and response.headers.get('X-RateLimit-Remaining') == '0':
                    raise RateLimitExceededException(reset_at=response.headers.get('X-RateLimit-Reset'))

                if response.status == 401:
                    raise FetchException("GitHub rejected the token (401 Unauthorized).", status=401)

                if response.status >= 400:
                    raise FetchException(f"GitHub API request failed with status {response.status}.", status=response.status)

                data = await response.json()

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchException(f"Request to {self.api_url} failed: {e}") from e

        # GraphQL errors can come back with HTTP 200
        if data.get('errors'):
            error_msg = data['errors'][0].get('message', 'Unknown GraphQL error')
            if not data.get('data'):
                raise FetchException(f"GraphQL error: {error_msg}")
            logger.warning(f"GraphQL partial error: {error_msg}")

        return data
