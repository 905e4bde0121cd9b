"""
Stylesheet fetcher for remote inputs.

Uses aiohttp for concurrent asynchronous requests.
"""

import asyncio
from dataclasses import dataclass
from typing import List, Optional

import aiohttp
from aiohttp import ClientTimeout, ClientError

from ..utils.constants import DEFAULT_CONCURRENCY, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..utils.log import get_logger


class FetchError(Exception):
    """Raised when a remote resource cannot be fetched."""


@dataclass
class FetchedResource:
    """A downloaded text resource."""
    url: str
    text: str
    content_type: str = ""

    @property
    def is_html(self) -> bool:
        return 'html' in self.content_type.lower()


class StylesheetFetcher:
    """
    Fetches stylesheets and HTML pages over HTTP.

    Limits the number of concurrent requests with a semaphore.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        concurrency: int = DEFAULT_CONCURRENCY,
        user_agent: Optional[str] = None
    ):
        """
        Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds
            concurrency: Maximum concurrent requests
            user_agent: User agent string for requests
        """
        self.timeout = ClientTimeout(total=timeout)
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.logger = get_logger("fetcher")
        self._semaphore = asyncio.Semaphore(concurrency)

    def session(self) -> aiohttp.ClientSession:
        """Create a client session with the configured timeout and user agent."""
        return aiohttp.ClientSession(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent}
        )

    async def fetch(self, session: aiohttp.ClientSession, url: str) -> FetchedResource:
        """
        Fetch a single resource.

        Args:
            session: aiohttp session
            url: URL to fetch

        Returns:
            FetchedResource with the decoded body

        Raises:
            FetchError: On HTTP errors, timeouts and connection failures
        """
        async with self._semaphore:
            try:
                async with session.get(url, allow_redirects=True) as response:
                    if response.status != 200:
                        raise FetchError(f"HTTP {response.status} for {url}")
                    text = await response.text(errors='replace')
                    self.logger.debug(f"Fetched {url} ({len(text)} chars)")
                    return FetchedResource(
                        url=str(response.url),
                        text=text,
                        content_type=response.headers.get('Content-Type', '')
                    )
            except ClientError as e:
                raise FetchError(f"Request failed for {url}: {e}") from e
            except asyncio.TimeoutError as e:
                raise FetchError(f"Timeout fetching {url}") from e

    async def fetch_all(
        self,
        session: aiohttp.ClientSession,
        urls: List[str]
    ) -> List[Optional[FetchedResource]]:
        """
        Fetch several resources concurrently.

        Failures are logged and reported as None so one broken link does
        not stop the others.

        Returns:
            Fetched resources in the order of ``urls``
        """
        results = await asyncio.gather(
            *(self.fetch(session, url) for url in urls),
            return_exceptions=True
        )

        fetched = []
        for url, result in zip(urls, results):
            if isinstance(result, FetchError):
                self.logger.warning(f"Skipping stylesheet: {result}")
                fetched.append(None)
            elif isinstance(result, BaseException):
                raise result
            else:
                fetched.append(result)
        return fetched
