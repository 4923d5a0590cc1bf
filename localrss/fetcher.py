"""HTTP fetching of feed documents and article pages."""

import requests

from .logging_config import create_execution_logger

DEFAULT_TIMEOUT = 30
USER_AGENT = "localrss/1.0 (RSS to Markdown archiver)"


class FeedFetchError(Exception):
    """Raised when a feed document cannot be downloaded."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class FeedFetcher:
    """Downloads feed XML and arbitrary HTML pages."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT, execution_id: str | None = None):
        """Initialize FeedFetcher.

        Args:
            timeout: HTTP request timeout in seconds
            execution_id: Execution ID for logging context
        """
        self.timeout = timeout
        self.logger = create_execution_logger("feed_fetcher", execution_id)
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def fetch(self, url: str) -> str:
        """Fetch a feed document.

        Args:
            url: Feed URL

        Returns:
            Response body as text

        Raises:
            FeedFetchError: On transport errors or a non-200 status
        """
        self.logger.info("Downloading feed content", feed_url=url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.error(
                f"Failed to download feed {url}: {e}", feed_url=url, error=str(e)
            )
            raise FeedFetchError(url, f"Failed to fetch feed: {e}") from e

        if response.status_code != 200:
            self.logger.error(
                f"Failed to fetch feed: HTTP {response.status_code}",
                feed_url=url,
                status_code=response.status_code,
            )
            raise FeedFetchError(
                url,
                f"Failed to fetch feed: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = response.apparent_encoding

        self.logger.info(
            "Feed downloaded successfully",
            feed_url=url,
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return response.text

    def fetch_html(self, url: str) -> str:
        """Fetch an HTML page, returning "" on any failure."""
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.error(
                f"Error fetching HTML from {url}: {e}", feed_url=url, error=str(e)
            )
            return ""

        if response.status_code != 200:
            self.logger.warning(
                f"HTML fetch returned HTTP {response.status_code}",
                feed_url=url,
                status_code=response.status_code,
            )
            return ""

        return response.text
