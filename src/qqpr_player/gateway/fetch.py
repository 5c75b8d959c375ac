"""
Animation Fetcher
=================

Downloads animation scripts over HTTP(S).

Design Rules:
    - Redirects are followed up to a fixed limit
    - Anything but a final 200 is an error
    - Transport errors are wrapped in FetchError with the URL attached
"""

import logging
from typing import Optional

import requests


logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when an animation script cannot be downloaded."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class AnimationFetcher:
    """
    HTTP client for the remote animation source.

    Attributes:
        url_template: URL with an `{id}` placeholder
        timeout: Seconds per request
        max_redirects: Redirects followed before giving up

    Example:
        fetcher = AnimationFetcher()
        text = fetcher.fetch("1044")
    """

    def __init__(
        self,
        url_template: str = "https://www.qqpr.com/ascii/js/{id}.js",
        timeout: float = 15.0,
        max_redirects: int = 5,
        user_agent: str = "play-qqpr",
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url_template = url_template
        self.timeout = timeout
        self.max_redirects = max_redirects

        self.session = session if session is not None else requests.Session()
        self.session.max_redirects = max_redirects
        self.session.headers["User-Agent"] = user_agent

    def url_for(self, animation_id: str) -> str:
        return self.url_template.format(id=animation_id)

    def fetch(self, animation_id: str) -> str:
        """
        Download the script for an animation id.

        Args:
            animation_id: Numeric id

        Returns:
            Script text decoded as UTF-8

        Raises:
            FetchError: On transport errors, too many redirects or non-200 status
        """
        url = self.url_for(animation_id)
        logger.info(f"Downloading animation {animation_id} from {url}")

        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.TooManyRedirects as e:
            raise FetchError(
                f"Too many redirects (> {self.max_redirects}) for {url}", url
            ) from e
        except requests.RequestException as e:
            raise FetchError(f"Request failed for {url}: {e}", url) from e

        if response.status_code != 200:
            raise FetchError(
                f"HTTP {response.status_code} for {url}",
                url,
                status_code=response.status_code,
            )

        if response.url and response.url != url:
            logger.debug(f"Redirected to {response.url}")

        return response.content.decode("utf-8", errors="replace")

    def close(self) -> None:
        self.session.close()
