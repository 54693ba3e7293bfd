# robots_scout/fetcher.py
"""
Fetcher module: downloads robots.txt over HTTP with retry/backoff and timeout,
then hands the body to the parser.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout

from robots_scout.config import FetchConfig
from robots_scout.document import RobotsDocument
from robots_scout.logger import get_logger
from robots_scout.parser.robots_parser import parse
from robots_scout.utils import SiteUrl, UrlLike

logger = get_logger("fetcher")


class RobotsFetchError(RuntimeError):
    """robots.txt could not be retrieved or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class RobotsFetcher:
    """Fetches and parses ``/robots.txt`` of a site."""

    _RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)

    def __init__(self, session: ClientSession, config: FetchConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, site: UrlLike) -> RobotsDocument:
        """
        Download robots.txt for *site* and parse it.

        The document host is the final URL after redirects, with its path reset to ``/``.
        Raises RobotsFetchError on any failure.
        """
        site_url = site if isinstance(site, SiteUrl) else SiteUrl.parse_absolute(site)
        robots_url = str(site_url.robots_url())
        headers = {"User-Agent": self.config.user_agent}

        attempts = 0
        while True:
            try:
                async with self.session.get(robots_url, headers=headers, raise_for_status=False) as resp:
                    if resp.status in self._RETRY_STATUS:
                        raise ClientError(f"Retryable status {resp.status}")
                    if not 200 <= resp.status < 300:
                        logger.warning("robots.txt %s -> HTTP %s", robots_url, resp.status)
                        raise RobotsFetchError(robots_url, f"HTTP {resp.status}")
                    text = await resp.text()
                    final_url = str(resp.url)
                break
            except asyncio.TimeoutError as exc:
                # no retry on timeout
                logger.warning("Timed out fetching %s", robots_url)
                raise RobotsFetchError(robots_url, "timed out") from exc
            except UnicodeDecodeError as exc:
                logger.warning("Undecodable body at %s: %s", robots_url, exc)
                raise RobotsFetchError(robots_url, "body could not be decoded") from exc
            except ClientError as exc:
                attempts += 1
                if attempts > self.config.retry_times:
                    logger.warning("Failed %s: %s", robots_url, exc)
                    raise RobotsFetchError(robots_url, str(exc)) from exc
                backoff = min(2**attempts, self.config.backoff_cap)
                logger.debug(
                    "Retry %d/%d for %s after %.2f s", attempts, self.config.retry_times, robots_url, backoff
                )
                await asyncio.sleep(backoff)

        host = SiteUrl.parse(final_url).with_path("/")
        document = parse(host, text)
        logger.info(
            "Loaded %s: %d sections, %d anomalies", robots_url, len(document.agents), len(document.get_all_anomalies())
        )
        return document


async def fetch_robots(site: UrlLike, config: Optional[FetchConfig] = None) -> RobotsDocument:
    """Open a short-lived session and fetch robots.txt for *site*."""
    config = config or FetchConfig()
    timeout = ClientTimeout(total=config.timeout)
    async with ClientSession(timeout=timeout) as session:
        return await RobotsFetcher(session, config).fetch(site)


__all__ = ["RobotsFetchError", "RobotsFetcher", "fetch_robots"]
