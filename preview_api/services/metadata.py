import asyncio
import logging
from dataclasses import dataclass

import httpx

from preview_api.config import BROWSER_USER_AGENT, Settings, get_settings
from preview_api.schemas.metadata import PageMetadata
from preview_api.services.errors import (
    BodyReadError,
    HTTPStatusError,
    MetadataFetchError,
    NetworkError,
)
from preview_api.services.locator import (
    DEFAULT_FAVICON_RELS,
    find_favicon_href,
    find_meta_content,
    find_title,
)

logger = logging.getLogger(__name__)

FALLBACK_FAVICON = "/favicon.ico"


@dataclass(frozen=True)
class FetchPolicy:
    """Limits and headers applied to every page fetch."""

    timeout: float = 5.0
    max_redirects: int = 5
    max_body_chars: int = 20_000
    user_agent: str = BROWSER_USER_AGENT
    accept: str = "text/html"
    favicon_rels: tuple[str, ...] = DEFAULT_FAVICON_RELS

    @classmethod
    def from_settings(cls, settings: Settings) -> "FetchPolicy":
        return cls(
            timeout=settings.fetch_timeout,
            max_redirects=settings.max_redirects,
            max_body_chars=settings.max_body_chars,
            user_agent=settings.user_agent,
            accept=settings.accept,
            favicon_rels=tuple(settings.favicon_rels),
        )


def page_origin(url: str) -> str:
    """Return scheme and host of ``url``: everything before the first path slash."""
    marker = url.find("://")
    if marker == -1:
        return url
    slash = url.find("/", marker + 3)
    if slash == -1:
        return url
    return url[:slash]


def absolutize(href: str, page_url: str) -> str:
    """Turn an href found on ``page_url`` into an absolute URL."""
    if href.startswith("http"):
        return href
    if href.startswith("//"):
        return f"https:{href}"
    origin = page_origin(page_url).removesuffix("/")
    return f"{origin}/{href.removeprefix('/')}"


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class MetadataService:
    """Fetch a page and build its link preview."""

    def __init__(
        self,
        policy: FetchPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.policy = policy or FetchPolicy()
        self._transport = transport

    async def extract(self, url: str) -> PageMetadata:
        try:
            html = await self.fetch(url)
        except MetadataFetchError as exc:
            logger.warning("Could not fetch %s: %s", url, exc.message)
            raise
        metadata = self.extract_from_html(html, url)
        logger.debug("Extracted preview for %s: %s", url, metadata)
        return metadata

    async def fetch(self, url: str) -> str:
        """Return the leading ``max_body_chars`` characters of the page at ``url``.

        The timeout covers the whole exchange: connecting, redirects and
        reading the body.
        """
        try:
            return await asyncio.wait_for(self._fetch(url), timeout=self.policy.timeout)
        except asyncio.TimeoutError as exc:
            raise NetworkError(
                f"Zeitüberschreitung nach {self.policy.timeout:g} Sekunden"
            ) from exc

    async def _fetch(self, url: str) -> str:
        async with self._client() as client:
            try:
                request = client.build_request("GET", url)
                response = await client.send(request, stream=True)
            except (httpx.RequestError, httpx.InvalidURL) as exc:
                raise NetworkError(_describe(exc)) from exc

            try:
                if not response.is_success:
                    raise HTTPStatusError(response.status_code)
                try:
                    return await self._read_text(response)
                except (httpx.RequestError, httpx.StreamError) as exc:
                    raise BodyReadError(_describe(exc)) from exc
            finally:
                await response.aclose()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.policy.timeout,
            follow_redirects=True,
            max_redirects=self.policy.max_redirects,
            headers={
                "User-Agent": self.policy.user_agent,
                "Accept": self.policy.accept,
            },
            transport=self._transport,
        )

    async def _read_text(self, response: httpx.Response) -> str:
        limit = self.policy.max_body_chars
        chunks: list[str] = []
        size = 0
        async for chunk in response.aiter_text():
            chunks.append(chunk)
            size += len(chunk)
            if size >= limit:
                break
        return "".join(chunks)[:limit]

    def extract_from_html(self, html: str, url: str) -> PageMetadata:
        """Build the preview for ``url`` from its already fetched HTML."""
        html = html[: self.policy.max_body_chars]

        image = find_meta_content(html, "og:image")
        favicon = find_favicon_href(html, self.policy.favicon_rels) or FALLBACK_FAVICON

        return PageMetadata(
            url=url,
            title=find_meta_content(html, "og:title") or find_title(html),
            description=find_meta_content(html, "og:description"),
            image=absolutize(image, url) if image else None,
            site_name=find_meta_content(html, "og:site_name"),
            favicon=absolutize(favicon, url),
        )


async def fetch_og_metadata(
    url: str, transport: httpx.AsyncBaseTransport | None = None
) -> PageMetadata:
    """Fetch ``url`` under the configured policy and return its preview."""
    policy = FetchPolicy.from_settings(get_settings())
    return await MetadataService(policy, transport=transport).extract(url)
