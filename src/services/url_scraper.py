"""URL scraping service for fetching a page and extracting its title."""
import asyncio
import ipaddress
import socket
from dataclasses import dataclass
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

USER_AGENT = 'Mozilla/5.0 (compatible; MarkIt/1.0)'
DEFAULT_TIMEOUT = 3.0

LOCALHOST_NAMES = frozenset({'localhost', 'localhost.localdomain'})

# ipaddress flags that mark an address as not publicly routable
_INTERNAL_FLAGS = (
    'is_private',
    'is_loopback',
    'is_link_local',
    'is_multicast',
    'is_reserved',
    'is_unspecified',
)


class SSRFBlockedError(Exception):
    """Raised when a URL targets a private/internal network address."""

    pass


def is_private_ip(ip_str: str) -> bool:
    """True if `ip_str` is not a public address. Unparseable input counts as private."""
    try:
        ip = ipaddress.ip_address(ip_str)
    except ValueError:
        return True
    return any(getattr(ip, flag) for flag in _INTERNAL_FLAGS)


def _resolve(hostname: str) -> list[str]:
    """Return every address `hostname` resolves to."""
    try:
        addrinfo = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror as e:
        raise ValueError(f"Could not resolve hostname: {hostname}") from e
    # sockaddr[0] is the address for both IPv4 and IPv6 entries
    return [sockaddr[0] for *_, sockaddr in addrinfo]


def validate_url_not_private(url: str) -> None:
    """
    Refuse a URL whose host is localhost or resolves to an internal address.

    The hostname is resolved, so a public-looking name pointing at an
    internal IP is refused too. Blocking; run it off the event loop.

    Raises:
        SSRFBlockedError: If the URL targets a private network.
        ValueError: If the URL has no hostname or the hostname does not resolve.
    """
    hostname = urlparse(url).hostname
    if not hostname:
        raise ValueError(f"Invalid URL (no hostname): {url}")
    if hostname.lower() in LOCALHOST_NAMES:
        raise SSRFBlockedError(f"Blocked request to localhost: {url}")

    for ip_str in _resolve(hostname):
        if is_private_ip(ip_str):
            raise SSRFBlockedError(
                f"Blocked request to private/internal address: {url} resolves to {ip_str}",
            )


@dataclass
class FetchResult:
    """Result of fetching a URL (raw HTML before extraction)."""

    html: str | None
    final_url: str
    status_code: int | None
    content_type: str | None
    error: str | None

    @property
    def is_html(self) -> bool:
        """Check if the content type indicates HTML."""
        return bool(self.content_type and 'text/html' in self.content_type.lower())


@dataclass
class TitleResult:
    """
    Outcome of looking up a page title.

    Exactly one of `title` and `error` is set. A failed lookup is an ordinary
    value, not an exception; callers pick their own fallback.
    """

    title: str | None
    error: str | None = None

    @property
    def found(self) -> bool:
        """True when a non-empty title was extracted."""
        return bool(self.title)


async def _blocked_reason(url: str) -> str | None:
    """Run the SSRF check in a worker thread. Returns why `url` is refused, or None."""
    try:
        await asyncio.to_thread(validate_url_not_private, url)
    except (SSRFBlockedError, ValueError) as e:
        return str(e)
    return None


async def fetch_url(  # noqa: ASYNC109
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    block_private: bool = True,
) -> FetchResult:
    """
    Fetch HTML from a URL.

    Best-effort fetch that returns error info on failure rather than raising.
    Follows redirects and captures the final URL. `timeout` is a deadline for
    the whole call: host lookups, connecting, redirects and reading the body.

    Args:
        url:
            The URL to fetch.
        timeout:
            Overall deadline in seconds.
        block_private:
            Refuse URLs (before and after redirects) that target
            private/internal networks.

    Returns:
        FetchResult containing the HTML or error info.
    """
    try:
        async with asyncio.timeout(timeout):
            return await _fetch(url, timeout, block_private)
    except TimeoutError:
        return FetchResult(
            html=None,
            final_url=url,
            status_code=None,
            content_type=None,
            error="Request timed out",
        )


async def _fetch(url: str, timeout: float, block_private: bool) -> FetchResult:  # noqa: ASYNC109
    """Body of fetch_url, run under its deadline."""
    if block_private:
        blocked = await _blocked_reason(url)
        if blocked:
            return FetchResult(
                html=None,
                final_url=url,
                status_code=None,
                content_type=None,
                error=blocked,
            )

    try:
        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=timeout,
            headers={'User-Agent': USER_AGENT},
            http2=True,
        ) as client:
            response = await client.get(url)
    except httpx.TimeoutException:
        return FetchResult(
            html=None,
            final_url=url,
            status_code=None,
            content_type=None,
            error="Request timed out",
        )
    except httpx.RequestError as e:
        return FetchResult(
            html=None,
            final_url=url,
            status_code=None,
            content_type=None,
            error=f"Request failed: {e}",
        )

    final_url = str(response.url)
    content_type = response.headers.get('content-type', '')

    if block_private and final_url != url:
        blocked = await _blocked_reason(final_url)
        if blocked:
            return FetchResult(
                html=None,
                final_url=final_url,
                status_code=response.status_code,
                content_type=None,
                error=f"Redirect blocked: {blocked}",
            )

    if not response.is_success:
        return FetchResult(
            html=None,
            final_url=final_url,
            status_code=response.status_code,
            content_type=content_type,
            error=f"HTTP {response.status_code}",
        )

    if 'text/html' not in content_type.lower():
        return FetchResult(
            html=None,
            final_url=final_url,
            status_code=response.status_code,
            content_type=content_type,
            error=f"Unsupported content type: {content_type}",
        )

    return FetchResult(
        html=response.text,
        final_url=final_url,
        status_code=response.status_code,
        content_type=content_type,
        error=None,
    )


def extract_title(html: str) -> str | None:
    """
    Extract the text of the document <title> element.

    Only the <title> inside <head> counts; <title> elements in the body (e.g.
    inline SVG) are ignored.

    Pure function with no I/O. Uses BeautifulSoup for parsing.

    Args:
        html:
            Raw HTML string to parse.

    Returns:
        The title with surrounding whitespace trimmed, or None if the page has
        no title or it is blank.
    """
    soup = BeautifulSoup(html, 'lxml')
    title_tag = soup.head.find('title') if soup.head else None
    if title_tag is None:
        return None
    title = title_tag.get_text().strip()
    return title or None


async def scrape_title(  # noqa: ASYNC109
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    block_private: bool = True,
) -> TitleResult:
    """
    Fetch a URL and extract its page title.

    This is the entry point used during bookmark creation. It never raises:
    fetch errors, non-HTML responses, parse errors and blank titles all come
    back as a TitleResult with `error` set.

    Args:
        url: The URL to scrape.
        timeout: Request timeout in seconds.
        block_private: Refuse URLs targeting private/internal networks.

    Returns:
        TitleResult with the title, or the reason none was found.
    """
    result = await fetch_url(url, timeout=timeout, block_private=block_private)
    if result.error:
        return TitleResult(title=None, error=result.error)

    try:
        title = extract_title(result.html)
    except Exception as e:  # parser failures on malformed markup
        return TitleResult(title=None, error=f"Could not parse HTML: {e}")

    if not title:
        return TitleResult(title=None, error="Page has no title")
    return TitleResult(title=title)
