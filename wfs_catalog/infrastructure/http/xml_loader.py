"""
HTTP loader for GetCapabilities XML documents.

Uses httpx.AsyncClient for non-blocking requests with configurable
timeouts. Nothing is retried here; failures are classified and
propagated to the caller:
  - PermanentTransportError: 4xx, DNS not found, redirect loops
  - TransientTransportError: 5xx, timeouts, connection resets
"""

import httpx

from wfs_catalog.core.config import settings
from wfs_catalog.core.exceptions import (
    PermanentTransportError,
    TransientTransportError,
    TransportError,
)
from wfs_catalog.core.logging import get_logger

logger = get_logger(__name__)

# HTTP status codes that indicate permanent failure
PERMANENT_STATUS_CODES = {400, 401, 403, 404, 405, 406, 410, 414, 451}

# HTTP status codes that indicate transient failure
TRANSIENT_STATUS_CODES = {408, 429, 500, 502, 503, 504}

DNS_FAILURE_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "no address associated",
    "getaddrinfo failed",
)


async def load_xml(url: str) -> bytes:
    """
    Retrieve the XML text of a GetCapabilities document.

    Args:
        url: The full GetCapabilities URL.

    Returns:
        The raw response body. It is not decoded here so the parser can
        honour the encoding given in the XML declaration.

    Raises:
        PermanentTransportError: For failures that will not recover (4xx, DNS).
        TransientTransportError: For failures that may recover (5xx, timeouts).
        TransportError: For unclassified failures.
    """
    if not url or not url.strip():
        raise TransportError(url, "No URL given")

    timeout = httpx.Timeout(
        timeout=settings.http_timeout,
        connect=settings.http_connect_timeout,
    )

    try:
        async with httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            max_redirects=settings.http_max_redirects,
            headers={"User-Agent": settings.http_user_agent},
        ) as client:
            logger.info("Fetching capabilities url=%s", url)
            response = await client.get(url)

            if response.status_code in PERMANENT_STATUS_CODES:
                raise PermanentTransportError(
                    url, f"HTTP {response.status_code}"
                )

            if response.status_code in TRANSIENT_STATUS_CODES:
                raise TransientTransportError(
                    url, f"HTTP {response.status_code}"
                )

            if not response.is_success:
                raise TransportError(url, f"HTTP {response.status_code}")

            body = response.content
            logger.info(
                "Fetched capabilities url=%s (status=%d, size=%d bytes)",
                url,
                response.status_code,
                len(body),
            )
            return body

    except TransportError:
        raise

    except httpx.TimeoutException as exc:
        logger.warning("Timeout fetching url=%s: %s", url, exc)
        raise TransientTransportError(
            url, f"Request timed out after {settings.http_timeout}s"
        ) from exc

    except httpx.TooManyRedirects as exc:
        logger.warning("Too many redirects for url=%s: %s", url, exc)
        raise PermanentTransportError(url, "Too many redirects") from exc

    except httpx.ConnectError as exc:
        error_str = str(exc).lower()
        if any(marker in error_str for marker in DNS_FAILURE_MARKERS):
            logger.warning("DNS resolution failed for url=%s: %s", url, exc)
            raise PermanentTransportError(
                url, f"DNS resolution failed: {exc}"
            ) from exc

        logger.warning("Connection failed for url=%s: %s", url, exc)
        raise TransientTransportError(
            url, f"Connection failed: {exc}"
        ) from exc

    except httpx.InvalidURL as exc:
        logger.warning("Invalid url=%s: %s", url, exc)
        raise PermanentTransportError(url, f"Invalid URL: {exc}") from exc

    except httpx.HTTPError as exc:
        logger.error("Unexpected HTTP error for url=%s: %s", url, exc)
        raise TransientTransportError(url, str(exc)) from exc
