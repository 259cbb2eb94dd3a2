"""
Upstream font API access.

Builds the css2 request for the parsed families and fetches the stylesheet
in a single attempt.

License: MIT
"""

import http.client
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
from urllib.parse import urlencode

from fontproxy.config import ProxySettings
from fontproxy.exceptions import UpstreamError
from fontproxy.models import FamilyDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamResponse:
    """Successful upstream answer."""
    status_code: int
    text: str
    content_type: Optional[str] = None


def build_upstream_url(
    query: Iterable[Tuple[str, str]],
    families: List[FamilyDescriptor],
    settings: ProxySettings,
) -> str:
    """
    Build the upstream stylesheet URL.

    Every incoming query parameter except ``family`` is copied in order,
    then one ``family`` parameter per descriptor carries its upstream value.

    Args:
        query: Incoming query parameters as (key, value) pairs
        families: Parsed family descriptors
        settings: Proxy settings holding the upstream base URL and path

    Returns:
        Absolute upstream URL
    """
    params = [(key, value) for key, value in query if key != "family"]
    params.extend(("family", family.google_family) for family in families)
    return f"{settings.upstream_url}{settings.css_path}?{urlencode(params)}"


def fetch_css(url: str, user_agent: Optional[str], timeout: float) -> UpstreamResponse:
    """
    Fetch a stylesheet from the upstream font API.

    The user agent is forwarded because the upstream selects font formats
    from it.

    Raises:
        UpstreamError: On any non-200 answer, carrying the upstream body;
            network failures are reported with status 502
    """
    headers = {"User-Agent": user_agent} if user_agent else {}
    request = urllib.request.Request(url, headers=headers)
    logger.info(f"Fetching upstream stylesheet {url}")

    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            status = response.status
            body = response.read()
            content_type = response.headers.get("Content-Type")
    except urllib.error.HTTPError as e:
        logger.warning(f"Upstream returned {e.code} for {url}")
        content_type = e.headers.get("Content-Type") if e.headers else None
        raise UpstreamError(e.code, e.read(), content_type) from e
    except (OSError, http.client.HTTPException) as e:
        logger.error(f"Upstream unreachable: {e}")
        raise UpstreamError(
            502, f"502 Bad Gateway: {e}".encode("utf-8"), "text/plain; charset=utf-8"
        ) from e

    if status != 200:
        logger.warning(f"Upstream returned {status} for {url}")
        raise UpstreamError(status, body, content_type)

    return UpstreamResponse(status_code=status, text=body.decode("utf-8"), content_type=content_type)
