"""
URL shortening through the TinyURL API.

Long links (meeting links, invoice links) are shortened before being
sent in chat messages.  Shortening is best effort: when TinyURL cannot
be reached or answers with an error, the original URL is returned.

No route calls it; it is a helper for code that imports the package,
such as the messaging jobs that send those links.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

TINYURL_API = "https://tinyurl.com/api-create.php"


def shorten_link(original_url: str, client: Optional[httpx.Client] = None) -> str:
    """Return a TinyURL for ``original_url``, or ``original_url`` on failure.

    Parameters
    ----------
    original_url : str
        The URL to shorten.  It is sent URL-encoded as the ``url`` query
        parameter.
    client : Optional[httpx.Client]
        HTTP client to use.  A short-lived client is created when omitted.
    """
    owns_client = client is None
    http = client or httpx.Client(timeout=10)
    try:
        response = http.get(TINYURL_API, params={"url": original_url})
        response.raise_for_status()
        short_url = response.text.strip()
        if not short_url:
            raise ValueError("TinyURL returned an empty body")
        logger.info("URL shortened: %s... -> %s", original_url[:30], short_url)
        return short_url
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Error shortening URL: %s", e)
        return original_url
    finally:
        if owns_client:
            http.close()
