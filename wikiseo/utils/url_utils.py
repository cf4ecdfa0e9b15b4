"""URL helpers for building absolute URLs in meta tags."""
from urllib.parse import urlparse


def protocolize_url(url: str, protocol: str) -> str:
    """Add the request protocol to a URL that has no scheme.

    Wiki URLs are often protocol-relative ("//example.org/wiki/Page").
    Crawlers need absolute URLs, so "{protocol}:" is prepended when the URL
    has no scheme. URLs that already have one are returned unchanged.

    Args:
        url: URL as returned by the host, e.g. from the page's full URL
        protocol: Scheme of the current request, "http" or "https"

    Returns:
        URL with a scheme
    """
    if urlparse(url).scheme == "":
        return f"{protocol}:{url}"

    return url


def is_url(value: str) -> bool:
    """Check if a value is an absolute or protocol-relative URL."""
    return value.startswith("//") or bool(urlparse(value).netloc)
