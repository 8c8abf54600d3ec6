"""Entry title derivation from record URLs.

A credential saved for ``https://accounts.example.co.uk/login`` is stored
as ``example.co.uk`` so that browser extensions matching on the site's
registered domain find it regardless of the subdomain used at save time.
"""

import ipaddress
from urllib.parse import urlsplit

import tldextract

from pif2pass.core.errors import UrlParseError

# Bundled public suffix snapshot only, never fetched over the network.
_extract = tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)


def is_ip_address(value: str) -> bool:
    """Check whether value is a literal IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def title_from_url(url: str) -> str:
    """Derive a store entry title from a URL.

    Args:
        url: URL string from the export record

    Returns:
        ``<domain>.<public suffix>``, the IP address for IP-addressed
        services, or the bare host name when it has no public suffix

    Raises:
        UrlParseError: If no host name can be parsed from the URL
    """
    if is_ip_address(url):
        return url

    try:
        parts = urlsplit(url if "://" in url else f"//{url}")
        host = parts.hostname
    except ValueError as e:
        raise UrlParseError(url, str(e)) from e

    if not host:
        raise UrlParseError(url, "no host name")

    if is_ip_address(host):
        return host

    extracted = _extract(host)
    if not extracted.suffix:
        return host
    if not extracted.domain:
        raise UrlParseError(url, f"'{host}' is a public suffix, not a site")

    return f"{extracted.domain}.{extracted.suffix}"
