"""Helpers for rendering user-supplied links on test pages."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from markupsafe import Markup, escape

LINK_SCHEMES = ("http", "https")


def _normalize_url(value: Optional[str]) -> str:
    """Return a cleaned URL string suitable for use in markup."""
    if not value:
        return ""
    return value.strip()


def external_url(value: Optional[str]) -> Optional[str]:
    """Return *value* as an http(s) URL, or None when it cannot be linked.

    Bare hosts such as ``example.com`` get an ``http://`` prefix. Any other
    scheme (``javascript:``, ``data:``) is refused.
    """
    url = _normalize_url(value)
    if not url:
        return None

    scheme = urlsplit(url).scheme.lower()
    if not scheme:
        return f"http://{url.lstrip('/')}"
    if scheme in LINK_SCHEMES:
        return url
    return None


def render_author(name: Optional[str], url: Optional[str]) -> Markup:
    """Return the author name, linked when *url* is a usable web address."""
    if not name:
        return Markup("")
    href = external_url(url)
    if href is None:
        return escape(name)
    return Markup(f'<a href="{escape(href)}" rel="nofollow">{escape(name)}</a>')


__all__ = ["LINK_SCHEMES", "external_url", "render_author"]
