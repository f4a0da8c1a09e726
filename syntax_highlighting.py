"""Utilities for rendering syntax-highlighted benchmark code."""

from __future__ import annotations

from typing import Optional

from markupsafe import Markup, escape
from pygments import highlight
from pygments.formatters import HtmlFormatter  # pylint: disable=no-name-in-module  # HtmlFormatter exists
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

CSS_SELECTOR = ".codehilite"


def highlight_source(content: Optional[str], language: Optional[str] = None) -> Optional[str]:
    """Return highlighted HTML for *content*.

    Args:
        content: The source text to highlight.
        language: Pygments lexer name such as ``"javascript"`` or ``"html"``.
            Unknown or missing names fall back to plain text.

    Returns:
        The highlighted HTML fragment, or ``None`` when pygments fails.
    """
    if content is None:
        return None

    lexer = None
    if language:
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            lexer = None

    if lexer is None:
        lexer = TextLexer()

    try:
        formatter = HtmlFormatter(style="default", nowrap=True)
        return highlight(content, lexer, formatter)
    except (ValueError, TypeError, AttributeError):
        return None


def highlight_code(content: Optional[str], language: Optional[str] = None) -> Markup:
    """Template helper: highlighted markup, or escaped text when highlighting fails."""
    if not content:
        return Markup("")

    highlighted = highlight_source(content, language)
    if highlighted is None:
        return escape(content)
    return Markup(highlighted)


def syntax_css() -> str:
    """Return the pygments stylesheet used by highlighted snippets."""
    return HtmlFormatter(style="default").get_style_defs(CSS_SELECTOR)


__all__ = ["CSS_SELECTOR", "highlight_code", "highlight_source", "syntax_css"]
