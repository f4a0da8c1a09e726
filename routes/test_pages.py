"""Benchmark test page routes."""

from __future__ import annotations

import logging
from typing import Optional

from flask import abort, render_template

from hit_tracking import track_hit
from page_service import get_page_service, status_for_error

from . import main_bp

logger = logging.getLogger(__name__)

STANDARD_TEMPLATE = "test.html"
HIGHLIGHTED_TEMPLATE = "test_highlighted.html"


def select_template(visible: Optional[str]) -> str:
    """Published pages get the standard view; anything else is previewed."""
    return STANDARD_TEMPLATE if visible == "y" else HIGHLIGHTED_TEMPLATE


@main_bp.route("/<slug>")
@main_bp.route("/<slug>/<int:revision>")
def test_page(slug: str, revision: Optional[int] = None):
    """Render a test page by slug, counting one hit per session."""
    page_service = get_page_service()

    try:
        page, benchmarks, revisions, comments = page_service.get_by_slug(slug, revision)
    except Exception as exc:  # pylint: disable=broad-exception-caught  # Status depends on the error
        status = status_for_error(exc)
        if status == 404:
            logger.info("No test page for slug %r revision %r", slug, revision)
        else:
            logger.error("Failed to load test page %r: %s", slug, exc, exc_info=exc)
        abort(status)

    track_hit(page.id, page_service)

    return render_template(
        select_template(page.visible),
        page=page,
        benchmarks=benchmarks,
        revisions=revisions,
        comments=comments,
    )
