"""Per-session page hit tracking for the Flask app."""

from __future__ import annotations

import logging
from typing import Callable, Dict

from flask import after_this_request, current_app, session

from page_service import PageService

logger = logging.getLogger(__name__)

HITS_SESSION_KEY = "hits"
SINK_EXTENSION_KEY = "perfpages.diagnostic_sink"

DiagnosticSink = Callable[[BaseException], None]


def make_session_permanent() -> None:
    """Ensure the user's session is marked as permanent."""
    session.permanent = True


def get_session_hits() -> Dict[str, bool]:
    """Return a copy of the session hit-set.

    Keys are page ids as strings because the session is stored as JSON.
    """
    hits = session.get(HITS_SESSION_KEY)
    if not isinstance(hits, dict):
        return {}
    return dict(hits)


def has_seen_page(page_id: int) -> bool:
    return bool(get_session_hits().get(str(page_id)))


def mark_page_seen(page_id: int) -> None:
    hits = get_session_hits()
    hits[str(page_id)] = True
    # Reassign so Flask notices the change
    session[HITS_SESSION_KEY] = hits


def log_hit_update_failure(error: BaseException) -> None:
    """Default diagnostic sink: record the failure at debug level."""
    logger.debug("Failed to update page hits: %s", error, exc_info=error)


def get_diagnostic_sink() -> DiagnosticSink:
    return current_app.extensions.get(SINK_EXTENSION_KEY, log_hit_update_failure)


def dispatch_hit_update(page_service: PageService, page_id: int, sink: DiagnosticSink) -> None:
    """Call ``update_hits`` and hand any failure to *sink* instead of raising."""
    try:
        page_service.update_hits(page_id)
    except Exception as exc:  # pylint: disable=broad-exception-caught  # Hit counting must never fail the page
        try:
            sink(exc)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Diagnostic sink failed while reporting: %s", exc)


def track_hit(page_id: int, page_service: PageService) -> bool:
    """Count a hit for *page_id* once per session.

    The update is attached to the response's close callbacks, so it runs
    after the status and body have been handed to the server. The page
    renders the same whether or not counting succeeds.

    Returns:
        True when an update was scheduled, False when the session had
        already seen the page.
    """
    if has_seen_page(page_id):
        return False

    mark_page_seen(page_id)
    flask_app = current_app._get_current_object()  # pylint: disable=protected-access
    sink = get_diagnostic_sink()

    def _update_hits() -> None:
        # The request context is gone by the time the response closes
        with flask_app.app_context():
            dispatch_hit_update(page_service, page_id, sink)

    @after_this_request
    def _schedule_hit_update(response):
        response.call_on_close(_update_hits)
        return response

    return True


__all__ = [
    'DiagnosticSink',
    'HITS_SESSION_KEY',
    'SINK_EXTENSION_KEY',
    'dispatch_hit_update',
    'get_diagnostic_sink',
    'get_session_hits',
    'has_seen_page',
    'log_hit_update_failure',
    'make_session_permanent',
    'mark_page_seen',
    'track_hit',
]
