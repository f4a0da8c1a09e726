"""Page lookup and hit counting behind a replaceable service interface.

The test-page route only talks to a :class:`PageService`. The application
factory installs :class:`DatabasePageService` unless a different service is
injected, which is how tests substitute doubles without patching modules.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from db_access import (
    get_page_benchmarks,
    get_page_by_slug,
    get_page_comments,
    get_page_revisions,
    increment_page_hits,
    rollback_session,
)

logger = logging.getLogger(__name__)

EXTENSION_KEY = "perfpages.page_service"

NOT_FOUND_MESSAGE = "Not found"

PageLookup = Tuple[Any, List[Any], List[Any], List[Any]]


class PageServiceError(Exception):
    """Raised when the page service cannot complete an operation."""


class PageNotFoundError(PageServiceError):
    """Raised when no page matches the requested slug, revision or id."""

    def __init__(self, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)


def status_for_error(error: BaseException) -> int:
    """Return the HTTP status for a failed page lookup.

    Tagged errors are matched on type. Untagged errors whose message is
    exactly ``"Not found"`` are still treated as missing pages; everything
    else is a server error.
    """
    if isinstance(error, PageNotFoundError):
        return 404
    if str(error) == NOT_FOUND_MESSAGE:
        return 404
    return 500


class PageService:
    """Interface used by the test-page route."""

    def get_by_slug(self, slug: str, revision: Optional[int] = None) -> PageLookup:
        """Return ``(page, benchmarks, revisions, comments)`` for *slug*."""
        raise NotImplementedError

    def update_hits(self, page_id: int) -> None:
        """Count one more hit for *page_id*."""
        raise NotImplementedError


class DatabasePageService(PageService):
    """Page service backed by the application's SQLAlchemy models."""

    def get_by_slug(self, slug: str, revision: Optional[int] = None) -> PageLookup:
        try:
            page = get_page_by_slug(slug, revision)
            if page is None:
                raise PageNotFoundError()

            benchmarks = get_page_benchmarks(page.id)
            revisions = get_page_revisions(slug)
            comments = get_page_comments(page.id)
        except SQLAlchemyError as exc:
            rollback_session()
            raise PageServiceError(f"Failed to load page {slug!r}: {exc}") from exc

        return page, benchmarks, revisions, comments

    def update_hits(self, page_id: int) -> None:
        try:
            updated = increment_page_hits(page_id)
        except SQLAlchemyError as exc:
            rollback_session()
            raise PageServiceError(f"Failed to update hits for page {page_id}: {exc}") from exc

        if not updated:
            raise PageNotFoundError()
        logger.debug("Counted hit for page %s", page_id)


def get_page_service() -> PageService:
    """Return the page service installed on the current application."""
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'DatabasePageService',
    'EXTENSION_KEY',
    'NOT_FOUND_MESSAGE',
    'PageLookup',
    'PageNotFoundError',
    'PageService',
    'PageServiceError',
    'get_page_service',
    'status_for_error',
]
