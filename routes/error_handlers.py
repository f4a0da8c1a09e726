"""Error handler functions for HTTP errors."""

import logging

from flask import render_template, request
from sqlalchemy.exc import SQLAlchemyError

from db_access import rollback_session

logger = logging.getLogger(__name__)


def not_found_error(error):  # pylint: disable=unused-argument  # Required by Flask error handler
    """Render the 404 page for an unknown slug or revision."""
    return render_template('404.html', path=request.path), 404


def internal_error(error):
    """
    Render the 500 page.

    The database session is rolled back first so a failed transaction does
    not leak into the next request handled by this worker.

    Args:
        error: The exception or HTTP error that caused the 500

    Returns:
        Rendered 500 error template and status code
    """
    try:
        rollback_session()
    except SQLAlchemyError:
        logger.exception("Rollback failed while handling a server error")

    original = getattr(error, "original_exception", None) or error
    logger.error("Server error on %s: %s", request.path, original)

    return (
        render_template(
            '500.html',
            path=request.path,
            exception_type=type(original).__name__,
        ),
        500,
    )


__all__ = [
    'internal_error',
    'not_found_error',
]
