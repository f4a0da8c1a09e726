"""Page, benchmark and comment queries."""

from typing import List, Optional

from sqlalchemy import update

from database import db
from models import Benchmark, Comment, Page


def get_page_by_slug(slug: str, revision: Optional[int] = None) -> Optional[Page]:
    """Return the requested revision of *slug*, or its latest when *revision* is None."""
    query = Page.query.filter_by(slug=slug)
    if revision is not None:
        return query.filter_by(revision=revision).first()
    return query.order_by(Page.revision.desc()).first()


def get_page_revisions(slug: str) -> List[Page]:
    """Return every revision of *slug*, oldest first."""
    return Page.query.filter_by(slug=slug).order_by(Page.revision.asc()).all()


def get_page_benchmarks(page_id: int) -> List[Benchmark]:
    return Benchmark.query.filter_by(page_id=page_id).order_by(Benchmark.id.asc()).all()


def get_page_comments(page_id: int) -> List[Comment]:
    return (
        Comment.query
        .filter_by(page_id=page_id)
        .order_by(Comment.published.asc(), Comment.id.asc())
        .all()
    )


def increment_page_hits(page_id: int) -> int:
    """Add one hit to *page_id* in a single statement.

    Returns the number of rows updated (0 when the page does not exist).
    """
    result = db.session.execute(
        update(Page)
        .where(Page.id == page_id)
        # Keep the edit timestamp; a hit is not an edit
        .values(hits=Page.hits + 1, updated=Page.updated)
    )
    db.session.commit()
    return result.rowcount or 0
