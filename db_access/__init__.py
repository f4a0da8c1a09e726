"""Database access functions organised by domain."""

from ._common import rollback_session, save_entity
from .pages import (
    get_page_benchmarks,
    get_page_by_slug,
    get_page_comments,
    get_page_revisions,
    increment_page_hits,
)

__all__ = [
    'get_page_benchmarks',
    'get_page_by_slug',
    'get_page_comments',
    'get_page_revisions',
    'increment_page_hits',
    'rollback_session',
    'save_entity',
]
