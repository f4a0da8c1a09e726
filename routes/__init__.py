"""Application route package."""
from flask import Blueprint

main_bp = Blueprint('main', __name__)

# pylint: disable=wrong-import-position
# Blueprint must exist before the route modules register with it.
from . import test_pages  # noqa: F401,E402

__all__ = ["main_bp"]
