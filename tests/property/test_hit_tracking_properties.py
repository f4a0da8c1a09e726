"""Property tests: hits are counted once per session per page."""

import os

import pytest
from hypothesis import given

os.environ.setdefault("PERFPAGES_SKIP_MODULE_APP", "1")

from app import create_app  # noqa: E402
from tests.page_stubs import StubPageService, make_page  # noqa: E402
from tests.property.strategies import slugs, visit_sequences  # noqa: E402


@pytest.fixture(scope="module")
def stub_app():
    service = StubPageService()

    def lookup(slug, revision):
        page_id = int(slug.rsplit("-", 1)[1])
        return make_page(id=page_id, slug=slug), [], [], []

    service.lookup = lookup
    flask_app = create_app(
        {"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:"},
        page_service=service,
    )
    return flask_app, service


@given(visits=visit_sequences)
def test_each_page_is_counted_once_per_session(stub_app, visits):
    flask_app, service = stub_app
    service.hit_calls = []
    client = flask_app.test_client()

    for page_id in visits:
        assert client.get(f"/page-{page_id}", buffered=True).status_code == 200

    assert sorted(service.hit_calls) == sorted(set(visits))
    assert service.hit_calls == list(dict.fromkeys(visits))


@given(slug=slugs)
def test_lookup_receives_slug_unchanged(stub_app, slug):
    flask_app, service = stub_app
    service.get_calls = []
    service.error = Exception("Not found")
    try:
        response = flask_app.test_client().get(f"/{slug}")
    finally:
        service.error = None

    assert response.status_code == 404
    assert service.get_calls == [(slug, None)]
