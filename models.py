from datetime import datetime, timezone

from database import db


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Page(db.Model):
    __tablename__ = 'pages'
    __table_args__ = (
        db.UniqueConstraint('slug', 'revision', name='uq_pages_slug_revision'),
    )

    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(255), nullable=False, index=True)
    revision = db.Column(db.Integer, nullable=False, default=1)
    browserscope_id = db.Column(db.String(255), nullable=False, default='')
    title = db.Column(db.String(255), nullable=False)
    info = db.Column(db.Text, nullable=False, default='')
    setup = db.Column(db.Text, nullable=False, default='')
    teardown = db.Column(db.Text, nullable=False, default='')
    init_html = db.Column(db.Text, nullable=False, default='')
    visible = db.Column(db.String(1), nullable=False, default='y')
    author = db.Column(db.String(255), nullable=True)
    author_email = db.Column(db.String(255), nullable=True)
    author_url = db.Column(db.String(255), nullable=True)
    hits = db.Column(db.Integer, nullable=False, default=0)
    published = db.Column(db.DateTime, default=_utcnow)
    updated = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f'<Page {self.slug} r{self.revision}>'


class Benchmark(db.Model):
    """A single code snippet compared on a page revision."""

    __tablename__ = 'benchmarks'

    id = db.Column(db.Integer, primary_key=True)
    page_id = db.Column(db.Integer, db.ForeignKey('pages.id'), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    defer = db.Column(db.String(1), nullable=False, default='n')
    code = db.Column(db.Text, nullable=False, default='')

    def __repr__(self) -> str:
        return f'<Benchmark {self.title!r} page={self.page_id}>'


class Comment(db.Model):
    __tablename__ = 'comments'

    id = db.Column(db.Integer, primary_key=True)
    page_id = db.Column(db.Integer, db.ForeignKey('pages.id'), nullable=False, index=True)
    author = db.Column(db.String(255), nullable=True)
    author_email = db.Column(db.String(255), nullable=True)
    author_url = db.Column(db.String(255), nullable=True)
    content = db.Column(db.Text, nullable=False)
    published = db.Column(db.DateTime, default=_utcnow, index=True)

    def __repr__(self) -> str:
        return f'<Comment {self.id} page={self.page_id}>'
