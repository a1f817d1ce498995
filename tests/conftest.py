"""Shared test fixtures for the blog server."""

import pytest

from blog.core.config import PACKAGE_DIR
from blog.db.models import Post
from blog.db.store import InMemoryPostStore
from blog.services.renderer import TemplateRenderer
from blog.services.static_assets import StaticAssetResolver
from blog.web.main import create_app


@pytest.fixture
def sample_posts() -> list[Post]:
    """One published and one unpublished post."""
    return [
        Post(id="a", title="Post A", body="Contenido del post A", published=True),
        Post(id="b", title="Post B", body="Contenido del post B", published=False),
    ]


@pytest.fixture
def post_store(sample_posts) -> InMemoryPostStore:
    return InMemoryPostStore(sample_posts)


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the packaged templates."""
    return TemplateRenderer.from_directory(str(PACKAGE_DIR / "templates"))


@pytest.fixture
def static_root(tmp_path):
    """Temporary static root with a stylesheet, a binary file and a file named like a post."""
    root = tmp_path / "static"
    (root / "css").mkdir(parents=True)
    (root / "css" / "site.css").write_text("body { color: black; }\n", encoding="utf-8")
    (root / "img").mkdir()
    (root / "img" / "pixel.bin").write_bytes(bytes(range(256)))
    (root / "a").write_text("static file named like a post", encoding="utf-8")
    return root


@pytest.fixture
def app(post_store, renderer, static_root):
    return create_app(
        "testing",
        post_store=post_store,
        renderer=renderer,
        asset_resolver=StaticAssetResolver(str(static_root)),
    )


@pytest.fixture
def client(app):
    return app.test_client()
