"""Blog blueprint routes.

Route precedence is fixed by path shape: ``/`` lists posts, a single path
segment shows one post, and every other path is looked up as a static asset.
"""

import logging

from flask import Blueprint, Response, current_app

from blog.services.renderer import RenderContext

# Blueprint for blog routes
blog_bp = Blueprint("blog_bp", __name__)
logger = logging.getLogger(__name__)

POST_LIST_TEMPLATE = "blog/posts.html"
POST_TEMPLATE = "blog/post.html"

POST_NOT_FOUND_BODY = "Post no encontrado"
ASSET_NOT_FOUND_BODY = "Archivo no encontrado"

# --- Helper Functions ---


def _not_found(body: str) -> Response:
    """Plain-text 404 response."""
    return Response(body, status=404, mimetype="text/plain")


def _new_context() -> RenderContext:
    """Fresh render context with the values every page layout uses."""
    context = RenderContext()
    context.insert("app_name", current_app.config["APP_NAME"])
    return context


# --- Routes ---


@blog_bp.route("/")
def list_posts() -> str:
    """Render every post, unpublished ones included."""
    posts = current_app.post_store.get_all()
    context = _new_context()
    context.insert("posts", posts)
    return current_app.renderer.render(POST_LIST_TEMPLATE, context)


@blog_bp.route("/<post_id>")
def show_post(post_id: str) -> Response | str:
    """Render a single published post.

    Unknown and unpublished posts get the same 404 response.
    """
    post = current_app.post_store.get_by_id(post_id)
    if post is None:
        logger.debug("Post not found: %s", post_id)
        return _not_found(POST_NOT_FOUND_BODY)

    if not post.published:
        logger.info("Post %s requested but not published", post_id)
        return _not_found(POST_NOT_FOUND_BODY)

    context = _new_context()
    context.insert("post", post)
    return current_app.renderer.render(POST_TEMPLATE, context)


@blog_bp.route("/<path:asset_path>")
def static_asset(asset_path: str) -> Response:
    """Serve a file from the static root."""
    asset = current_app.asset_resolver.resolve(asset_path)
    if asset is None:
        return _not_found(ASSET_NOT_FOUND_BODY)
    return Response(asset.data, status=200, content_type=asset.content_type)
