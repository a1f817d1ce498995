"""Main entry point for the Flask web application."""

import logging
import os
from logging import Formatter
from logging.handlers import RotatingFileHandler

import click
from flask import Flask, Response

from blog.api.routes.blog_bp import blog_bp
from blog.core.config import config
from blog.db.store import InMemoryPostStore, PostStore
from blog.services.renderer import RenderError, TemplateRenderer
from blog.services.static_assets import StaticAssetResolver

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s %(filename)s:%(lineno)d"

# Handlers installed on the root logger, keyed by "console" or log file path
_installed_handlers: dict[str, logging.Handler] = {}


def setup_logging(log_path: str = "blog.log", level: int = logging.DEBUG) -> None:
    """
    Configure root logger with console and rotating file handlers.

    Each handler is installed at most once per process, so repeated app
    creation does not duplicate log lines.
    """
    root = logging.getLogger()
    root.setLevel(level)
    log_formatter = Formatter(_LOG_FORMAT)

    if "console" not in _installed_handlers:
        console = logging.StreamHandler()
        console.setFormatter(log_formatter)
        root.addHandler(console)
        _installed_handlers["console"] = console

    if log_path and log_path not in _installed_handlers:
        file_handler = RotatingFileHandler(log_path, maxBytes=2 * 1024 * 1024, backupCount=5)
        file_handler.setFormatter(log_formatter)
        root.addHandler(file_handler)
        _installed_handlers[log_path] = file_handler


def create_app(
    config_name: str = "default",
    post_store: PostStore | None = None,
    renderer: TemplateRenderer | None = None,
    asset_resolver: StaticAssetResolver | None = None,
) -> Flask:
    """Factory function to create and configure the Flask app.

    Collaborators that are not passed in are built from the configuration.
    Any failure here (bad config, unreadable posts, broken templates) is
    raised to the caller and the app is never created.
    """
    config_cls = config.get(config_name, config["default"])
    setup_logging(config_cls.LOG_PATH, config_cls.LOG_LEVEL)

    # Static files are served by the blog blueprint's catch-all route
    flask_app = Flask(__name__, static_folder=None)

    # Load and validate config
    flask_app.config.from_object(config_cls)
    try:
        config_cls.validate()
    except ValueError as err:
        flask_app.logger.error("Configuration validation failed: %s", err)
        raise

    # Initialize shared, read-only services
    if post_store is None:
        post_store = InMemoryPostStore.from_json_file(flask_app.config["POSTS_PATH"])
    if renderer is None:
        renderer = TemplateRenderer.from_directory(flask_app.config["TEMPLATE_ROOT"])
    if asset_resolver is None:
        asset_resolver = StaticAssetResolver(flask_app.config["STATIC_ROOT"])

    # Attach to app context
    flask_app.post_store = post_store  # type: ignore[attr-defined]
    flask_app.renderer = renderer  # type: ignore[attr-defined]
    flask_app.asset_resolver = asset_resolver  # type: ignore[attr-defined]

    # Register blueprints
    flask_app.register_blueprint(blog_bp)

    @flask_app.errorhandler(RenderError)
    def handle_render_error(err: RenderError) -> Response:
        """Fail the request with a generic 500 when a template cannot be rendered."""
        flask_app.logger.exception("Render failure: %s | template=%s", err, err.template_name)
        return Response("Internal Server Error", status=500, mimetype="text/plain")

    # CLI commands
    @flask_app.cli.command("list-posts")
    def list_posts_command() -> None:
        """List every post with its publication state."""
        for post in flask_app.post_store.get_all():
            state = "published" if post.published else "draft"
            click.echo(f"{post.id}\t{state}\t{post.title}")

    @flask_app.cli.command("check-templates")
    def check_templates_command() -> None:
        """Print the names of the compiled templates."""
        for name in flask_app.renderer.template_names:
            click.echo(name)

    flask_app.logger.info("Application initialized successfully")
    return flask_app


def main() -> None:
    """Serve the blog on the configured host and port."""
    app = create_app(os.getenv("FLASK_ENV", "default"))
    app.run(host=app.config["HOST"], port=app.config["PORT"], threaded=True)


if __name__ == "__main__":
    main()
