"""Flask application that renders a blog from an in-memory post store.

``flask --app blog run`` finds :func:`create_app` here; the web layer is only
imported when the factory is called.
"""

from .version import __version__

__all__ = ["create_app", "__version__"]


def create_app(config_name: str = "default", **collaborators):
    """Build the blog app; keyword arguments are passed to ``blog.web.main.create_app``."""
    from .web.main import create_app as build_app  # pylint:disable=import-outside-toplevel

    return build_app(config_name, **collaborators)
