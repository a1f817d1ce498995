"""Static asset lookup below a fixed root directory."""

import logging
import mimetypes
import os
import posixpath
from dataclasses import dataclass

from werkzeug.security import safe_join

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class StaticAsset:
    """File contents plus the content type to serve them with."""

    data: bytes
    content_type: str


class StaticAssetResolver:
    """Map request paths to files under ``static_root``."""

    def __init__(self, static_root: str) -> None:
        self.static_root = os.path.abspath(static_root)

    def resolve(self, path: str) -> StaticAsset | None:
        """Return the asset for ``path``, or None when no such file exists.

        Paths that would leave the static root are treated as absent, as are
        paths that only name a file once normalized (trailing or doubled slashes).
        """
        relative = path.lstrip("/")
        if not relative or posixpath.normpath(relative) != relative:
            return None

        full_path = safe_join(self.static_root, relative)
        if full_path is None or not os.path.isfile(full_path):
            logger.debug("Static asset not found: %s", path)
            return None

        try:
            with open(full_path, "rb") as fh:
                data = fh.read()
        except OSError as e:
            logger.warning("Static asset %s could not be read: %s", full_path, e)
            return None

        content_type, encoding = mimetypes.guess_type(full_path)
        if content_type is None or encoding is not None:
            content_type = DEFAULT_CONTENT_TYPE
        elif content_type.startswith("text/") or content_type in ("application/javascript", "application/json"):
            content_type = f"{content_type}; charset=utf-8"
        return StaticAsset(data=data, content_type=content_type)
