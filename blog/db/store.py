"""Read-only post sources."""

import json
import logging
from collections.abc import Iterable
from typing import Protocol

from blog.db.models import Post

logger = logging.getLogger(__name__)


class PostStoreError(Exception):
    """Raised when a post source cannot be loaded."""


class PostStore(Protocol):
    """Interface the request handlers consume."""

    def get_all(self) -> list[Post]: ...

    def get_by_id(self, post_id: str) -> Post | None: ...


class InMemoryPostStore:
    """
    Post store backed by an immutable, in-memory snapshot.

    Posts keep the order they were given in. The snapshot is built once and
    never changes, so one instance can be shared by every request thread.
    """

    def __init__(self, posts: Iterable[Post] = ()) -> None:
        self._posts = tuple(posts)
        index: dict[str, Post] = {}
        for post in self._posts:
            if post.id in index:
                raise PostStoreError(f"Duplicate post id: {post.id}")
            index[post.id] = post
        self._index = index

    def __len__(self) -> int:
        return len(self._posts)

    @classmethod
    def from_json_file(cls, path: str) -> "InMemoryPostStore":
        """
        Load posts from a JSON file holding an array of post objects.

        Args:
            path: Location of the JSON file.

        Raises:
            PostStoreError: If the file is unreadable or a record is invalid.
        """
        try:
            with open(path, encoding="utf-8") as fh:
                records = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to read posts from %s: %s", path, e)
            raise PostStoreError(f"Failed to read posts from {path}: {e}") from e

        if not isinstance(records, list):
            raise PostStoreError(f"Expected a JSON array of posts in {path}")

        posts = []
        for i, record in enumerate(records):
            if not isinstance(record, dict):
                raise PostStoreError(f"Post record {i} in {path} is not an object")
            try:
                posts.append(Post.from_dict(record))
            except (TypeError, ValueError) as e:
                raise PostStoreError(f"Invalid post record {i} in {path}: {e}") from e

        store = cls(posts)
        logger.info("Loaded %d posts from %s", len(store), path)
        return store

    def get_all(self) -> list[Post]:
        """Return every post, published or not, in source order."""
        return list(self._posts)

    def get_by_id(self, post_id: str) -> Post | None:
        """Return the post with the given id, or None."""
        return self._index.get(post_id)
